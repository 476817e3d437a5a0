from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterable, Mapping, Tuple

from ..errors import ConversionError, InvalidModel
from ..types.model_type import ColorModel
from ..utils.validation import check_channels


class ColorBase:
    """
    Common root of the five color value types.

    Instances are immutable; the subclass carries its model tag in ``mode``.
    ``convert`` and ``all_models`` are bound in :mod:`chromaconv.colors.color`.
    """

    __slots__ = ()

    mode: ClassVar[ColorModel]
    convert: Callable[..., ColorBase]
    all_models: Callable[..., Any]

    @classmethod
    def _reject_other_model(cls, value: Any) -> None:
        if isinstance(value, ColorBase) and not isinstance(value, cls):
            raise InvalidModel(
                value.mode.value,
                f"Expected a {cls.mode.value} color, got a {value.mode.value} color",
            )


class ChannelColor(ColorBase):
    """
    Three-channel color stored as a named tuple.

    Channels are validated on construction so every instance satisfies its
    model's invariant. Subclasses list the named tuple holding the fields
    after this class in their bases.
    """

    __slots__ = ()

    _fields: ClassVar[Tuple[str, ...]]

    def __new__(cls, *args: Any, **kwargs: Any):
        # Let the named tuple bind positional/keyword arguments to fields first.
        try:
            raw = super().__new__(cls, *args, **kwargs)  # type: ignore[call-arg]
        except TypeError as exc:
            raise ConversionError(
                f"{cls.mode.value} expects {len(cls._fields)} channels {cls._fields}, "
                f"got {len(args) + len(kwargs)}: {args!r} {kwargs!r}"
            ) from exc
        channels = check_channels(cls.mode, tuple(raw))  # type: ignore[arg-type]
        return tuple.__new__(cls, channels)

    @classmethod
    def _make(cls, iterable: Iterable[Any]):
        return cls(*iterable)

    @classmethod
    def coerce(cls, value: Any):
        """
        Build an instance from an instance, a 3-sequence or a field mapping.

        Raises:
            InvalidModel: ``value`` is a color of another model
            OutOfRangeChannel: a channel fails validation
            ConversionError: ``value`` has the wrong shape
        """
        if isinstance(value, cls):
            return value
        cls._reject_other_model(value)

        if isinstance(value, Mapping):
            try:
                return cls(**value)
            except TypeError as exc:
                raise ConversionError(
                    f"{cls.mode.value} expects the fields {cls._fields}, got {sorted(value)}"
                ) from exc

        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise ConversionError(
                f"{cls.mode.value} expects a sequence or mapping of channels, got {value!r}"
            )
        values = tuple(value)
        if len(values) != len(cls._fields):
            raise ConversionError(
                f"{cls.mode.value} expects {len(cls._fields)} channels {cls._fields}, got {len(values)}"
            )
        return cls(*values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase) and other.mode != self.mode:
            return False
        return tuple.__eq__(self, other)  # type: ignore[arg-type]

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = tuple.__hash__
