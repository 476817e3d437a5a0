from __future__ import annotations
from typing import Any, ClassVar

from ..types.model_type import ColorModel, HEX_PREFIX
from ..utils.validation import check_hex
from .color_base import ColorBase


class Hex(ColorBase, str):
    """
    A 6-digit hex color.

    Accepts ``"406273"`` or ``"#406273"`` in either case and stores the
    canonical form ``"#406273"``.
    """

    __slots__ = ()

    mode: ClassVar[ColorModel] = ColorModel.HEX

    def __new__(cls, value: Any):
        return super().__new__(cls, HEX_PREFIX + check_hex(value))

    @classmethod
    def coerce(cls, value: Any) -> Hex:
        if isinstance(value, cls):
            return value
        cls._reject_other_model(value)
        return cls(value)

    @property
    def digits(self) -> str:
        """The 6 hex digits without the ``#`` prefix."""
        return self[len(HEX_PREFIX):]

    def __repr__(self) -> str:
        return f"Hex({str.__repr__(self)})"
