"""
Typed errors raised by the conversion engine.

Every failure derives from :class:`ConversionError`, itself a ``ValueError``,
so callers can catch the whole family or a single kind.
"""
from __future__ import annotations
from typing import Any, Tuple

from .types.color_types import Scalar


class ConversionError(ValueError):
    """Base class for every error raised by chromaconv."""


class MalformedHex(ConversionError):
    """A hex string is not exactly 6 hex digits after stripping ``#``."""

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed hex color {value!r}: {reason}")


class OutOfRangeChannel(ConversionError):
    """A numeric channel lies outside its model's interval or has the wrong type."""

    def __init__(
        self,
        model: str,
        field: str,
        value: Any,
        interval: Tuple[Scalar, Scalar],
        reason: str | None = None,
    ) -> None:
        self.model = model
        self.field = field
        self.value = value
        self.interval = interval
        low, high = interval
        detail = reason or f"expected a value in [{low}, {high}]"
        super().__init__(f"{model} channel {field!r} got {value!r}: {detail}")


class InvalidModel(ConversionError):
    """The value or tag is not one of the five supported color models."""

    def __init__(self, model: Any, reason: str | None = None) -> None:
        self.model = model
        super().__init__(reason or f"Unknown color model: {model!r}")


class UnsupportedTarget(ConversionError):
    """The requested target model is not one of the five supported models."""

    def __init__(self, target: Any, reason: str | None = None) -> None:
        self.target = target
        super().__init__(reason or f"Unsupported target color model: {target!r}")
