"""
Input validation shared by every conversion entry point.

Nothing here clamps: a value outside its interval is reported with the
offending field and value, never pulled back into range.
"""
from __future__ import annotations
import logging
import numbers
from typing import Any, Tuple

import numpy as np

from ..errors import ConversionError, InvalidModel, MalformedHex, OutOfRangeChannel
from ..types.color_types import Scalar, ScalarVector
from ..types.model_type import (
    ColorModel,
    HEX_CHARSET,
    HEX_DIGITS,
    HEX_PREFIX,
    model_fields,
    model_maxima,
)

logger = logging.getLogger(__name__)


def check_channel(
    model: ColorModel,
    field: str,
    value: Any,
    maximum: Scalar,
    *,
    exclusive: bool = False,
    integral: bool = False,
) -> Scalar:
    """
    Validate a single channel and return it as a plain ``int`` or ``float``.

    Args:
        model: Model the channel belongs to, used in the error message
        field: Channel name (``"red"``, ``"hue"``, ...)
        value: Candidate value
        maximum: Upper bound of the channel interval, lower bound is 0
        exclusive: Whether ``maximum`` itself is out of range (hue)
        integral: Whether the channel only accepts integers (RGB)

    Raises:
        OutOfRangeChannel: non-numeric, non-integral where required, NaN or out of range
    """
    interval = (0, maximum)
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        logger.debug("Rejected %s.%s=%r: not a number", model.value, field, value)
        raise OutOfRangeChannel(model.value, field, value, interval, "expected a number")
    if integral and not isinstance(value, numbers.Integral):
        logger.debug("Rejected %s.%s=%r: not an integer", model.value, field, value)
        raise OutOfRangeChannel(model.value, field, value, interval, "expected an integer")

    in_range = 0 <= value < maximum if exclusive else 0 <= value <= maximum
    if not in_range:
        logger.debug("Rejected %s.%s=%r: out of range", model.value, field, value)
        upper = ")" if exclusive else "]"
        raise OutOfRangeChannel(
            model.value, field, value, interval,
            f"expected a value in [0, {maximum}{upper}",
        )
    return int(value) if isinstance(value, numbers.Integral) else float(value)


def check_channels(model: ColorModel, values: ScalarVector) -> Tuple[Scalar, ...]:
    """Validate the three channels of a numeric model, in field order."""
    fields = model_fields[model]
    if len(values) != len(fields):
        raise ConversionError(
            f"{model.value} expects {len(fields)} channels {fields}, got {len(values)}"
        )
    return tuple(
        check_channel(
            model, field, value, maximum,
            exclusive=field == "hue",
            integral=model == ColorModel.RGB,
        )
        for field, value, maximum in zip(fields, values, model_maxima[model])
    )


def check_hex(value: Any) -> str:
    """
    Validate a hex color and return its 6 digits, lowercased, without ``#``.

    Raises:
        MalformedHex: not a string, wrong length or non-hex characters
    """
    if not isinstance(value, str):
        logger.debug("Rejected hex %r: not a string", value)
        raise MalformedHex(value, "expected a string")

    digits = value[len(HEX_PREFIX):] if value.startswith(HEX_PREFIX) else value
    if len(digits) != HEX_DIGITS:
        logger.debug("Rejected hex %r: %d digits", value, len(digits))
        raise MalformedHex(value, f"expected {HEX_DIGITS} hex digits, got {len(digits)}")
    if not HEX_CHARSET.issuperset(digits):
        logger.debug("Rejected hex %r: non-hex characters", value)
        raise MalformedHex(value, "contains non-hex characters")
    return digits.lower()


def check_array(model: ColorModel, colors: np.ndarray) -> np.ndarray:
    """
    Vectorized channel validation for arrays of shape ``(..., 3)``.

    Returns the array as ``float``. The error names the first offending value.
    """
    arr = np.asarray(colors)
    fields = model_fields[model]
    if arr.ndim == 0 or arr.shape[-1] != len(fields):
        raise ConversionError(
            f"{model.value} expects last dimension to be {len(fields)}, got shape {arr.shape}"
        )
    if not (np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)):
        raise ConversionError(f"{model.value} expects a numeric array, got dtype {arr.dtype}")

    arr = arr.astype(float)
    for index, (field, maximum) in enumerate(zip(fields, model_maxima[model])):
        channel = arr[..., index]
        exclusive = field == "hue"
        upper_ok = channel < maximum if exclusive else channel <= maximum
        bad = ~((channel >= 0) & upper_ok)
        if model == ColorModel.RGB:
            bad |= np.mod(channel, 1) != 0
        if np.any(bad):
            offender = channel[bad].flat[0].item()
            logger.debug("Rejected %s array: %s=%r", model.value, field, offender)
            raise OutOfRangeChannel(model.value, field, offender, (0, maximum))
    return arr


def check_model(tag: Any, error: type[Exception] = InvalidModel) -> ColorModel:
    """
    Resolve a model tag (``ColorModel`` or its case-insensitive name).

    Raises ``error`` (``InvalidModel`` or ``UnsupportedTarget``) for anything else.
    """
    if isinstance(tag, ColorModel):
        return tag
    if isinstance(tag, str):
        try:
            return ColorModel(tag.strip().lower())
        except ValueError:
            pass
    logger.debug("Rejected color model tag %r", tag)
    raise error(tag)
