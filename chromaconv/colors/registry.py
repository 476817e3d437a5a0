from __future__ import annotations
import logging
from typing import Any, Optional, Union

from ..errors import InvalidModel
from ..types.color_types import ColorPayload, ModelTag
from ..types.model_type import ColorModel
from ..utils.validation import check_model
from .color_base import ColorBase
from .hex import Hex
from .hsl import Hsl
from .hsv import Hsv
from .hwb import Hwb
from .rgb import Rgb

logger = logging.getLogger(__name__)

ColorValue = Union[Hex, Rgb, Hsl, Hwb, Hsv]


def build_registry(*classes: type[ColorBase]) -> dict[ColorModel, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}


model_to_class = build_registry(Hex, Rgb, Hsl, Hwb, Hsv)


def get_color_class(model: ModelTag) -> type[ColorBase]:
    return model_to_class[check_model(model, InvalidModel)]


def model_of(color: Any) -> ColorModel:
    """Return the model tag of a color value, :class:`InvalidModel` for anything else."""
    if isinstance(color, ColorBase):
        return color.mode
    raise InvalidModel(
        type(color).__name__,
        f"Expected a Hex, Rgb, Hsl, Hwb or Hsv value, got {type(color).__name__}: {color!r}",
    )


def as_color(payload: ColorValue | ColorPayload, model: Optional[ModelTag] = None) -> ColorValue:
    """
    Build a typed color value from a raw payload.

    Args:
        payload: A color value, a hex string, a 3-sequence or a field mapping
        model: Model of ``payload``. Required unless ``payload`` is already typed.

    >>> as_color({"red": 64, "green": 98, "blue": 115}, "rgb")
    Rgb(red=64, green=98, blue=115)
    """
    if model is None:
        model_of(payload)
        return payload
    color_class = get_color_class(model)
    logger.debug("Building %s color from %r", color_class.mode.value, payload)
    return color_class.coerce(payload)  # type: ignore[attr-defined]
