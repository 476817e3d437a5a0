from __future__ import annotations

from ..conversions.wrapper import ColorModels, all_models, convert
from ..types.color_types import ModelTag
from .color_base import ColorBase
from .registry import ColorValue


def color_convert(self: ColorBase, to_model: ModelTag) -> ColorValue:
    """
    Convert this color to another model.

    Args:
        to_model: Target model (e.g., "rgb", "hsl", ColorModel.HEX)

    Returns:
        New color value in the target model
    """
    return convert(self, to_model)  # type: ignore[arg-type]


def color_all_models(self: ColorBase) -> ColorModels:
    """Return this color expressed in all five models."""
    return all_models(self)  # type: ignore[arg-type]


ColorBase.convert = color_convert
ColorBase.all_models = color_all_models
