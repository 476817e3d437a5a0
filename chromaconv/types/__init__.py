from .model_type import ColorModel, HUE_360, RGB_MAX, PERCENT_MAX
from .color_types import Scalar, ColorPayload, ModelTag

__all__ = [
    "ColorModel",
    "HUE_360",
    "RGB_MAX",
    "PERCENT_MAX",
    "Scalar",
    "ColorPayload",
    "ModelTag",
]
