# No dependencies
from enum import Enum


class ColorModel(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    HWB = "hwb"
    HSV = "hsv"


HUE_360 = 360
RGB_MAX = 255
PERCENT_MAX = 100

HEX_PREFIX = "#"
HEX_DIGITS = 6
HEX_CHARSET = frozenset("0123456789abcdefABCDEF")

model_fields = {
    ColorModel.HEX: ("hex",),
    ColorModel.RGB: ("red", "green", "blue"),
    ColorModel.HSL: ("hue", "saturation", "lightness"),
    ColorModel.HWB: ("hue", "whiteness", "blackness"),
    ColorModel.HSV: ("hue", "saturation", "value"),
}

# Upper bound per channel; hue bounds are exclusive, the rest inclusive.
model_maxima = {
    ColorModel.RGB: (RGB_MAX, RGB_MAX, RGB_MAX),
    ColorModel.HSL: (HUE_360, PERCENT_MAX, PERCENT_MAX),
    ColorModel.HWB: (HUE_360, PERCENT_MAX, PERCENT_MAX),
    ColorModel.HSV: (HUE_360, PERCENT_MAX, PERCENT_MAX),
}

HUE_MODELS = frozenset({ColorModel.HSL, ColorModel.HWB, ColorModel.HSV})
NUMERIC_MODELS = (ColorModel.RGB, ColorModel.HSL, ColorModel.HWB, ColorModel.HSV)


def is_hue_model(model: ColorModel) -> bool:
    """Check if the given model carries a hue channel (HSL, HWB or HSV)."""
    return model in HUE_MODELS
