from typing import ClassVar, NamedTuple

from ..types.color_types import Scalar
from ..types.model_type import ColorModel
from .color_base import ChannelColor


class _HslChannels(NamedTuple):
    hue: Scalar
    saturation: Scalar
    lightness: Scalar


class Hsl(ChannelColor, _HslChannels):
    """Hue in [0, 360), saturation and lightness in [0, 100]."""

    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.HSL
