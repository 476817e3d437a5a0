from typing import ClassVar, NamedTuple

from ..types.color_types import Scalar
from ..types.model_type import ColorModel
from .color_base import ChannelColor


class _HsvChannels(NamedTuple):
    hue: Scalar
    saturation: Scalar
    value: Scalar


class Hsv(ChannelColor, _HsvChannels):
    """Hue in [0, 360), saturation and value in [0, 100]."""

    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.HSV
