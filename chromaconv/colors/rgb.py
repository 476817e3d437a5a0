from typing import ClassVar, NamedTuple

from ..types.model_type import ColorModel
from .color_base import ChannelColor


class _RgbChannels(NamedTuple):
    red: int
    green: int
    blue: int


class Rgb(ChannelColor, _RgbChannels):
    """Integer RGB, each channel in [0, 255]."""

    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.RGB
