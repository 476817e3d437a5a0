from typing import ClassVar, NamedTuple

from ..types.color_types import Scalar
from ..types.model_type import ColorModel
from .color_base import ChannelColor


class _HwbChannels(NamedTuple):
    hue: Scalar
    whiteness: Scalar
    blackness: Scalar


class Hwb(ChannelColor, _HwbChannels):
    """Hue in [0, 360), whiteness and blackness in [0, 100]."""

    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.HWB
