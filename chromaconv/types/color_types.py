from __future__ import annotations
from typing import Mapping, Sequence, Union

from .model_type import ColorModel

Scalar = int | float
ScalarVector = Sequence[Scalar]
ColorPayload = Union[str, ScalarVector, Mapping[str, Scalar]]
ModelTag = Union[ColorModel, str]
