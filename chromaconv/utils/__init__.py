from .num_utils import round_half_up, np_round_half_up
from .validation import check_channel, check_channels, check_hex, check_array, check_model

__all__ = [
    "round_half_up",
    "np_round_half_up",
    "check_channel",
    "check_channels",
    "check_hex",
    "check_array",
    "check_model",
]
