# Tones: scale, shifting, interactive states

from .scale import ToneScale, dark_scale, default_scale, light_scale
from .shift import (
    balance_for,
    balance_pivot,
    balance_shift,
    level_for,
    offset_for,
    shift,
    shift_for,
)
from .states import derive_states
from .data.tables import (
    BALANCE_LEVELS,
    ORIGIN,
    SHIFT_TABLES,
    STATE_VARIANTS,
    TONE_NAMES,
)

__all__ = [
    "ToneScale",
    "dark_scale",
    "default_scale",
    "light_scale",
    "balance_for",
    "balance_pivot",
    "balance_shift",
    "level_for",
    "offset_for",
    "shift",
    "shift_for",
    "derive_states",
    "BALANCE_LEVELS",
    "ORIGIN",
    "SHIFT_TABLES",
    "STATE_VARIANTS",
    "TONE_NAMES",
]
