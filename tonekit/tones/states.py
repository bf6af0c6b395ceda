"""
Interactive states (hover, active, disabled, ...) derived from one base tone.
"""
from typing import Mapping

from .data.tables import STATE_VARIANTS
from .scale import ToneScale
from .shift import Variant, shift_for


def derive_states(
    scale: ToneScale,
    tone: str,
    states: Mapping[str, tuple[str, Variant]] = STATE_VARIANTS,
) -> dict[str, str]:
    """Return state -> tone name for every state in `states`."""
    return {state: shift_for(scale, tone, role, variant) for state, (role, variant) in states.items()}
