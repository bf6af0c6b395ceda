"""
Tone shifting: derive a new tone name from a starting tone.

Two boundary policies, kept deliberately separate:
- shift: saturate at the ends of the scale.
- balance_shift: reflect out-of-range results back into the scale by negation,
  then clamp. Used to place a foreground (text/stroke) tone against a background tone.
"""
from typing import Mapping, Sequence

from ..errors import ThemeConfigError
from .data.tables import BALANCE_LEVELS, SHIFT_TABLES, VARIANT_ALIASES
from .scale import ToneScale

Variant = str | int


def _clamp_index(index: int, last: int) -> int:
    return max(0, min(index, last))


def shift(scale: ToneScale, tone: str, offset: int) -> str:
    """index(tone) + offset, saturated at the first and last tone."""
    return scale.name_at(_clamp_index(scale.index_of(tone) + offset, scale.last_index))


def balance_pivot(scale: ToneScale) -> int:
    """One below the origin: foregrounds on the origin tone already fold back toward the background."""
    return scale.origin_index - 1


def balance_shift(scale: ToneScale, tone: str, level: int) -> str:
    """
    Move `level` steps away from the tone: up when at or below the pivot, down above it.
    A result outside [0, last] is negated before clamping, so shifts that run past
    the low end fold back into the scale instead of sticking at the first tone.
    """
    index = scale.index_of(tone)
    raw = index + level if index <= balance_pivot(scale) else index - level
    if raw < 0 or raw > scale.last_index:
        raw = -raw
    return scale.name_at(_clamp_index(raw, scale.last_index))


def _variant_name(variant: str) -> str:
    return VARIANT_ALIASES.get(variant, variant)


def offset_for(
    scale: ToneScale,
    tone: str,
    role: str,
    variant: Variant,
    tables: Mapping[str, Mapping[str, Sequence[int]]] = SHIFT_TABLES,
) -> int:
    """Per-tone offset for (role, variant, starting tone). Integer variants are raw offsets."""
    index = scale.index_of(tone)
    if isinstance(variant, int) and not isinstance(variant, bool):
        return variant
    if role not in tables:
        raise ValueError(f"Unknown role {role!r} (expected one of: {', '.join(tables)})")
    by_variant = tables[role]
    name = _variant_name(variant)
    if name not in by_variant:
        raise ValueError(
            f"Unknown {role} variant {variant!r} (expected one of: {', '.join(by_variant)})"
        )
    offsets = by_variant[name]
    if len(offsets) != len(scale):
        raise ThemeConfigError(
            f"{role}/{name} offset table has {len(offsets)} entries but the scale has {len(scale)} tones"
        )
    return offsets[index]


def shift_for(
    scale: ToneScale,
    tone: str,
    role: str,
    variant: Variant,
    tables: Mapping[str, Mapping[str, Sequence[int]]] = SHIFT_TABLES,
) -> str:
    """Plain shift using the role's per-tone offset table."""
    return shift(scale, tone, offset_for(scale, tone, role, variant, tables))


def level_for(
    role: str,
    variant: Variant,
    levels: Mapping[str, Mapping[str, int]] = BALANCE_LEVELS,
) -> int:
    if isinstance(variant, int) and not isinstance(variant, bool):
        return variant
    if role not in levels:
        raise ValueError(f"Unknown role {role!r} (expected one of: {', '.join(levels)})")
    name = _variant_name(variant)
    if name not in levels[role]:
        raise ValueError(
            f"Unknown {role} variant {variant!r} (expected one of: {', '.join(levels[role])})"
        )
    return levels[role][name]


def balance_for(
    scale: ToneScale,
    tone: str,
    role: str,
    variant: Variant = "base",
    levels: Mapping[str, Mapping[str, int]] = BALANCE_LEVELS,
) -> str:
    """Foreground tone for `role` on a background at `tone`."""
    return balance_shift(scale, tone, level_for(role, variant, levels))
