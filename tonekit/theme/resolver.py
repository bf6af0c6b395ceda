"""
Color resolution: (theme, palette key, tone) -> RGB.

Two-sided linear interpolation split at the origin tone:
  below the origin: background -> palette color, weight (p - min) / (origin - min)
  above the origin: palette color -> contrast,   weight (p - origin) / (max - origin)
The origin tone returns the palette color unchanged; the first tone returns the
background and the last tone the contrast color exactly.
"""
import logging
from typing import Any

import numpy as np

from ..color.blend import mix
from ..color.rgb import RGB
from ..errors import UnknownPaletteKey
from ..tones.scale import ToneScale
from ..tones.shift import Variant, balance_for
from ..tones.states import derive_states
from .schema import Theme

logger = logging.getLogger(__name__)


def _palette_color(theme: Theme, key: str) -> RGB:
    try:
        return theme.palette[key]
    except (KeyError, TypeError):
        raise UnknownPaletteKey(key, theme.keys) from None


def _side_weights(scale: ToneScale, positions: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """(lower, upper) weights for each position; clamped to [0, 1] by mix."""
    lo, origin, hi = scale.min_position, scale.origin_position, scale.max_position
    lower = (positions - lo) / (origin - lo)
    upper = (positions - origin) / (hi - origin)
    return lower, upper


def _to_rgb(arr: Any) -> RGB:
    r, g, b = arr.tolist()
    return (r, g, b)


def resolve(theme: Theme, key: str, tone: str) -> RGB:
    """Resolve one palette key at one tone. Raises UnknownPaletteKey / UnknownTone."""
    color = _palette_color(theme, key)
    scale = theme.scale
    target = scale.position_of(tone)
    origin = scale.origin_position
    if target == origin:
        return color
    lower, upper = _side_weights(scale, np.float64(target))
    if target < origin:
        return _to_rgb(mix(theme.background, color, lower))
    return _to_rgb(mix(color, theme.contrast_color, upper))


def resolve_scale(theme: Theme, key: str) -> dict[str, RGB]:
    """tone -> RGB for one palette key, in tone order."""
    _palette_color(theme, key)
    return {tone: resolve(theme, key, tone) for tone in theme.scale}


def resolve_table(theme: Theme) -> dict[str, dict[str, RGB]]:
    """
    key -> tone -> RGB for the whole theme, vectorized over keys and tones.
    Matches resolve() channel for channel.
    """
    scale = theme.scale
    keys = theme.keys
    colors = np.array([theme.palette[k] for k in keys], dtype=np.float64)  # (K, 3)
    positions = np.array(scale.positions, dtype=np.float64)  # (T,)
    lower, upper = _side_weights(scale, positions)

    below = mix(np.asarray(theme.background)[None, None, :], colors[:, None, :], lower[None, :, None])
    above = mix(colors[:, None, :], np.asarray(theme.contrast_color)[None, None, :], upper[None, :, None])
    at_origin = (positions == scale.origin_position)[None, :, None]
    is_below = (positions < scale.origin_position)[None, :, None]
    exact = np.broadcast_to(colors[:, None, :].astype(np.uint8), below.shape)
    out = np.where(at_origin, exact, np.where(is_below, below, above))  # (K, T, 3)

    logger.debug("Resolved theme %r: %d keys x %d tones", theme.name, len(keys), len(scale))
    return {
        key: {tone: _to_rgb(out[i, j]) for j, tone in enumerate(scale.names)}
        for i, key in enumerate(keys)
    }


def resolve_roles(theme: Theme, key: str, tone: str, variant: Variant = "base") -> dict[str, RGB]:
    """Background at `tone`, plus text and stroke colors balanced against it."""
    scale = theme.scale
    return {
        "background": resolve(theme, key, tone),
        "text": resolve(theme, key, balance_for(scale, tone, "text", variant)),
        "stroke": resolve(theme, key, balance_for(scale, tone, "stroke", variant)),
    }


def resolve_states(theme: Theme, key: str, tone: str) -> dict[str, RGB]:
    """state -> RGB for hover/active/selected/disabled/focus derived from `tone`."""
    return {state: resolve(theme, key, t) for state, t in derive_states(theme.scale, tone).items()}
