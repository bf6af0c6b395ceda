"""
Blending: linear per-channel interpolation between two RGB colors.
Works on single colors and on broadcast numpy arrays of colors (..., 3).
"""
from typing import TYPE_CHECKING

import numpy as np

from .rgb import RGB

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


def clamp_weight(weight: "ArrayLike") -> np.ndarray:
    """Weights outside [0, 1] are clamped, never extrapolated."""
    return np.clip(np.asarray(weight, dtype=np.float64), 0.0, 1.0)


def mix(color_a: "ArrayLike", color_b: "ArrayLike", weight: "ArrayLike") -> np.ndarray:
    """
    a * (1 - w) + b * w per channel, rounded half up and clamped to 0-255.
    Shapes broadcast; w == 0 returns a exactly and w == 1 returns b exactly.
    """
    a = np.asarray(color_a, dtype=np.float64)
    b = np.asarray(color_b, dtype=np.float64)
    w = clamp_weight(weight)
    out = a * (1.0 - w) + b * w
    return np.clip(np.floor(out + 0.5), 0, 255).astype(np.uint8)


def blend_colors(
    rgb_a: tuple[float, float, float],
    rgb_b: tuple[float, float, float],
    *,
    weight: float = 0.5,
) -> RGB:
    """Blend two RGB colors."""
    r, g, b = mix(rgb_a, rgb_b, weight).tolist()
    return (r, g, b)
