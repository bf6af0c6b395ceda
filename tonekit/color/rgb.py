"""
RGB helpers: hex parsing/formatting and channel clamping. Channels are 0-255 ints.
"""
import re
from typing import Any

RGB = tuple[int, int, int]


def clamp_channel(value: float) -> int:
    return max(0, min(255, int(value)))


def parse_hex(value: str) -> RGB:
    """
    Parse '#rgb' or '#rrggbb' (either case, '#' optional) into an RGB tuple.
    Raises ValueError for anything else.
    """
    if not isinstance(value, str):
        raise ValueError(f"Invalid hex color: {value!r}")
    hx = value.strip().lstrip("#")
    if len(hx) == 3:
        hx = "".join(c * 2 for c in hx)
    if not re.fullmatch(r"[0-9a-fA-F]{6}", hx):
        raise ValueError(f"Invalid hex color: {value!r}")
    return (int(hx[0:2], 16), int(hx[2:4], 16), int(hx[4:6], 16))


def to_hex(rgb: tuple[float, float, float]) -> str:
    """Lowercase '#rrggbb', no alpha."""
    r, g, b = (clamp_channel(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def as_rgb(value: Any) -> RGB:
    """
    Coerce a hex string, (r, g, b) sequence or {'r','g','b'} dict to RGB.
    Sequence and dict channels are clamped to 0-255.
    """
    if isinstance(value, str):
        return parse_hex(value)
    if isinstance(value, dict):
        try:
            value = (value["r"], value["g"], value["b"])
        except KeyError as e:
            raise ValueError(f"Color dict missing channel {e}") from None
    try:
        r, g, b = value
    except (TypeError, ValueError):
        raise ValueError(f"Invalid color: {value!r}") from None
    return (clamp_channel(r), clamp_channel(g), clamp_channel(b))


def relative_luminance(rgb: RGB) -> float:
    """WCAG relative luminance, 0 (black) to 1 (white)."""

    def _lin(c: int) -> float:
        s = c / 255.0
        return s / 12.92 if s <= 0.04045 else ((s + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * _lin(r) + 0.7152 * _lin(g) + 0.0722 * _lin(b)
