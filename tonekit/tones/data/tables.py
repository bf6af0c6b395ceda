"""
Our data: tone names, default tone positions and tone-shift tables.
Every table has one entry per tone index of TONE_NAMES.
"""
# Ordered from "nearly background" to "nearly contrast"; ORIGIN reproduces the palette color
TONE_NAMES: list[str] = [
    "plain",
    "bare",
    "pale",
    "tint",
    "mild",
    "muted",
    "base",
    "rich",
    "deep",
    "dense",
    "heavy",
    "extreme",
]

ORIGIN = "base"

# Positions along background (0) -> contrast (1). Spacing is uneven on purpose:
# dark backgrounds need wider steps near the background end to read as distinct.
LIGHT_POSITIONS: list[float] = [0.0, 0.06, 0.12, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]
DARK_POSITIONS: list[float] = [0.0, 0.1, 0.19, 0.27, 0.34, 0.42, 0.5, 0.58, 0.66, 0.75, 0.86, 1.0]

# -----------------------------------------------------------------------------
# Plain shift offsets: role -> variant -> offset per starting tone index.
# Up to the origin the shift moves toward contrast, past it back toward the origin,
# so more emphasis always moves away from the background and never off the far end.
# -----------------------------------------------------------------------------
BACKGROUND_OFFSETS: dict[str, list[int]] = {
    "soft": [1, 1, 1, 1, 1, 1, 1, -1, -1, -1, -1, -1],
    "base": [2, 2, 2, 2, 2, 2, 2, -2, -2, -2, -2, -2],
    "strong": [3, 3, 3, 3, 3, 3, 2, -2, -3, -3, -3, -3],
    # toward the background (disabled look)
    "faded": [0, -1, -1, -2, -2, -2, -3, -3, -3, -3, -3, -3],
}

TEXT_OFFSETS: dict[str, list[int]] = {
    "soft": [2, 2, 2, 2, 2, 1, 1, -1, -1, -2, -2, -2],
    "base": [3, 3, 3, 3, 3, 2, 2, -2, -2, -3, -3, -3],
    "strong": [5, 5, 5, 4, 4, 3, 3, -3, -3, -4, -5, -5],
}

STROKE_OFFSETS: dict[str, list[int]] = {
    "soft": [1, 1, 1, 1, 1, 1, 1, -1, -1, -1, -1, -1],
    "base": [2, 2, 2, 2, 2, 1, 1, -1, -1, -2, -2, -2],
    "strong": [4, 4, 3, 3, 3, 2, 2, -2, -2, -3, -4, -4],
}

SHIFT_TABLES: dict[str, dict[str, list[int]]] = {
    "background": BACKGROUND_OFFSETS,
    "text": TEXT_OFFSETS,
    "stroke": STROKE_OFFSETS,
}

# Balance (reflection) levels: foreground tone relative to the background tone it sits on
BALANCE_LEVELS: dict[str, dict[str, int]] = {
    "text": {"soft": 6, "base": 8, "strong": 10},
    "stroke": {"soft": 2, "base": 3, "strong": 4},
}

VARIANT_ALIASES: dict[str, str] = {"default": "base"}

# Interactive states: state -> (role, variant). Integer variant is a raw offset.
STATE_VARIANTS: dict[str, tuple[str, str | int]] = {
    "rest": ("background", 0),
    "hover": ("background", "soft"),
    "active": ("background", "base"),
    "selected": ("background", "strong"),
    "disabled": ("background", "faded"),
    "focus": ("stroke", "strong"),
}
