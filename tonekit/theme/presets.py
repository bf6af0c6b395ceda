"""
Default light and dark themes built from the shipped palettes and tone positions.
"""
from ..tones.scale import dark_scale, light_scale
from .data.palettes import (
    DARK_BACKGROUND,
    DARK_CONTRAST,
    DARK_PALETTE,
    LIGHT_BACKGROUND,
    LIGHT_CONTRAST,
    LIGHT_PALETTE,
)
from .schema import Theme

THEME_NAMES: tuple[str, ...] = ("light", "dark")


def light_theme() -> Theme:
    return Theme(
        name="light",
        palette=LIGHT_PALETTE,
        background=LIGHT_BACKGROUND,
        contrast=LIGHT_CONTRAST,
        scale=light_scale(),
    )


def dark_theme() -> Theme:
    return Theme(
        name="dark",
        palette=DARK_PALETTE,
        background=DARK_BACKGROUND,
        contrast=DARK_CONTRAST,
        scale=dark_scale(),
    )


def default_themes() -> dict[str, Theme]:
    """name -> Theme for the recognized theme names."""
    return {"light": light_theme(), "dark": dark_theme()}
