# Themes: schema, color resolution, default presets

from .schema import Theme
from .resolver import resolve, resolve_roles, resolve_scale, resolve_states, resolve_table
from .presets import THEME_NAMES, dark_theme, default_themes, light_theme

__all__ = [
    "Theme",
    "resolve",
    "resolve_roles",
    "resolve_scale",
    "resolve_states",
    "resolve_table",
    "THEME_NAMES",
    "dark_theme",
    "default_themes",
    "light_theme",
]
