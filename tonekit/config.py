"""
Load and expose app config (YAML). Used by the export script to build themes,
pick the export directory and the theme selector attribute.
"""
import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import ThemeConfigError
from .theme.data.palettes import (
    DARK_BACKGROUND,
    DARK_CONTRAST,
    DARK_PALETTE,
    LIGHT_BACKGROUND,
    LIGHT_CONTRAST,
    LIGHT_PALETTE,
)
from .theme.schema import Theme
from .tones.data.tables import DARK_POSITIONS, LIGHT_POSITIONS, ORIGIN, TONE_NAMES
from .tones.scale import ToneScale

logger = logging.getLogger(__name__)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    explicit = config_path is not None
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        if explicit:
            logger.warning("Config %s not found, using built-in defaults", path)
        return _defaults()
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ThemeConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ThemeConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return _merge(_defaults(), data)


def _merge(defaults: dict[str, Any], data: dict[str, Any]) -> dict[str, Any]:
    """Sections merge one level deep; a file that defines `themes` replaces the default themes."""
    out = {**defaults, **data}
    for section in ("export", "tones"):
        if isinstance(data.get(section), dict):
            out[section] = {**defaults[section], **data[section]}
    return out


def _defaults() -> dict[str, Any]:
    return {
        "export": {
            "dir": "tokens",
            "filename_prefix": "tokens",
            "format": "css",
            "attribute": "data-theme",
            "root_theme": "light",
        },
        "tones": {"origin": ORIGIN, "names": list(TONE_NAMES)},
        "themes": {
            "light": {
                "background": LIGHT_BACKGROUND,
                "contrast": LIGHT_CONTRAST,
                "palette": dict(LIGHT_PALETTE),
                "positions": list(LIGHT_POSITIONS),
            },
            "dark": {
                "background": DARK_BACKGROUND,
                "contrast": DARK_CONTRAST,
                "palette": dict(DARK_PALETTE),
                "positions": list(DARK_POSITIONS),
            },
        },
    }


def _scale_from_config(tones: dict[str, Any], positions: Any, theme_name: str) -> ToneScale:
    origin = tones.get("origin", ORIGIN)
    if isinstance(positions, dict):
        names, values = list(positions.keys()), list(positions.values())
    elif isinstance(positions, (list, tuple)):
        names, values = tones.get("names") or list(TONE_NAMES), list(positions)
    else:
        raise ThemeConfigError(f"themes.{theme_name}.positions must be a list or a mapping")
    try:
        floats = tuple(float(p) for p in values)
    except (TypeError, ValueError) as e:
        raise ThemeConfigError(f"themes.{theme_name}.positions: {e}") from e
    return ToneScale(tuple(names), floats, origin)


def theme_from_config(config: dict[str, Any], name: str) -> Theme:
    """Build one Theme from the `themes.<name>` section."""
    themes = config.get("themes") or {}
    if name not in themes:
        raise ThemeConfigError(f"Theme {name!r} not in config (have: {', '.join(themes) or 'none'})")
    entry = themes[name] or {}
    for required in ("background", "palette", "positions"):
        if required not in entry:
            raise ThemeConfigError(f"themes.{name}.{required} is required")
    if not isinstance(entry["palette"], dict):
        raise ThemeConfigError(f"themes.{name}.palette must be a mapping")
    scale = _scale_from_config(config.get("tones") or {}, entry["positions"], name)
    return Theme(
        name=name,
        palette=entry["palette"],
        background=entry["background"],
        contrast=entry.get("contrast"),
        scale=scale,
    )


def themes_from_config(config: dict[str, Any], names: list[str] | None = None) -> dict[str, Theme]:
    """name -> Theme for `names` (default: every theme in config, in file order)."""
    if names is None:
        names = list(config.get("themes") or {})
    return {n: theme_from_config(config, n) for n in names}


def get_output_dir(config: dict[str, Any]) -> Path:
    """Resolve export directory (relative to project root if needed)."""
    out = config.get("export", {})
    d = out.get("dir", "tokens")
    p = Path(d)
    if not p.is_absolute():
        p = _project_root() / p
    return p
