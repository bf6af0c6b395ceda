"""
Token export: every (tone, palette key) of a theme as `--{tone}-{key}: #rrggbb`,
scoped under a theme selector attribute ([data-theme="light"], [data-theme="dark"]).
"""
import json
import logging
from pathlib import Path
from typing import Iterable, Literal

from ..color.rgb import to_hex
from ..theme.presets import THEME_NAMES
from ..theme.schema import Theme

logger = logging.getLogger(__name__)

ExportFormat = Literal["css", "json"]
EXPORT_FORMATS: tuple[str, ...] = ("css", "json")


def token_name(tone: str, key: str) -> str:
    return f"--{tone}-{key}"


def token_map(theme: Theme) -> dict[str, str]:
    """Token name -> hex, tone-major (all keys of the first tone, then the next)."""
    table = theme.table
    return {
        token_name(tone, key): to_hex(table[key][tone])
        for tone in theme.scale
        for key in theme.keys
    }


def _check_names(themes: Iterable[Theme]) -> list[Theme]:
    themes = list(themes)
    for theme in themes:
        if theme.name not in THEME_NAMES:
            logger.warning(
                "Theme %r is not a recognized theme name (%s); exporting anyway",
                theme.name,
                ", ".join(THEME_NAMES),
            )
    return themes


def _css_block(selector: str, tokens: dict[str, str]) -> str:
    lines = [f"{selector} {{"]
    lines.extend(f"  {name}: {value};" for name, value in tokens.items())
    lines.append("}")
    return "\n".join(lines)


def to_css(
    themes: Iterable[Theme],
    *,
    attribute: str = "data-theme",
    root_theme: str | None = None,
) -> str:
    """
    One block per theme under `[attribute="name"]`. When `root_theme` names one of
    the themes, its tokens are also emitted under :root as the fallback scope.
    """
    themes = _check_names(themes)
    blocks = []
    for theme in themes:
        if theme.name == root_theme:
            blocks.append(_css_block(":root", token_map(theme)))
            break
    for theme in themes:
        blocks.append(_css_block(f'[{attribute}="{theme.name}"]', token_map(theme)))
    return "\n\n".join(blocks) + "\n"


def to_json(themes: Iterable[Theme]) -> str:
    """{theme name: {token: hex}} as indented JSON."""
    themes = _check_names(themes)
    return json.dumps({t.name: token_map(t) for t in themes}, indent=2) + "\n"


def write_tokens(
    themes: Iterable[Theme],
    path: Path,
    fmt: ExportFormat = "css",
    *,
    attribute: str = "data-theme",
    root_theme: str | None = None,
) -> Path:
    """Render and write the token file, creating parent directories."""
    themes = list(themes)
    if fmt == "css":
        text = to_css(themes, attribute=attribute, root_theme=root_theme)
    elif fmt == "json":
        text = to_json(themes)
    else:
        raise ValueError(f"Unknown export format {fmt!r} (expected one of: {', '.join(EXPORT_FORMATS)})")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    count = sum(len(t.keys) * len(t.scale) for t in themes)
    logger.info("Wrote %d tokens for %d theme(s) to %s", count, len(themes), path)
    return path
