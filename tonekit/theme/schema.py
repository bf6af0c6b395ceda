"""
Theme: palette + background + optional contrast + tone scale.
The unit of light/dark switching. Immutable once constructed.
"""
from dataclasses import dataclass
from functools import cached_property
from types import MappingProxyType
from typing import Any, Mapping

from ..color.rgb import RGB, as_rgb, relative_luminance, to_hex
from ..errors import ThemeConfigError
from ..tones.scale import ToneScale

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)


def _color(value: Any, what: str) -> RGB:
    try:
        return as_rgb(value)
    except ValueError as e:
        raise ThemeConfigError(f"{what}: {e}") from None


@dataclass(frozen=True, eq=False)
class Theme:
    """
    Colors accept hex strings, (r, g, b) tuples or {'r','g','b'} dicts and are
    normalized to RGB tuples. Without a contrast color the contrast side blends
    toward black on light backgrounds and white on dark ones.
    """

    name: str
    palette: Mapping[str, RGB]
    background: RGB
    scale: ToneScale
    contrast: RGB | None = None

    def __post_init__(self) -> None:
        if not self.palette:
            raise ThemeConfigError(f"Theme {self.name!r} has an empty palette")
        palette = {str(k): _color(v, f"palette[{k!r}]") for k, v in self.palette.items()}
        object.__setattr__(self, "palette", MappingProxyType(palette))
        object.__setattr__(self, "background", _color(self.background, "background"))
        if self.contrast is not None:
            object.__setattr__(self, "contrast", _color(self.contrast, "contrast"))
        if not isinstance(self.scale, ToneScale):
            raise ThemeConfigError(f"Theme {self.name!r} scale must be a ToneScale")

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(self.palette)

    @property
    def contrast_color(self) -> RGB:
        """Explicit contrast, or the implicit one picked from background luminance."""
        if self.contrast is not None:
            return self.contrast
        return BLACK if relative_luminance(self.background) >= 0.5 else WHITE

    @cached_property
    def table(self) -> dict[str, dict[str, RGB]]:
        """Every (key, tone) resolved once; built whole, then cached on the instance."""
        from .resolver import resolve_table

        return resolve_table(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging and config round trips."""
        d: dict[str, Any] = {
            "name": self.name,
            "background": to_hex(self.background),
            "palette": {k: to_hex(v) for k, v in self.palette.items()},
            "scale": self.scale.to_dict(),
        }
        if self.contrast is not None:
            d["contrast"] = to_hex(self.contrast)
        return d
