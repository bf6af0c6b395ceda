# Color primitives: RGB parsing/formatting and linear blending

from .rgb import RGB, as_rgb, clamp_channel, parse_hex, relative_luminance, to_hex
from .blend import blend_colors, clamp_weight, mix

__all__ = [
    "RGB",
    "as_rgb",
    "clamp_channel",
    "parse_hex",
    "relative_luminance",
    "to_hex",
    "blend_colors",
    "clamp_weight",
    "mix",
]
