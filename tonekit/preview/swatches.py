"""
Swatch sheet: one row per palette key, one column per tone, each cell filled with
the resolved color. For eyeballing a theme before exporting it.
"""
import logging
from pathlib import Path

import numpy as np

from ..theme.schema import Theme

logger = logging.getLogger(__name__)


def render_swatch_sheet(theme: Theme, cell: int = 24, gap: int = 2) -> np.ndarray:
    """RGB uint8 array (H, W, 3); gaps are filled with the theme background."""
    if cell < 1 or gap < 0:
        raise ValueError("cell must be >= 1 and gap >= 0")
    keys = theme.keys
    tones = theme.scale.names
    table = theme.table
    h = len(keys) * cell + (len(keys) + 1) * gap
    w = len(tones) * cell + (len(tones) + 1) * gap
    frame = np.empty((h, w, 3), dtype=np.uint8)
    frame[:, :] = theme.background
    for row, key in enumerate(keys):
        y = gap + row * (cell + gap)
        for col, tone in enumerate(tones):
            x = gap + col * (cell + gap)
            frame[y : y + cell, x : x + cell] = table[key][tone]
    return frame


def save_swatch_sheet(theme: Theme, path: Path, cell: int = 24, gap: int = 2) -> Path:
    """Render and save as PNG. Uses Pillow."""
    from PIL import Image

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(render_swatch_sheet(theme, cell=cell, gap=gap)).save(path)
    logger.info("Saved swatch sheet for theme %r to %s", theme.name, path)
    return path
