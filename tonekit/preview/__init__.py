"""
Swatch preview of resolved theme colors.
"""
from .swatches import render_swatch_sheet, save_swatch_sheet

__all__ = ["render_swatch_sheet", "save_swatch_sheet"]
