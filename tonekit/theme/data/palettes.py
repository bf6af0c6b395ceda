"""
Our data: default semantic palettes (hex). One palette per theme; keys are shared.
"""
LIGHT_PALETTE: dict[str, str] = {
    "neutral": "#8c8c8c",
    "primary": "#1677ff",
    "secondary": "#722ed1",
    "error": "#ff4d4f",
    "success": "#52c41a",
    "warning": "#faad14",
    "info": "#13c2c2",
    "highlight": "#eb2f96",
}

DARK_PALETTE: dict[str, str] = {
    "neutral": "#7f7f7f",
    "primary": "#1668dc",
    "secondary": "#642ab5",
    "error": "#dc4446",
    "success": "#49aa19",
    "warning": "#d89614",
    "info": "#13a8a8",
    "highlight": "#cb2b83",
}

LIGHT_BACKGROUND = "#ffffff"
LIGHT_CONTRAST = "#000000"
DARK_BACKGROUND = "#141414"
DARK_CONTRAST = "#ffffff"
