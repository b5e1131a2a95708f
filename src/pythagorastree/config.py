"""
Configuration & Defaults
========================
This module serves as the central registry for the start-up parameters,
the slider ranges and the display strings of the parameter labels.

Exports:
    DEFAULT_PARAMETERS (TreeParameters): Parameters the window opens with.
    SLIDER_RANGES (dict): (minimum, maximum) per parameter key.
    LABEL_FORMATS (dict): Label template per parameter key.
    LOG_LEVEL_ENV (str): Environment variable holding the log level name.
"""
from pythagorastree.model.tree import TreeParameters

# Parameter keys (stable), in panel order
PARAMETER_KEYS = ["size", "depth", "x_offset", "y_offset"]

DEFAULT_PARAMETERS = TreeParameters()

# Depth is capped here; every extra level doubles the number of strokes.
SLIDER_RANGES: dict[str, tuple[int, int]] = {
    "size": (1, 400),
    "depth": (0, 14),
    "x_offset": (-100, 100),
    "y_offset": (-100, 100),
}

LABEL_FORMATS: dict[str, str] = {
    "size": "Rectangle Size: {value}",
    "depth": "Rectangle Amount: {value}",
    "x_offset": "X-Offset: {value}",
    "y_offset": "Y-Offset: {value}",
}

WINDOW_SIZE: tuple[int, int] = (1200, 800)
BACKGROUND_COLOR = "white"
STROKE_COLOR = "black"

LOG_LEVEL_ENV = "PYTHAGORASTREE_LOG_LEVEL"


def format_label(key: str, value: float) -> str:
    """
    Human-readable label for a parameter value.

    Integral floats are shown without the trailing '.0'.

    Raises:
        KeyError: If `key` is not a parameter key.
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return LABEL_FORMATS[key].format(value=value)
