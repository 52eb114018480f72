"""Core package for FontPeek.

Holds everything that does not need a running Qt application: the font
registry, filter/pin view state, configuration, logging and the font-file
loader. The PyQt6 front end lives in the ``ui`` package.
"""

__VERSION__ = "1.0.0"

from .font_registry import FontRegistry, get_global_font_registry
from .models import FontWeight, UnknownWeightError
from .view_state import ViewState, compile_filter, recompute_shown, toggle_pin

__all__ = [
    "FontRegistry",
    "get_global_font_registry",
    "FontWeight",
    "UnknownWeightError",
    "ViewState",
    "compile_filter",
    "recompute_shown",
    "toggle_pin",
]
