"""UI package for FontPeek.

Contains the PyQt6 viewer window and the Qt-specific font helpers.
Application state and font discovery live in the core package.
"""

from . import fonts
from .app import FontViewerWindow, main

__all__ = [
    "fonts",
    "FontViewerWindow",
    "main",
]
