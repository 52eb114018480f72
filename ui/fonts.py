"""
UI font helpers for FontPeek.
Provides the header font for the family table and the preview font for each row.
"""

from PyQt6.QtGui import QFont

from core.models import FontWeight
from ui.weights import to_qt_weight


def header_font() -> QFont:
    """Bold variant of the application default font, used for table headers"""
    font = QFont()
    font.setWeight(QFont.Weight.Bold)
    return font


def preview_font(family: str, size: float, weight: FontWeight) -> QFont:
    """Font used to render the sample text in one table row"""
    font = QFont(family)
    font.setPointSizeF(size)
    font.setWeight(to_qt_weight(weight))
    return font
