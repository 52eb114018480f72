"""Conversion between FontWeight and Qt's QFont.Weight.

Both directions are explicit tables over the nine named levels; a Qt
weight outside them raises UnknownWeightError instead of being rounded.
"""

from PyQt6.QtGui import QFont

from core.models import FontWeight, UnknownWeightError

__all__ = ['to_qt_weight', 'from_qt_weight']

_TO_QT = {
    FontWeight.THIN: QFont.Weight.Thin,
    FontWeight.EXTRA_LIGHT: QFont.Weight.ExtraLight,
    FontWeight.LIGHT: QFont.Weight.Light,
    FontWeight.NORMAL: QFont.Weight.Normal,
    FontWeight.MEDIUM: QFont.Weight.Medium,
    FontWeight.SEMIBOLD: QFont.Weight.DemiBold,
    FontWeight.BOLD: QFont.Weight.Bold,
    FontWeight.EXTRA_BOLD: QFont.Weight.ExtraBold,
    FontWeight.BLACK: QFont.Weight.Black,
}

_FROM_QT = {qt_weight: weight for weight, qt_weight in _TO_QT.items()}


def to_qt_weight(weight: FontWeight) -> QFont.Weight:
    return _TO_QT[weight]


def from_qt_weight(qt_weight: QFont.Weight) -> FontWeight:
    try:
        return _FROM_QT[qt_weight]
    except KeyError:
        raise UnknownWeightError(f"Not a named font weight: {qt_weight!r}") from None
