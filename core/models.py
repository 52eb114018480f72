"""
Shared data models for the FontPeek application.
Used by the view state and the Qt front end.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class UnknownWeightError(ValueError):
    """Raised when a weight does not correspond to one of the nine named levels"""
    pass


class FontWeight(Enum):
    """Named typographic weights, Thin through Black.

    Each member carries its OpenType numeric weight and its display label.
    The set is closed: conversions from numbers or labels only accept the
    nine exact values and raise ``UnknownWeightError`` for anything else.
    """
    THIN = (100, "Thin")
    EXTRA_LIGHT = (200, "ExtraLight")
    LIGHT = (300, "Light")
    NORMAL = (400, "Normal")
    MEDIUM = (500, "Medium")
    SEMIBOLD = (600, "Semibold")
    BOLD = (700, "Bold")
    EXTRA_BOLD = (800, "ExtraBold")
    BLACK = (900, "Black")

    def __init__(self, numeric: int, label: str):
        self.numeric = numeric
        self.label = label

    def __str__(self) -> str:
        return self.label

    @classmethod
    def default(cls) -> 'FontWeight':
        """Weight used when nothing has been chosen yet"""
        return cls.NORMAL

    @classmethod
    def from_value(cls, value: int) -> 'FontWeight':
        """Map an OpenType weight (100, 200, ... 900) to its named level"""
        for weight in cls:
            if weight.numeric == value:
                return weight
        raise UnknownWeightError(f"Not a named font weight: {value!r}")

    @classmethod
    def from_label(cls, label: str) -> 'FontWeight':
        """Inverse of ``str(weight)``"""
        for weight in cls:
            if weight.label == label:
                return weight
        raise UnknownWeightError(f"Not a named font weight: {label!r}")


# Messages dispatched from the GUI into ViewState.update().
# One message is processed to completion before the next one.
@dataclass(frozen=True)
class TextChanged:
    """Sample text edited"""
    text: str


@dataclass(frozen=True)
class WeightChanged:
    """Weight combo box changed"""
    weight: FontWeight


@dataclass(frozen=True)
class TextSizeChanged:
    """Size field or slider changed"""
    size: float


@dataclass(frozen=True)
class FontFamilyFilterChanged:
    """Raw filter text edited"""
    raw: str


@dataclass(frozen=True)
class Pin:
    """Toggle pinned state of a registry index"""
    index: int


@dataclass(frozen=True)
class HideUnpin:
    """Show only pinned families when ``hidden`` is True"""
    hidden: bool


Message = Union[TextChanged, WeightChanged, TextSizeChanged,
                FontFamilyFilterChanged, Pin, HideUnpin]

MESSAGE_TYPES = (TextChanged, WeightChanged, TextSizeChanged,
                 FontFamilyFilterChanged, Pin, HideUnpin)
