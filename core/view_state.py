"""
View state for the font table.

Derives which registry rows are visible from the filter text, the pinned
set and the hide-unpinned toggle. ``ViewState.update`` is the single entry
point the GUI feeds messages into.
"""

from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, List, Sequence, Tuple

from core.models import (FontFamilyFilterChanged, FontWeight, HideUnpin,
                         MESSAGE_TYPES, Message, Pin, TextChanged,
                         TextSizeChanged, WeightChanged)

FILTER_DELIMITER = "|"


@dataclass(frozen=True)
class FilterPattern:
    """Compiled family filter: a family matches if it contains any alternative.

    An empty pattern matches every family.
    """
    alternatives: Tuple[str, ...] = ()

    def matches(self, family: str) -> bool:
        if not self.alternatives:
            return True
        return any(alt in family for alt in self.alternatives)


def compile_filter(raw: str) -> FilterPattern:
    """Split raw filter text on '|' into alternatives"""
    if not raw:
        return FilterPattern()
    return FilterPattern(tuple(raw.split(FILTER_DELIMITER)))


def recompute_shown(registry: Sequence[str], pattern: FilterPattern,
                    pinned: AbstractSet[int], hide_unpinned: bool) -> List[int]:
    """Indices of the rows to display, in ascending registry order.

    With ``hide_unpinned`` only pinned indices survive the filter.
    """
    shown = [i for i, family in enumerate(registry) if pattern.matches(family)]
    if hide_unpinned:
        shown = sorted(set(shown) & set(pinned))
    return shown


def toggle_pin(pinned: AbstractSet[int], index: int) -> FrozenSet[int]:
    """Remove ``index`` if pinned, otherwise add it. Returns a new set."""
    if index in pinned:
        return frozenset(pinned) - {index}
    return frozenset(pinned) | {index}


def sorted_pins(pinned: AbstractSet[int]) -> List[int]:
    """Canonical ascending form of a pinned set"""
    return sorted(pinned)


@dataclass
class ViewState:
    """Everything the viewer window renders.

    ``shown`` is derived and is kept current by ``refresh()`` whenever the
    filter, the pinned set or the hide-unpinned flag change.
    """
    families: Tuple[str, ...] = ()
    text: str = "ABC123"
    weight: FontWeight = FontWeight.NORMAL
    text_size: float = 12.0
    font_family_filter: str = ""
    pattern: FilterPattern = field(default_factory=FilterPattern)
    pinned: FrozenSet[int] = frozenset()
    hide_unpinned: bool = False
    shown: List[int] = field(default_factory=list)

    def __post_init__(self):
        self.families = tuple(self.families)
        self.pattern = compile_filter(self.font_family_filter)
        self.refresh()

    def refresh(self) -> None:
        self.shown = recompute_shown(self.families, self.pattern,
                                     self.pinned, self.hide_unpinned)

    def update(self, message: Message) -> bool:
        """Apply one message.

        Returns True when the row set was recomputed, False when only the
        preview (text, weight, size) changed.

        Raises:
            TypeError: if ``message`` is not one of the known message types
        """
        if not isinstance(message, MESSAGE_TYPES):
            raise TypeError(f"Unknown message: {message!r}")

        if isinstance(message, TextChanged):
            self.text = message.text
        elif isinstance(message, WeightChanged):
            self.weight = message.weight
        elif isinstance(message, TextSizeChanged):
            self.text_size = message.size
        elif isinstance(message, FontFamilyFilterChanged):
            self.font_family_filter = message.raw
            self.pattern = compile_filter(message.raw)
            self.refresh()
            return True
        elif isinstance(message, Pin):
            self.pinned = toggle_pin(self.pinned, message.index)
            self.refresh()
            return True
        elif isinstance(message, HideUnpin):
            self.hide_unpinned = message.hidden
            self.refresh()
            return True
        return False

    def family(self, index: int) -> str:
        return self.families[index]

    def is_pinned(self, index: int) -> bool:
        return index in self.pinned

    def shown_families(self) -> List[str]:
        return [self.families[i] for i in self.shown]
