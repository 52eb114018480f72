"""
Font registry for FontPeek.

Takes a one-time snapshot of the font families known to the font engine,
sorted and de-duplicated, and hands the same tuple to every caller for the
rest of the process. There is no refresh: fonts installed after the first
query are not picked up.
"""

import threading
from typing import Callable, Iterable, Optional, Tuple

from core.logging_config import get_fonts_logger

FamilyQuery = Callable[[], Iterable[str]]


def qt_font_family_query() -> Iterable[str]:
    """List the primary family name of every font known to Qt.

    Requires a QGuiApplication; application fonts must be installed first
    so they are part of the snapshot.
    """
    from PyQt6.QtGui import QFontDatabase

    return QFontDatabase.families()


def build_family_list(names: Iterable[str]) -> Tuple[str, ...]:
    """Sort ascending (case-sensitive) and drop exact duplicates"""
    return tuple(sorted(set(names)))


class FontRegistry:
    """Compute-once, read-many list of font family names.

    The first call to ``get_font_families()`` runs the query; concurrent
    first callers block until the single computation finishes and then all
    see the same fully built tuple. A failing query yields an empty registry
    instead of an error.
    """

    def __init__(self, query: Optional[FamilyQuery] = None):
        self._query = query or qt_font_family_query
        self._families: Optional[Tuple[str, ...]] = None
        self._lock = threading.Lock()
        self.logger = get_fonts_logger()

    @property
    def is_initialized(self) -> bool:
        return self._families is not None

    def get_font_families(self) -> Tuple[str, ...]:
        families = self._families
        if families is not None:
            return families

        with self._lock:
            if self._families is None:
                self._families = self._load()
            return self._families

    def _load(self) -> Tuple[str, ...]:
        try:
            families = build_family_list(self._query())
        except Exception as e:
            self.logger.warning(f"Font engine query failed, registry is empty: {e}")
            return ()

        self.logger.info(f"Font registry initialized with {len(families)} families")
        return families

    def __len__(self) -> int:
        return len(self.get_font_families())


_font_registry: Optional[FontRegistry] = None
_font_registry_lock = threading.Lock()


def get_global_font_registry() -> FontRegistry:
    """Get the process-wide registry used by the running application"""
    global _font_registry
    if _font_registry is None:
        with _font_registry_lock:
            if _font_registry is None:
                _font_registry = FontRegistry()
    return _font_registry
