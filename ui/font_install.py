"""Registers font files read from disk with Qt's font database."""

from typing import Iterable

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QFontDatabase

from core.logging_config import get_fonts_logger


def install_application_fonts(blobs: Iterable[bytes]) -> int:
    """Add each font blob to QFontDatabase, skipping ones Qt rejects.

    Must run after the QApplication exists and before the font registry
    is first queried.

    Returns:
        Number of fonts that were installed
    """
    logger = get_fonts_logger()
    installed = 0
    for n, blob in enumerate(blobs):
        font_id = QFontDatabase.addApplicationFontFromData(QByteArray(blob))
        if font_id < 0:
            logger.warning(f"Qt rejected font data #{n} ({len(blob)} bytes), skipping")
            continue
        families = QFontDatabase.applicationFontFamilies(font_id)
        logger.debug(f"Installed font #{n}: {', '.join(families) or 'no families'}")
        installed += 1
    return installed
