"""
Font file discovery for FontPeek.

Finds font files next to the application (non-recursive) and reads their
raw bytes so the Qt side can register them before the registry snapshot
is taken. A file that cannot be read is skipped; the rest still load.
"""

from pathlib import Path
from typing import Iterable, List, Union

from core.logging_config import get_fonts_logger

DEFAULT_FONT_PATTERN = "*.ttf"


def discover_font_files(directory: Union[str, Path], pattern: str = DEFAULT_FONT_PATTERN) -> List[Path]:
    """Return files directly inside ``directory`` matching ``pattern``.

    Missing directories are treated as empty.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.glob(pattern) if p.is_file())


def read_font_files(paths: Iterable[Path]) -> List[bytes]:
    logger = get_fonts_logger()
    blobs: List[bytes] = []
    for path in paths:
        try:
            blobs.append(Path(path).read_bytes())
        except OSError as e:
            logger.warning(f"Skipping unreadable font file {path}: {e}")
            continue
        logger.debug(f"Read font file {path}")
    return blobs


def load_font_files(directory: Union[str, Path], pattern: str = DEFAULT_FONT_PATTERN) -> List[bytes]:
    """Discover and read font files in one step"""
    paths = discover_font_files(directory, pattern)
    blobs = read_font_files(paths)
    get_fonts_logger().info(f"Loaded {len(blobs)} of {len(paths)} font files from {Path(directory).resolve()}")
    return blobs
