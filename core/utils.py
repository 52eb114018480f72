"""
Shared utility functions for FontPeek.
"""

import math
from pathlib import Path
from typing import Optional, Union

from platformdirs import user_data_dir


def get_data_path(relative_path: str) -> Path:
    """Get absolute path to writable data files (currently only logs).

    Resolves under the per-user data directory returned by
    ``platformdirs.user_data_dir``, e.g. ``~/.local/share/FontPeek`` on Linux.
    The directory itself is not created here.
    """
    return Path(user_data_dir("FontPeek")) / relative_path


def to_float_optional(value: Union[str, float, int, None]) -> Optional[float]:
    """Convert string to a finite float, return None if invalid"""
    if value is None or value == '':
        return None
    try:
        result = float(value)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(result):
        return None
    return result


def parse_text_size(text: str, previous: float, minimum: float, maximum: float) -> float:
    """Parse the size field, keeping the previous value for unusable input.

    Anything that is not a finite number inside ``[minimum, maximum]`` leaves
    the size unchanged.
    """
    size = to_float_optional(text.strip() if isinstance(text, str) else text)
    if size is None or not (minimum <= size <= maximum):
        return previous
    return size


def format_text_size(size: float) -> str:
    """Format a size for the text field: 12.0 -> '12', 12.5 -> '12.5'"""
    if float(size).is_integer():
        return str(int(size))
    return f"{size:g}"
