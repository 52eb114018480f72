"""
Viewer configuration for FontPeek.

Settings live only for one run: they come from defaults and the command
line and are never written back.
"""

import argparse
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.models import FontWeight, UnknownWeightError
from core.utils import to_float_optional

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ViewerConfig:
    """Startup configuration with validation"""
    sample_text: str = "ABC123"
    text_size: float = 12.0
    min_text_size: float = 10.0
    max_text_size: float = 200.0
    weight: FontWeight = FontWeight.NORMAL
    font_dir: Path = field(default_factory=lambda: Path("."))
    font_pattern: str = "*.ttf"
    log_level: str = "INFO"
    log_to_file: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization"""
        self.font_dir = Path(self.font_dir)
        self.log_level = self.log_level.upper()

        if not (0 < self.min_text_size < self.max_text_size):
            raise ValueError(
                f"Text size bounds must satisfy 0 < min < max, got {self.min_text_size}..{self.max_text_size}")

        if not (self.min_text_size <= self.text_size <= self.max_text_size):
            raise ValueError(
                f"Text size must be between {self.min_text_size:g} and {self.max_text_size:g}, got {self.text_size:g}")

        if not isinstance(self.weight, FontWeight):
            raise ValueError(f"Invalid weight: {self.weight!r}")

        # Font discovery is deliberately non-recursive
        if not self.font_pattern or '/' in self.font_pattern or '**' in self.font_pattern:
            raise ValueError(f"Font pattern must match files directly in the font directory, got {self.font_pattern!r}")

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain values for logging"""
        data = asdict(self)
        data['weight'] = str(self.weight)
        data['font_dir'] = str(self.font_dir)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ViewerConfig':
        """Create from dictionary, accepting weights by label"""
        data = dict(data)
        if isinstance(data.get('weight'), str):
            data['weight'] = FontWeight.from_label(data['weight'])
        return cls(**data)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fontpeek",
        description="Preview sample text in every installed font family"
    )
    parser.add_argument(
        '--text',
        default=ViewerConfig.sample_text,
        help='Initial sample text (default: %(default)s)'
    )
    parser.add_argument(
        '--size',
        default=str(ViewerConfig.text_size),
        help='Initial text size (default: %(default)s)'
    )
    parser.add_argument(
        '--weight',
        default=str(FontWeight.default()),
        choices=[str(w) for w in FontWeight],
        help='Initial font weight (default: %(default)s)'
    )
    parser.add_argument(
        '--font-dir',
        type=Path,
        default=Path("."),
        help='Directory scanned (non-recursively) for extra font files (default: current directory)'
    )
    parser.add_argument(
        '--pattern',
        default=ViewerConfig.font_pattern,
        help='File pattern for extra font files (default: %(default)s)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--log-file',
        action='store_true',
        help='Also write logs to the per-user data directory'
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> ViewerConfig:
    """Build a ViewerConfig from command-line arguments.

    Invalid values are reported through argparse, which exits with status 2.
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    size = to_float_optional(args.size)
    if size is None:
        parser.error(f"argument --size: invalid number: {args.size!r}")

    try:
        return ViewerConfig(
            sample_text=args.text,
            text_size=size,
            weight=FontWeight.from_label(args.weight),
            font_dir=args.font_dir,
            font_pattern=args.pattern,
            log_level='DEBUG' if args.debug else 'INFO',
            log_to_file=args.log_file,
        )
    except (ValueError, UnknownWeightError) as e:
        parser.error(str(e))
