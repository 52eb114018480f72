import logging

from core.logging_config import (FontPeekFormatter, enable_debug_logging,
                                 get_logger, set_log_level, setup_logging)


def test_setup_logging_does_not_duplicate_handlers():
    first = setup_logging("DUPCHECK")
    count = len(first.handlers)

    second = setup_logging("DUPCHECK")

    assert first is second
    assert len(second.handlers) == count
    assert first.name == "fontpeek.dupcheck"


def test_get_logger_reuses_existing():
    logger = setup_logging("REUSE", level="WARNING")

    assert get_logger("reuse") is logger
    assert logger.level == logging.WARNING


def test_formatter_includes_component_and_level():
    formatter = FontPeekFormatter("FONTS", use_colors=False)
    record = logging.LogRecord("fontpeek.fonts", logging.WARNING, __file__, 1,
                               "skipped %s", ("x.ttf",), None)

    text = formatter.format(record)

    assert "[FONTS] [WARNING] skipped x.ttf" in text


def test_set_log_level_applies_to_fontpeek_loggers_only():
    ours = setup_logging("LEVELS")
    other = logging.getLogger("somebody.else")
    other.setLevel(logging.ERROR)

    enable_debug_logging()
    assert ours.level == logging.DEBUG
    assert other.level == logging.ERROR

    set_log_level("INFO")
    assert ours.level == logging.INFO
