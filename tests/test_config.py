from pathlib import Path

import pytest

from core.config import ViewerConfig, parse_args
from core.models import FontWeight


def test_defaults():
    config = ViewerConfig()

    assert config.sample_text == "ABC123"
    assert config.text_size == 12.0
    assert (config.min_text_size, config.max_text_size) == (10.0, 200.0)
    assert config.weight is FontWeight.NORMAL
    assert config.font_dir == Path(".")
    assert config.font_pattern == "*.ttf"
    assert config.log_level == "INFO"


@pytest.mark.parametrize("kwargs", [
    {"text_size": 5.0},
    {"text_size": 250.0},
    {"min_text_size": 0.0},
    {"min_text_size": 50.0, "max_text_size": 20.0, "text_size": 30.0},
    {"font_pattern": ""},
    {"font_pattern": "**/*.ttf"},
    {"font_pattern": "sub/*.ttf"},
    {"log_level": "CHATTY"},
    {"weight": 400},
])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        ViewerConfig(**kwargs)


def test_log_level_is_normalized():
    config = ViewerConfig(log_level="debug")

    assert config.log_level == "DEBUG"
    assert config.log_level_value == 10


def test_dict_round_trip():
    config = ViewerConfig(sample_text="Hamburgefonstiv", weight=FontWeight.BOLD, font_dir="fonts")

    data = config.to_dict()
    assert data["weight"] == "Bold"
    assert data["font_dir"] == "fonts"

    assert ViewerConfig.from_dict(data) == config


def test_parse_args_defaults():
    assert parse_args([]) == ViewerConfig()


def test_parse_args_options(tmp_path):
    config = parse_args([
        "--text", "Quick fox",
        "--size", "36.5",
        "--weight", "ExtraBold",
        "--font-dir", str(tmp_path),
        "--pattern", "*.otf",
        "--debug",
        "--log-file",
    ])

    assert config.sample_text == "Quick fox"
    assert config.text_size == 36.5
    assert config.weight is FontWeight.EXTRA_BOLD
    assert config.font_dir == tmp_path
    assert config.font_pattern == "*.otf"
    assert config.log_level == "DEBUG"
    assert config.log_to_file is True


@pytest.mark.parametrize("argv", [
    ["--size", "huge"],
    ["--size", "nan"],
    ["--size", "500"],
    ["--weight", "Heavy"],
    ["--pattern", "**/*.ttf"],
])
def test_parse_args_reports_bad_values(argv):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(argv)

    assert excinfo.value.code == 2
