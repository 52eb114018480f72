from pathlib import Path

from core.font_loader import discover_font_files, load_font_files, read_font_files


def make_fonts(directory: Path):
    (directory / "b.ttf").write_bytes(b"font-b")
    (directory / "a.ttf").write_bytes(b"font-a")
    (directory / "c.otf").write_bytes(b"font-c")
    (directory / "notes.txt").write_text("not a font")
    nested = directory / "nested"
    nested.mkdir()
    (nested / "deep.ttf").write_bytes(b"deep")


def test_discover_is_non_recursive_and_filtered(tmp_path):
    make_fonts(tmp_path)

    found = discover_font_files(tmp_path)

    assert [p.name for p in found] == ["a.ttf", "b.ttf"]


def test_discover_with_other_pattern(tmp_path):
    make_fonts(tmp_path)

    assert [p.name for p in discover_font_files(tmp_path, "*.otf")] == ["c.otf"]


def test_discover_missing_directory_is_empty(tmp_path):
    assert discover_font_files(tmp_path / "missing") == []


def test_read_skips_unreadable_files(tmp_path, caplog):
    make_fonts(tmp_path)
    paths = [tmp_path / "a.ttf", tmp_path / "gone.ttf", tmp_path / "b.ttf"]

    with caplog.at_level("WARNING", logger="fontpeek.fonts"):
        blobs = read_font_files(paths)

    assert blobs == [b"font-a", b"font-b"]
    assert "gone.ttf" in caplog.text


def test_load_font_files(tmp_path):
    make_fonts(tmp_path)

    assert load_font_files(tmp_path) == [b"font-a", b"font-b"]
