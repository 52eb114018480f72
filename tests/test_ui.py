import pytest

pytest.importorskip("PyQt6.QtWidgets")

from core.config import ViewerConfig
from core.font_registry import FontRegistry
from core.models import (FontFamilyFilterChanged, FontWeight, HideUnpin, Pin,
                         TextChanged, TextSizeChanged, WeightChanged)


@pytest.fixture
def window(qapp):
    from ui.app import FontViewerWindow

    registry = FontRegistry(lambda: ["Courier", "Arial", "Calibri", "Arial"])
    win = FontViewerWindow(registry, ViewerConfig(sample_text="Sphinx"))
    yield win
    win.close()
    win.deleteLater()


@pytest.mark.parametrize("weight", list(FontWeight))
def test_qt_weight_mapping_round_trips(weight):
    from ui.weights import from_qt_weight, to_qt_weight

    assert from_qt_weight(to_qt_weight(weight)) is weight


def test_qt_weight_mapping_is_one_to_one():
    from ui.weights import to_qt_weight

    assert len({to_qt_weight(w) for w in FontWeight}) == 9


def test_preview_font_uses_family_size_and_weight(qapp):
    from ui.fonts import preview_font

    font = preview_font("Courier", 24.5, FontWeight.BOLD)

    assert font.family() == "Courier"
    assert font.pointSizeF() == 24.5
    assert font.bold()


def test_install_rejects_invalid_font_data(qapp):
    from ui.font_install import install_application_fonts

    assert install_application_fonts([b"definitely not a font"]) == 0


def test_window_lists_all_families_initially(window):
    assert window.shown_family_names() == ["Arial", "Calibri", "Courier"]
    assert window.weight_combo.currentText() == "Normal"
    assert window.size_input.text() == "12"


def test_filter_updates_table(window):
    window.dispatch(FontFamilyFilterChanged("Cal|Cour"))

    assert window.shown_family_names() == ["Calibri", "Courier"]


def test_pin_and_hide_unpinned(window):
    window.dispatch(Pin(2))
    window.dispatch(Pin(0))
    window.dispatch(HideUnpin(True))

    assert window.shown_family_names() == ["Arial", "Courier"]
    assert window.table.cellWidget(0, 2).isChecked()


def test_preview_follows_text_size_and_weight(window):
    window.dispatch(TextChanged("Jackdaws"))
    window.dispatch(TextSizeChanged(30.0))
    window.dispatch(WeightChanged(FontWeight.LIGHT))

    preview = window.table.cellWidget(0, 1)
    assert preview.text() == "Jackdaws"
    assert preview.font().pointSizeF() == 30.0
    assert preview.font().family() == "Arial"


def test_invalid_size_text_keeps_previous_value(window):
    window.handle_size_edited("not a number")
    assert window.state.text_size == 12.0

    window.handle_size_edited("48")
    assert window.state.text_size == 48.0
    assert window.size_slider.value() == 48


def test_slider_updates_size_field(window):
    window.size_slider.setValue(64)

    assert window.state.text_size == 64.0
    assert window.size_input.text() == "64"


def test_empty_registry_window(qapp):
    from ui.app import FontViewerWindow

    def broken_query():
        raise RuntimeError("engine not ready")

    win = FontViewerWindow(FontRegistry(broken_query))

    assert win.table.rowCount() == 0
    win.close()
