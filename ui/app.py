"""
FontPeek viewer window.
Widgets only translate user input into messages; all state lives in ViewState.
"""

import sys
from typing import List, Optional

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import (QApplication, QCheckBox, QComboBox, QHBoxLayout,
                             QHeaderView, QLabel, QLineEdit, QMainWindow,
                             QSlider, QTableWidget, QTableWidgetItem,
                             QVBoxLayout, QWidget)

import core
from core.config import ViewerConfig, parse_args
from core.font_loader import load_font_files
from core.font_registry import FontRegistry, get_global_font_registry
from core.logging_config import get_viewer_logger, setup_logging
from core.models import (FontFamilyFilterChanged, FontWeight, HideUnpin,
                         Message, Pin, TextChanged, TextSizeChanged,
                         WeightChanged)
from core.utils import format_text_size, parse_text_size
from core.view_state import ViewState
from ui.font_install import install_application_fonts
from ui.fonts import header_font, preview_font

FAMILY_COLUMN = 0
TEXT_COLUMN = 1
PIN_COLUMN = 2


class FontViewerWindow(QMainWindow):
    """Main FontPeek window: sample text controls above a table of families"""

    def __init__(self, registry: FontRegistry, config: Optional[ViewerConfig] = None) -> None:
        super().__init__()
        self.logger = get_viewer_logger()
        self.config = config or ViewerConfig()
        self.registry = registry

        self.state = ViewState(
            families=registry.get_font_families(),
            text=self.config.sample_text,
            weight=self.config.weight,
            text_size=self.config.text_size,
        )
        self.logger.debug(f"Viewer state initialized with {len(self.state.shown)} rows")

        self.setWindowTitle("FontPeek")
        self.resize(900, 700)
        self.setup_controls()
        self.setup_table()
        self.setup_layout()
        self.populate_table()

    def setup_controls(self):
        self.text_input = QLineEdit(self.state.text)
        self.text_input.setPlaceholderText("please type a text.")
        self.text_input.textChanged.connect(lambda v: self.dispatch(TextChanged(v)))

        self.weight_combo = QComboBox()
        for weight in FontWeight:
            self.weight_combo.addItem(str(weight), weight)
        self.weight_combo.setCurrentIndex(list(FontWeight).index(self.state.weight))
        self.weight_combo.setFixedWidth(120)
        self.weight_combo.currentIndexChanged.connect(self.handle_weight_changed)

        self.size_input = QLineEdit(format_text_size(self.state.text_size))
        self.size_input.setPlaceholderText("text size")
        self.size_input.setFixedWidth(60)
        self.size_input.textEdited.connect(self.handle_size_edited)
        self.size_input.editingFinished.connect(self.sync_size_controls)

        self.size_slider = QSlider(Qt.Orientation.Horizontal)
        self.size_slider.setRange(int(self.config.min_text_size), int(self.config.max_text_size))
        self.size_slider.setValue(int(round(self.state.text_size)))
        self.size_slider.valueChanged.connect(self.handle_size_slider)

        self.filter_input = QLineEdit(self.state.font_family_filter)
        self.filter_input.setPlaceholderText("font family")
        self.filter_input.setToolTip("Substring match; separate alternatives with |")
        self.filter_input.textChanged.connect(lambda v: self.dispatch(FontFamilyFilterChanged(v)))

        self.hide_unpinned_check = QCheckBox()
        self.hide_unpinned_check.setChecked(self.state.hide_unpinned)
        self.hide_unpinned_check.toggled.connect(lambda v: self.dispatch(HideUnpin(v)))

    def setup_table(self):
        self.table = QTableWidget()
        self.table.setColumnCount(3)
        self.table.setHorizontalHeaderLabels(['Font Family', 'Text', 'Pin'])
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.setSelectionMode(QTableWidget.SelectionMode.NoSelection)

        header = self.table.horizontalHeader()
        header.setFont(header_font())
        header.setSectionResizeMode(FAMILY_COLUMN, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(TEXT_COLUMN, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(PIN_COLUMN, QHeaderView.ResizeMode.ResizeToContents)

    def setup_layout(self):
        central = QWidget()
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(10, 10, 10, 10)
        main_layout.setSpacing(10)

        text_row = QHBoxLayout()
        text_row.addWidget(QLabel("Text"))
        text_row.addWidget(self.text_input, 1)
        main_layout.addLayout(text_row)

        weight_row = QHBoxLayout()
        weight_row.addWidget(QLabel("Weight:"))
        weight_row.addWidget(self.weight_combo)
        weight_row.addStretch()
        main_layout.addLayout(weight_row)

        size_row = QHBoxLayout()
        size_row.addWidget(QLabel("Size:"))
        size_row.addWidget(self.size_input)
        size_row.addWidget(self.size_slider, 1)
        main_layout.addLayout(size_row)

        filter_row = QHBoxLayout()
        filter_row.addWidget(QLabel("Font Family Filter:"))
        filter_row.addWidget(self.filter_input, 1)
        main_layout.addLayout(filter_row)

        pinned_row = QHBoxLayout()
        pinned_row.addWidget(QLabel("pinned"))
        pinned_row.addWidget(self.hide_unpinned_check)
        pinned_row.addStretch()
        main_layout.addLayout(pinned_row)

        main_layout.addWidget(self.table, 1)
        self.setCentralWidget(central)

    def dispatch(self, message: Message) -> None:
        """Apply one message to the state and re-render what it affects"""
        rows_changed = self.state.update(message)
        if rows_changed:
            self.populate_table()
        else:
            self.refresh_previews()

    def handle_weight_changed(self, combo_index: int):
        weight = self.weight_combo.itemData(combo_index)
        if weight is not None:
            self.dispatch(WeightChanged(weight))

    def handle_size_edited(self, text: str):
        size = parse_text_size(text, self.state.text_size,
                               self.config.min_text_size, self.config.max_text_size)
        if size != self.state.text_size:
            self.dispatch(TextSizeChanged(size))
            self.size_slider.blockSignals(True)
            self.size_slider.setValue(int(round(size)))
            self.size_slider.blockSignals(False)

    def handle_size_slider(self, value: int):
        self.dispatch(TextSizeChanged(float(value)))
        self.size_input.setText(format_text_size(self.state.text_size))

    def sync_size_controls(self):
        # Drop whatever invalid text is left in the field
        self.size_input.setText(format_text_size(self.state.text_size))

    def request_pin(self, index: int):
        # Deferred so the row's checkbox is not destroyed inside its own signal
        QTimer.singleShot(0, lambda: self.dispatch(Pin(index)))

    def populate_table(self):
        shown = self.state.shown
        self.table.setRowCount(0)
        self.table.setRowCount(len(shown))

        for row, index in enumerate(shown):
            family_item = QTableWidgetItem(self.state.family(index))
            family_item.setData(Qt.ItemDataRole.UserRole, index)
            self.table.setItem(row, FAMILY_COLUMN, family_item)

            preview = QLabel()
            self.table.setCellWidget(row, TEXT_COLUMN, preview)

            pin_check = QCheckBox()
            pin_check.setChecked(self.state.is_pinned(index))
            pin_check.toggled.connect(lambda _checked, i=index: self.request_pin(i))
            self.table.setCellWidget(row, PIN_COLUMN, pin_check)

        self.refresh_previews()

    def refresh_previews(self):
        for row, index in enumerate(self.state.shown):
            preview = self.table.cellWidget(row, TEXT_COLUMN)
            if preview is None:
                continue
            preview.setText(self.state.text)
            preview.setFont(preview_font(self.state.family(index), self.state.text_size, self.state.weight))
        self.table.resizeRowsToContents()

    def shown_family_names(self) -> List[str]:
        """Family names in table order"""
        return [self.table.item(row, FAMILY_COLUMN).text() for row in range(self.table.rowCount())]


def main(argv: Optional[List[str]] = None):
    """Main entry point for the FontPeek application"""
    config = parse_args(argv)

    logger = setup_logging("VIEWER", config.log_level, config.log_to_file)
    setup_logging("FONTS", config.log_level, config.log_to_file)
    logger.info(f"Starting FontPeek v{core.__VERSION__}")
    logger.debug(f"Configuration: {config.to_dict()}")

    # Font files are read before Qt starts; installing them needs the app
    blobs = load_font_files(config.font_dir, config.font_pattern)

    app = QApplication(sys.argv[:1])
    app.setApplicationName("FontPeek")
    app.setApplicationVersion(core.__VERSION__)

    installed = install_application_fonts(blobs)
    logger.info(f"Installed {installed} application fonts")

    window = FontViewerWindow(get_global_font_registry(), config)
    window.show()

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
