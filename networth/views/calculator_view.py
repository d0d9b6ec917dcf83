"""Calculator form view for NetWorth Projector."""
from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel,
                             QPushButton, QLineEdit, QSlider, QComboBox,
                             QGroupBox, QTableWidget, QTableWidgetItem, QHeaderView)
from PyQt6.QtCore import Qt, QSignalBlocker

from ..data_structures import CompoundingMode, CurrencyCode, DurationUnit, Field, InputSource
from ..services.currency_presenter import format_amount
from ..theme import ThemeManager

# QSlider works in integers; positions are divided by this to get [0, 1]
SLIDER_RESOLUTION = 1000

FIELD_LABELS = {
    Field.PRINCIPAL: "Current net worth",
    Field.GROWTH_RATE: "Growth rate (%)",
}

COMPOUNDING_LABELS = [
    ("Quarterly", CompoundingMode.QUARTERLY),
    ("Monthly", CompoundingMode.MONTHLY),
    ("Yearly", CompoundingMode.YEARLY),
    ("None (simple)", CompoundingMode.NONE),
]


class FieldRow(QWidget):
    """Label, text box and slider for one calculator field."""

    def __init__(self, view, field, label):
        super().__init__()
        self.view = view
        self.field = field

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 4, 0, 4)
        layout.setSpacing(4)

        top = QHBoxLayout()
        labels = QVBoxLayout()
        labels.setSpacing(2)
        self.title = QLabel(label)
        labels.addWidget(self.title)
        self.caption = QLabel()
        self.caption.hide()
        labels.addWidget(self.caption)
        top.addLayout(labels)
        top.addStretch()

        self.text_input = QLineEdit()
        self.text_input.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.text_input.setFixedWidth(160 if field == Field.PRINCIPAL else 90)
        self.text_input.textEdited.connect(self.on_text_edited)
        self.text_input.editingFinished.connect(self.on_editing_finished)
        top.addWidget(self.text_input)
        layout.addLayout(top)

        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(0, SLIDER_RESOLUTION)
        self.slider.valueChanged.connect(self.on_slider_moved)
        layout.addWidget(self.slider)

    def on_text_edited(self, text):
        self.view.state.edit_text(self.field, text)

    def on_editing_finished(self):
        self.view.state.commit(self.field)

    def on_slider_moved(self, position):
        self.view.state.apply(self.field, InputSource.SLIDER, position / SLIDER_RESOLUTION)

    def sync(self, state):
        """Copy derived slider position and text from the state without re-triggering it."""
        with QSignalBlocker(self.slider):
            self.slider.setValue(round(state.slider_position(self.field) * SLIDER_RESOLUTION))
        if not state.has_draft(self.field) or not self.text_input.hasFocus():
            with QSignalBlocker(self.text_input):
                self.text_input.setText(state.display_text(self.field))


class CalculatorView(QWidget):
    """The calculator form: inputs, Calculate/Default, result and growth table."""

    def __init__(self, parent, state):
        super().__init__()
        self.main_window = parent
        self.state = state
        self.theme = ThemeManager()

        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        # --- Inputs ---
        inputs = QGroupBox("Inputs")
        inputs_layout = QVBoxLayout(inputs)

        header = QHBoxLayout()
        header.addStretch()
        self.currency_combo = QComboBox()
        self.currency_combo.addItem("USA", CurrencyCode.USD)
        self.currency_combo.addItem("INDIA", CurrencyCode.INR)
        self.currency_combo.currentIndexChanged.connect(self.on_currency_changed)
        header.addWidget(self.currency_combo)
        inputs_layout.addLayout(header)

        duration_label = "Months for growth" if state.duration_unit == DurationUnit.MONTHS else "Years for growth"
        self.rows = {
            Field.PRINCIPAL: FieldRow(self, Field.PRINCIPAL, FIELD_LABELS[Field.PRINCIPAL]),
            Field.GROWTH_RATE: FieldRow(self, Field.GROWTH_RATE, FIELD_LABELS[Field.GROWTH_RATE]),
            Field.DURATION: FieldRow(self, Field.DURATION, duration_label),
        }
        self.rows[Field.DURATION].caption.show()
        for row in self.rows.values():
            inputs_layout.addWidget(row)

        compounding_row = QHBoxLayout()
        compounding_row.addWidget(QLabel("Compounding"))
        compounding_row.addStretch()
        self.compounding_combo = QComboBox()
        for label, mode in COMPOUNDING_LABELS:
            self.compounding_combo.addItem(label, mode)
        self.compounding_combo.currentIndexChanged.connect(self.on_compounding_changed)
        compounding_row.addWidget(self.compounding_combo)
        inputs_layout.addLayout(compounding_row)

        layout.addWidget(inputs)

        # --- Actions ---
        actions = QHBoxLayout()
        self.calculate_btn = QPushButton("Calculate")
        self.calculate_btn.setMinimumHeight(36)
        self.calculate_btn.clicked.connect(self.state.calculate)
        actions.addWidget(self.calculate_btn)

        self.default_btn = QPushButton("Default")
        self.default_btn.setMinimumHeight(36)
        self.default_btn.clicked.connect(self.state.reset_defaults)
        actions.addWidget(self.default_btn)
        layout.addLayout(actions)

        # --- Output ---
        output = QGroupBox("Output")
        output_layout = QVBoxLayout(output)

        output_header = QHBoxLayout()
        output_header.addStretch()
        self.hold_btn = QPushButton()
        self.hold_btn.setToolTip("Hold to view the result in the other currency")
        self.hold_btn.pressed.connect(self.state.begin_hold)
        self.hold_btn.released.connect(self.state.end_hold)
        output_header.addWidget(self.hold_btn)
        output_layout.addLayout(output_header)

        self.output_label = QLabel()
        self.output_label.setWordWrap(True)
        output_layout.addWidget(self.output_label)

        self.error_label = QLabel()
        self.error_label.hide()
        output_layout.addWidget(self.error_label)

        self.schedule_table = QTableWidget(0, 3)
        self.schedule_table.setHorizontalHeaderLabels(["Year", "Balance", "Growth"])
        self.schedule_table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.schedule_table.verticalHeader().setVisible(False)
        self.schedule_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        output_layout.addWidget(self.schedule_table)

        layout.addWidget(output)

        self.apply_theme()
        self.state.on_change = self.refresh
        self.state.calculate()

    def apply_theme(self):
        """Restyle the form from the current palette."""
        self.setStyleSheet(self.theme.stylesheet())
        for row in self.rows.values():
            row.caption.setStyleSheet(f"color: {self.theme.get_color('text_secondary')}; font-size: 11px;")
        self.output_label.setStyleSheet(
            f"font-size: 16px; font-weight: bold; padding: 12px; "
            f"background: {self.theme.get_color('output_bg')}; border-radius: 8px;"
        )
        self.error_label.setStyleSheet(f"color: {self.theme.get_color('danger')};")

    def toggle_theme(self):
        self.theme.toggle_theme()
        self.apply_theme()
        self.refresh()
        return self.theme.is_dark

    def on_currency_changed(self, index):
        self.state.set_currency(self.currency_combo.itemData(index))

    def on_compounding_changed(self, index):
        self.state.set_compounding(self.compounding_combo.itemData(index))

    def refresh(self, state=None):
        """Re-derive every widget from the state manager."""
        state = state or self.state
        for row in self.rows.values():
            row.sync(state)
        self.rows[Field.DURATION].caption.setText(state.duration_caption())

        with QSignalBlocker(self.currency_combo):
            self.currency_combo.setCurrentIndex(self.currency_combo.findData(state.currency))
        with QSignalBlocker(self.compounding_combo):
            self.compounding_combo.setCurrentIndex(self.compounding_combo.findData(state.compounding))

        self.hold_btn.setText(state.opposite_currency.value)
        glow = self.theme.get_color('glow') if state.output is not None else self.theme.get_color('border')
        self.hold_btn.setStyleSheet(f"border: 2px solid {glow}; border-radius: 14px; padding: 4px 10px;")

        self.output_label.setText(state.output_text())
        if state.error_text:
            self.error_label.setText(state.error_text)
            self.error_label.show()
        else:
            self.error_label.hide()

        self.refresh_schedule(state)

    def refresh_schedule(self, state):
        if state.output is None:
            self.schedule_table.setRowCount(0)
            return
        df = state.growth_schedule()
        currency = state.display_currency
        self.schedule_table.setRowCount(len(df))
        for i, row in enumerate(df.itertuples(index=False)):
            self.schedule_table.setItem(i, 0, QTableWidgetItem(f"{row.year:.2f}"))
            self.schedule_table.setItem(i, 1, QTableWidgetItem(format_amount(row.balance, currency)))
            self.schedule_table.setItem(i, 2, QTableWidgetItem(format_amount(row.growth, currency)))
