from PyQt6.QtWidgets import (QDialog, QFormLayout, QLineEdit, QPushButton,
                             QVBoxLayout, QLabel, QGroupBox, QDialogButtonBox)

from .config import INVALID_RATE_MESSAGE
from .exceptions import InvalidExchangeRateError


class SettingsDialog(QDialog):
    """Dialog for editing the USD to INR exchange rate."""

    def __init__(self, rate_service, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(360)
        self.rate_service = rate_service
        # Edits are saved live; Cancel puts this rate back
        self.initial_rate = rate_service.get_rate()

        layout = QVBoxLayout(self)

        group = QGroupBox("Currency Conversion")
        form = QFormLayout(group)

        self.rate_input = QLineEdit(self.rate_service.format_rate())
        self.rate_input.setPlaceholderText("USD → INR rate")
        self.rate_error = QLabel()
        self.rate_error.setStyleSheet("color: #dc3545; font-size: 11px;")
        self.rate_error.setWordWrap(True)
        self.rate_error.hide()

        rate_layout = QVBoxLayout()
        rate_layout.setSpacing(2)
        rate_layout.addWidget(self.rate_input)
        rate_layout.addWidget(self.rate_error)
        form.addRow("1 USD =", rate_layout)

        hint = QLabel("The exchange rate from US Dollar to Indian Rupee (1 USD equals X INR).")
        hint.setWordWrap(True)
        hint.setStyleSheet("color: #4B5563; font-size: 11px;")
        form.addRow(hint)

        default_text = self.rate_service.format_rate(self.rate_service.default_rate)
        self.reset_btn = QPushButton(f"Reset to Default ({default_text})")
        self.reset_btn.clicked.connect(self.reset_to_default)
        form.addRow(self.reset_btn)

        layout.addWidget(group)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        buttons.accepted.connect(self.validate_and_accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.rate_input.textChanged.connect(self.validate_rate)

    def validate_rate(self):
        """Live-save the rate while it parses; show an error otherwise."""
        try:
            self.rate_service.set_rate_from_text(self.rate_input.text())
        except InvalidExchangeRateError:
            self.rate_error.setText(INVALID_RATE_MESSAGE)
            self.rate_error.show()
            self.rate_input.setStyleSheet("border: 1px solid #dc3545;")
            return False
        self.rate_error.hide()
        self.rate_input.setStyleSheet("")
        return True

    def reset_to_default(self):
        rate = self.rate_service.reset_to_default()
        self.rate_input.setText(self.rate_service.format_rate(rate))

    def validate_and_accept(self):
        if self.validate_rate():
            self.accept()

    def reject(self):
        """Discard live edits by restoring the rate the dialog opened with."""
        if self.rate_service.get_rate() != self.initial_rate:
            self.rate_service.set_rate(self.initial_rate)
        super().reject()
