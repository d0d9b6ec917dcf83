import os
import sys
import unittest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from networth.database import DatabaseManager
from networth.dialogs import SettingsDialog
from networth.services.exchange_rate_service import ExchangeRateService


class TestSettingsDialog(unittest.TestCase):
    """Exchange rate editing: live save, OK keeps, Cancel restores."""

    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        self.db = DatabaseManager(":memory:")
        self.service = ExchangeRateService(self.db)

    def tearDown(self):
        self.db.close()

    def test_shows_current_rate(self):
        self.service.set_rate(88.5)
        dialog = SettingsDialog(self.service)
        self.assertEqual(dialog.rate_input.text(), "88.50")

    def test_typing_saves_live(self):
        dialog = SettingsDialog(self.service)
        dialog.rate_input.setText("120")
        self.assertEqual(self.service.get_rate(), 120.0)

    def test_ok_keeps_new_rate(self):
        dialog = SettingsDialog(self.service)
        dialog.rate_input.setText("120")
        dialog.validate_and_accept()
        self.assertEqual(self.service.get_rate(), 120.0)

    def test_cancel_restores_opening_rate(self):
        dialog = SettingsDialog(self.service)
        dialog.rate_input.setText("120")
        dialog.reject()
        self.assertEqual(self.service.get_rate(), 83.0)

    def test_cancel_after_reset_restores_opening_rate(self):
        self.service.set_rate(91.0)
        dialog = SettingsDialog(self.service)
        dialog.reset_to_default()
        self.assertEqual(self.service.get_rate(), 83.0)
        dialog.reject()
        self.assertEqual(self.service.get_rate(), 91.0)

    def test_invalid_text_is_not_saved(self):
        dialog = SettingsDialog(self.service)
        dialog.rate_input.setText("0")
        self.assertFalse(dialog.validate_rate())
        self.assertEqual(self.service.get_rate(), 83.0)
        dialog.validate_and_accept()
        self.assertEqual(self.service.get_rate(), 83.0)


if __name__ == '__main__':
    unittest.main()
