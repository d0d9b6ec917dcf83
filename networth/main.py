"""Main application window for NetWorth Projector."""
import sys

from PyQt6.QtWidgets import QApplication, QMainWindow
from PyQt6.QtGui import QAction

from .config import APP_NAME, DEFAULT_DB_NAME
from .database import DatabaseManager
from .dialogs import SettingsDialog
from .services.exchange_rate_service import ExchangeRateService
from .ui_state_manager import CalculatorStateManager
from .views.calculator_view import CalculatorView


class MainApp(QMainWindow):
    """Main application window."""

    def __init__(self, db_path=DEFAULT_DB_NAME):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.resize(520, 760)

        self.db = DatabaseManager(db_path)
        self.rate_service = ExchangeRateService(self.db)
        self.state = CalculatorStateManager(rate_service=self.rate_service)

        self.calculator = CalculatorView(self, self.state)
        self.setCentralWidget(self.calculator)

        self.create_menus()

    def create_menus(self):
        """Create application menus."""
        menubar = self.menuBar()
        settings_menu = menubar.addMenu("Settings")

        rate_action = QAction("Exchange Rate...", self)
        rate_action.setStatusTip("Edit the USD to INR conversion rate")
        rate_action.triggered.connect(self.open_settings)
        settings_menu.addAction(rate_action)

        view_menu = menubar.addMenu("View")
        self.dark_action = QAction("Dark Mode", self)
        self.dark_action.setCheckable(True)
        self.dark_action.triggered.connect(self.toggle_theme)
        view_menu.addAction(self.dark_action)

    def toggle_theme(self):
        self.dark_action.setChecked(self.calculator.toggle_theme())

    def open_settings(self):
        dialog = SettingsDialog(self.rate_service, self)
        dialog.exec()
        # Rate is read fresh on every calculation
        if self.state.output is not None:
            self.state.calculate()

    def closeEvent(self, event):
        self.db.close()
        event.accept()


def main():
    """Entry point for the application."""
    app = QApplication(sys.argv)
    db_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_DB_NAME
    window = MainApp(db_path)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
