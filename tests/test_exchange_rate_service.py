"""Tests for the persisted exchange rate and the settings store behind it."""
import math
import os
import sys
import tempfile
import unittest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from networth.config import DEFAULT_EXCHANGE_RATE, EXCHANGE_RATE_SETTING_KEY
from networth.database import DatabaseManager
from networth.exceptions import InvalidExchangeRateError, InvalidInputError, TransactionError
from networth.services.exchange_rate_service import ExchangeRateService


class TestExchangeRateService(unittest.TestCase):

    def setUp(self):
        self.db = DatabaseManager(":memory:")
        self.service = ExchangeRateService(self.db)

    def tearDown(self):
        self.db.close()

    def test_default_rate(self):
        self.assertEqual(DEFAULT_EXCHANGE_RATE, 83.0)
        self.assertEqual(self.service.get_rate(), 83.0)

    def test_set_rate(self):
        self.assertEqual(self.service.set_rate(89.5), 89.5)
        self.assertEqual(self.service.get_rate(), 89.5)

    def test_rejects_non_positive_rates(self):
        for bad in (0, -1, float('nan'), float('inf'), None):
            with self.assertRaises(InvalidExchangeRateError, msg=repr(bad)):
                self.service.set_rate(bad)
        self.assertEqual(self.service.get_rate(), 83.0)

    def test_invalid_rate_is_an_input_error(self):
        with self.assertRaises(InvalidInputError):
            self.service.set_rate(0)

    def test_set_rate_from_text(self):
        self.assertEqual(self.service.set_rate_from_text(" 90.25 "), 90.25)
        self.assertEqual(self.service.get_rate(), 90.25)

    def test_set_rate_from_bad_text(self):
        self.service.set_rate(85.0)
        for text in ("", "abc", "0", "-3"):
            with self.assertRaises(InvalidExchangeRateError, msg=repr(text)):
                self.service.set_rate_from_text(text)
        self.assertEqual(self.service.get_rate(), 85.0)

    def test_corrupt_stored_value_falls_back(self):
        self.db.set_setting(EXCHANGE_RATE_SETTING_KEY, "not-a-number")
        self.assertEqual(self.service.get_rate(), 83.0)
        self.db.set_setting(EXCHANGE_RATE_SETTING_KEY, "-4")
        self.assertEqual(self.service.get_rate(), 83.0)

    def test_reset_to_default(self):
        self.service.set_rate(70.0)
        self.assertEqual(self.service.reset_to_default(), 83.0)
        self.assertEqual(self.service.get_rate(), 83.0)

    def test_format_rate(self):
        self.assertEqual(self.service.format_rate(), "83.00")
        self.assertEqual(self.service.format_rate(89.456), "89.46")

    def test_custom_default(self):
        service = ExchangeRateService(self.db, default_rate=89.0)
        self.assertEqual(service.get_rate(), 89.0)
        self.assertEqual(service.reset_to_default(), 89.0)


class TestRatePersistence(unittest.TestCase):
    """The rate survives a restart; nothing else is stored."""

    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix=".db")
        os.close(fd)

    def tearDown(self):
        if os.path.exists(self.path):
            os.remove(self.path)

    def test_rate_survives_reopen(self):
        with DatabaseManager(self.path) as db:
            ExchangeRateService(db).set_rate(88.75)

        with DatabaseManager(self.path) as db:
            self.assertEqual(ExchangeRateService(db).get_rate(), 88.75)

    def test_only_settings_table_exists(self):
        with DatabaseManager(self.path) as db:
            rows = db.conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table'").fetchall()
        self.assertEqual([r[0] for r in rows], ['settings'])


class TestDatabaseTransactions(unittest.TestCase):

    def setUp(self):
        self.db = DatabaseManager(":memory:")

    def tearDown(self):
        self.db.close()

    def test_setting_round_trip(self):
        self.assertIsNone(self.db.get_setting("missing"))
        self.assertEqual(self.db.get_setting("missing", "fallback"), "fallback")
        self.db.set_setting("theme", "dark")
        self.assertEqual(self.db.get_setting("theme"), "dark")

    def test_sqlite_error_rolls_back(self):
        self.db.set_setting("a", "1")
        with self.assertRaises(TransactionError):
            with self.db.transaction():
                self.db.conn.execute("UPDATE settings SET value='2' WHERE key='a'")
                self.db.conn.execute("INSERT INTO no_such_table VALUES (1)")
        self.assertEqual(self.db.get_setting("a"), "1")

    def test_other_errors_roll_back_and_propagate(self):
        self.db.set_setting("a", "1")
        with self.assertRaises(RuntimeError):
            with self.db.transaction():
                self.db.conn.execute("UPDATE settings SET value='3' WHERE key='a'")
                raise RuntimeError("boom")
        self.assertEqual(self.db.get_setting("a"), "1")

    def test_stored_rate_is_exact(self):
        service = ExchangeRateService(self.db)
        service.set_rate(1 / 3)
        self.assertTrue(math.isclose(service.get_rate(), 1 / 3, rel_tol=0, abs_tol=0))


if __name__ == '__main__':
    unittest.main()
