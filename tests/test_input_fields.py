import os
import sys
import unittest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from networth.config import INVALID_PRINCIPAL_MESSAGE, YEARS_STEP
from networth.data_structures import CurrencyCode, DurationUnit
from networth.exceptions import InvalidInputError
from networth.services.input_fields import DurationField, GrowthRateField, PrincipalField


class TestPrincipalField(unittest.TestCase):

    def setUp(self):
        self.usd = PrincipalField(CurrencyCode.USD)
        self.inr = PrincipalField(CurrencyCode.INR)

    def test_bounds_follow_currency(self):
        self.assertEqual(self.usd.max_value, 50_000_000)
        self.assertEqual(self.inr.max_value, 5_000_000_000)

    def test_slider_values_are_whole(self):
        for t in (0.1, 0.33, 0.5, 0.77, 0.99):
            value = self.usd.from_slider(t)
            self.assertEqual(value, int(value))

    def test_rounding_half_away_from_zero(self):
        self.assertEqual(self.usd.snap(2.5), 3.0)
        self.assertEqual(self.usd.snap(3.5), 4.0)
        self.assertEqual(self.usd.snap(2.4), 2.0)

    def test_parse_grouped_text(self):
        self.assertEqual(self.usd.parse("1,234,567"), 1234567.0)
        self.assertEqual(self.inr.parse("12,34,567"), 1234567.0)

    def test_parse_clamps_to_maximum(self):
        self.assertEqual(self.usd.parse("99,000,000"), 50_000_000)

    def test_invalid_text_uses_principal_message(self):
        for text in ("abc", "", "-5"):
            with self.assertRaises(InvalidInputError) as ctx:
                self.usd.parse(text)
            self.assertEqual(ctx.exception.message, INVALID_PRINCIPAL_MESSAGE)
            self.assertEqual(ctx.exception.field, "principal")

    def test_format_uses_currency_grouping(self):
        self.assertEqual(self.usd.format(500000), "500,000")
        self.assertEqual(self.inr.format(500000), "5,00,000")


class TestGrowthRateField(unittest.TestCase):

    def test_bezier_bounds(self):
        field = GrowthRateField()
        self.assertEqual(field.clamp(0.0), 0.1)
        self.assertEqual(field.clamp(80.0), 50.0)
        self.assertAlmostEqual(field.from_slider(0.5), 8.0, places=9)

    def test_bezier_text_is_not_snapped(self):
        self.assertEqual(GrowthRateField().parse("7.25"), 7.25)

    def test_linear_variant(self):
        field = GrowthRateField("linear")
        self.assertEqual(field.min_value, 0.0)
        self.assertEqual(field.max_value, 40.0)
        self.assertAlmostEqual(field.parse("7.04"), 7.0, places=9)
        self.assertAlmostEqual(field.from_slider(0.5), 20.0, places=9)
        self.assertEqual(field.parse("55"), 40.0)

    def test_format(self):
        self.assertEqual(GrowthRateField().format(7.0), "7.00")


class TestDurationField(unittest.TestCase):

    def test_years_snap_to_thirty_day_steps(self):
        field = DurationField(DurationUnit.YEARS)
        for t in (0.1, 0.25, 0.5, 0.8):
            value = field.from_slider(t)
            steps = value / YEARS_STEP
            self.assertAlmostEqual(steps, round(steps), places=6)

    def test_years_text_snaps(self):
        field = DurationField(DurationUnit.YEARS)
        self.assertAlmostEqual(field.parse("12.3"), 150 * YEARS_STEP, places=12)

    def test_years_bounds(self):
        field = DurationField(DurationUnit.YEARS)
        self.assertEqual(field.from_slider(0.0), 0.0)
        self.assertLessEqual(field.from_slider(1.0), 200.0)
        self.assertLessEqual(field.parse("500"), 200.0)

    def test_months_center_and_steps(self):
        field = DurationField(DurationUnit.MONTHS)
        self.assertEqual(field.from_slider(0.5), 120.0)
        self.assertEqual(field.from_slider(1.0), 2400.0)
        self.assertEqual(field.parse("37.6"), 38.0)
        self.assertEqual(field.format(120), "120")
        self.assertEqual(field.unit_label(), "months")

    def test_captions(self):
        self.assertEqual(DurationField(DurationUnit.YEARS).caption(1.5), "1 year, 6 months")
        self.assertEqual(DurationField(DurationUnit.MONTHS).caption(18), "1 year, 6 months")

    def test_years_format(self):
        field = DurationField(DurationUnit.YEARS)
        self.assertEqual(field.format(10.0), "10.00")
        self.assertEqual(field.unit_label(), "years")


if __name__ == '__main__':
    unittest.main()
