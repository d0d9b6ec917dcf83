import math
import os
import sys
import unittest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from networth.config import K_MIN, K_MAX, PRINCIPAL_MAX, PRINCIPAL_TARGET_MID
from networth.services.curve_solver import solve_k, solve_k_for_midpoint, clamp_ratio


def midpoint_ratio(k):
    return (math.exp(k * 0.5) - 1.0) / (math.exp(k) - 1.0)


class TestSolveK(unittest.TestCase):
    """Newton-Raphson calibration of the exponential steepness."""

    def test_usd_principal_ratio(self):
        """500k on a 50M range: ratio 0.01."""
        k = solve_k(0.01)
        self.assertAlmostEqual(midpoint_ratio(k), 0.01, places=10)
        self.assertTrue(K_MIN <= k <= K_MAX)

    def test_inr_principal_ratio(self):
        """500k on a 5B range needs a much steeper curve."""
        k = solve_k(0.0001)
        self.assertAlmostEqual(midpoint_ratio(k), 0.0001, places=12)
        self.assertGreater(k, solve_k(0.01))

    def test_months_ratio(self):
        k = solve_k(120 / 2400)
        self.assertAlmostEqual(midpoint_ratio(k), 0.05, places=10)

    def test_extreme_ratio_stays_bounded(self):
        """Pathological ratios never raise and never leave [K_MIN, K_MAX]."""
        for ratio in (1e-12, 1e-6, 0.5, 0.999999):
            k = solve_k(ratio)
            self.assertTrue(math.isfinite(k), f"ratio {ratio} gave {k}")
            self.assertTrue(K_MIN <= k <= K_MAX, f"ratio {ratio} gave {k}")

    def test_clamp_ratio(self):
        self.assertEqual(clamp_ratio(0.0), 0.000001)
        self.assertEqual(clamp_ratio(2.0), 0.999999)
        self.assertEqual(clamp_ratio(0.25), 0.25)

    def test_solve_for_midpoint_matches_ratio(self):
        usd_max = PRINCIPAL_MAX["USD"]
        self.assertEqual(solve_k_for_midpoint(PRINCIPAL_TARGET_MID, usd_max),
                         solve_k(PRINCIPAL_TARGET_MID / usd_max))

    def test_solve_for_midpoint_empty_range(self):
        self.assertEqual(solve_k_for_midpoint(100, 0), K_MIN)


if __name__ == '__main__':
    unittest.main()
