import os
import sys
import unittest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from networth.theme import Theme, ThemeManager


class TestThemeManager(unittest.TestCase):

    def test_palettes_share_keys(self):
        self.assertEqual(set(Theme.LIGHT), set(Theme.DARK))

    def test_toggle(self):
        theme = ThemeManager()
        self.assertFalse(theme.is_dark)
        self.assertEqual(theme.toggle_theme(), "Dark")
        self.assertTrue(theme.is_dark)
        self.assertEqual(theme.get_color("danger"), Theme.DARK["danger"])
        self.assertEqual(theme.toggle_theme(), "Light")
        self.assertEqual(theme.get_color("danger"), Theme.LIGHT["danger"])

    def test_missing_key_is_red(self):
        self.assertEqual(ThemeManager().get_color("nope"), "#ff0000")

    def test_stylesheet_uses_palette(self):
        theme = ThemeManager("Dark")
        qss = theme.stylesheet()
        self.assertIn(Theme.DARK["bg_primary"], qss)
        self.assertIn(Theme.DARK["accent_hover"], qss)


if __name__ == '__main__':
    unittest.main()
