import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from pokefetch_renderer.badges import (
    SHINY_TEXT,
    TYPE_COLORS,
    capitalize,
    format_display,
    foreground_for,
    text_badge,
    type_badges,
    type_color,
)


class BadgeTests(unittest.TestCase):
    def test_text_badge_layout(self):
        self.assertEqual(
            text_badge("FIRE", 202),
            "\x1b[38;5;232m\x1b[48;5;202m FIRE \x1b[0m\x1b[0m",
        )

    def test_bold_badge(self):
        self.assertTrue(text_badge("Pikachu", 15, bold=True).startswith("\x1b[1m\x1b[38;5;232m"))

    def test_dark_backgrounds_get_light_text(self):
        self.assertEqual(foreground_for(236), 255)
        self.assertEqual(foreground_for(21), 255)
        self.assertEqual(foreground_for(226), 232)

    def test_unknown_type_uses_black(self):
        self.assertEqual(type_color("shadow"), 0)
        self.assertEqual(type_color("ghost"), TYPE_COLORS["ghost"])

    def test_type_badges_joined(self):
        out = type_badges(["grass", "poison"])
        self.assertIn(" GRASS ", out)
        self.assertIn(" POISON ", out)
        self.assertIn("\x1b[0m\x1b[0m \x1b[38;5;", out)

    def test_capitalize(self):
        self.assertEqual(capitalize("mr-mime"), "Mr-mime")
        self.assertEqual(capitalize(""), "")

    def test_format_display_plain(self):
        out = format_display("pikachu", ["electric"])
        self.assertTrue(out.startswith(text_badge("Pikachu", 15, bold=True) + " "))
        self.assertTrue(out.endswith(type_badges(["electric"])))
        self.assertNotIn(SHINY_TEXT, out)

    def test_format_display_shiny(self):
        out = format_display("eevee", ["normal"], shiny=True)
        parts = [
            text_badge("Eevee", 15, bold=True),
            text_badge(SHINY_TEXT, 220, bold=True),
            type_badges(["normal"]),
        ]
        self.assertEqual(out, " ".join(parts))


if __name__ == "__main__":
    unittest.main()
