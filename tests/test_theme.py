import re
import unittest
from pathlib import Path

from config import DEFAULT_THEME
from core import Status
from interface.tui_themes import THEMES, build_style, get_theme_palette, priority_style


REQUIRED_KEYS = {
    "",
    "text",
    "text.dim",
    "text.dimmer",
    "header",
    "border",
    "query",
    "query.hint",
    "selected",
    "status.todo",
    "status.progress",
    "status.done",
    "status.archived",
    "priority.high",
    "priority.mid",
    "priority.low",
    "field.label",
    "field.focus",
    "field.error",
    "message",
    "dirty",
    "confirm",
}


class ThemeTests(unittest.TestCase):
    def test_all_themes_have_required_keys(self):
        for name in THEMES.keys():
            palette = get_theme_palette(name)
            missing = REQUIRED_KEYS - set(palette.keys())
            self.assertFalse(missing, f"theme {name} missing {missing}")

    def test_unknown_theme_falls_back_to_default(self):
        palette_default = get_theme_palette(DEFAULT_THEME)
        palette_unknown = get_theme_palette("non-existent")
        self.assertEqual(palette_unknown, palette_default)
        self.assertIsNot(palette_unknown, palette_default)

    def test_style_builds_without_errors(self):
        style = build_style(DEFAULT_THEME)
        self.assertTrue(getattr(style, "style_rules", None))

    def test_status_and_priority_classes_exist(self):
        palette = get_theme_palette(DEFAULT_THEME)
        for status in Status:
            self.assertIn(status.style, palette)
        for rank in range(6):
            self.assertIn(priority_style(rank).replace("class:", ""), palette)

    def test_renderer_uses_only_themed_classes(self):
        source = (Path(__file__).resolve().parents[1] / "interface" / "tui_render.py").read_text(encoding="utf-8")
        used = set(re.findall(r'"class:([a-z.]+)"', source))
        self.assertTrue(used)
        self.assertFalse(used - REQUIRED_KEYS)


if __name__ == "__main__":
    unittest.main()
