"""
Unit tests for token naming, CSS/JSON emission and writing token files.
Run from project root: python -m pytest tests/ -v
"""
import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestTokenMap(unittest.TestCase):
    """Token names and resolved hex values."""

    def test_names_and_values(self):
        """Every (tone, key) becomes --tone-key with a lowercase hex value."""
        from tonekit.export import token_map, token_name
        from tonekit.theme import light_theme

        self.assertEqual(token_name("base", "primary"), "--base-primary")
        tokens = token_map(light_theme())
        self.assertEqual(len(tokens), 12 * 8)
        self.assertEqual(tokens["--base-primary"], "#1677ff")
        self.assertEqual(tokens["--plain-error"], "#ffffff")
        self.assertEqual(tokens["--extreme-info"], "#000000")
        self.assertEqual(next(iter(tokens)), "--plain-neutral")
        for value in tokens.values():
            self.assertRegex(value, r"^#[0-9a-f]{6}$")

    def test_tone_major_order(self):
        """Tokens list every key of one tone before the next tone."""
        from tonekit.export import token_map
        from tonekit.theme import light_theme

        names = list(token_map(light_theme()))
        self.assertEqual(names[:2], ["--plain-neutral", "--plain-primary"])
        self.assertEqual(names[8], "--bare-neutral")


class TestCss(unittest.TestCase):
    """CSS emission scoped by theme attribute."""

    def test_scoped_blocks(self):
        """Each theme gets its own [data-theme] block, plus :root for the root theme."""
        from tonekit.export import to_css
        from tonekit.theme import default_themes

        css = to_css(default_themes().values(), root_theme="light")
        self.assertTrue(css.startswith(":root {\n"))
        self.assertIn('[data-theme="light"] {', css)
        self.assertIn('[data-theme="dark"] {', css)
        self.assertIn("  --base-primary: #1677ff;", css)
        self.assertIn("  --base-primary: #1668dc;", css)
        self.assertEqual(css.count("}"), 3)

    def test_custom_attribute_without_root(self):
        """A custom attribute is used and :root is omitted without root_theme."""
        from tonekit.export import to_css
        from tonekit.theme import dark_theme

        css = to_css([dark_theme()], attribute="data-mode")
        self.assertNotIn(":root", css)
        self.assertTrue(css.startswith('[data-mode="dark"] {'))

    def test_unrecognized_theme_name_warns(self):
        """Theme names other than light/dark export with a warning."""
        from tonekit.export import to_css
        from tonekit.theme import Theme, light_theme

        base = light_theme()
        sepia = Theme(name="sepia", palette=base.palette, background="#f4ecd8", contrast="#2b1d0e", scale=base.scale)
        with self.assertLogs("tonekit.export.tokens", level="WARNING") as logs:
            css = to_css([sepia])
        self.assertIn('[data-theme="sepia"]', css)
        self.assertTrue(any("sepia" in line for line in logs.output))


class TestJsonAndWrite(unittest.TestCase):
    """JSON emission and writing token files."""

    def test_json(self):
        """JSON maps theme name to its token map."""
        from tonekit.export import to_json
        from tonekit.theme import default_themes

        data = json.loads(to_json(default_themes().values()))
        self.assertEqual(set(data), {"light", "dark"})
        self.assertEqual(data["dark"]["--plain-primary"], "#141414")
        self.assertEqual(data["dark"]["--extreme-primary"], "#ffffff")

    def test_write_tokens(self):
        """write_tokens creates parent dirs and rejects unknown formats."""
        from tonekit.export import write_tokens
        from tonekit.theme import default_themes

        themes = default_themes().values()
        with tempfile.TemporaryDirectory() as tmp:
            css_path = write_tokens(themes, Path(tmp) / "nested" / "tokens.css", "css", root_theme="light")
            self.assertTrue(css_path.exists())
            self.assertIn("--base-primary", css_path.read_text(encoding="utf-8"))
            json_path = write_tokens(themes, Path(tmp) / "tokens.json", "json")
            self.assertIn("light", json.loads(json_path.read_text(encoding="utf-8")))
            with self.assertRaises(ValueError):
                write_tokens(themes, Path(tmp) / "tokens.scss", "scss")


if __name__ == "__main__":
    unittest.main()
