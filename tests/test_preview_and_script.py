"""
Unit tests for the swatch sheet and the export_tokens script.
Run from project root: python -m pytest tests/ -v
"""
import importlib.util
import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _load_script():
    spec = importlib.util.spec_from_file_location("export_tokens", ROOT / "scripts" / "export_tokens.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSwatches(unittest.TestCase):
    """Swatch sheet rendering."""

    def test_sheet_layout(self):
        """Rows are palette keys, columns are tones, gaps show the background."""
        from tonekit.preview import render_swatch_sheet
        from tonekit.theme import light_theme

        theme = light_theme()
        frame = render_swatch_sheet(theme, cell=4, gap=1)
        self.assertEqual(frame.shape, (8 * 4 + 9, 12 * 4 + 13, 3))
        self.assertEqual(tuple(frame[0, 0]), theme.background)
        # row 0 (neutral), column 6 (origin)
        self.assertEqual(tuple(frame[1, 1 + 6 * 5]), theme.palette["neutral"])
        # row 1 (primary), last column
        self.assertEqual(tuple(frame[1 + 5, 1 + 11 * 5 + 3]), theme.contrast)

    def test_bad_cell(self):
        """A zero cell size raises ValueError."""
        from tonekit.preview import render_swatch_sheet
        from tonekit.theme import light_theme

        with self.assertRaises(ValueError):
            render_swatch_sheet(light_theme(), cell=0)

    def test_save_png(self):
        """save_swatch_sheet writes an RGB PNG of the rendered size."""
        from PIL import Image

        from tonekit.preview import save_swatch_sheet
        from tonekit.theme import dark_theme

        with tempfile.TemporaryDirectory() as tmp:
            path = save_swatch_sheet(dark_theme(), Path(tmp) / "dark.png", cell=4, gap=1)
            with Image.open(path) as img:
                self.assertEqual(img.size, (12 * 4 + 13, 8 * 4 + 9))
                self.assertEqual(img.mode, "RGB")


class TestExportScript(unittest.TestCase):
    """scripts/export_tokens.py end to end."""

    def test_dry_run(self):
        """--dry-run reports counts and exits 0."""
        script = _load_script()
        with mock.patch.object(sys, "argv", ["export_tokens.py", "--dry-run"]):
            self.assertEqual(script.main(), 0)

    def test_writes_json_and_previews(self):
        """JSON output and swatch previews are written for the chosen theme."""
        script = _load_script()
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "tokens.json"
            argv = [
                "export_tokens.py",
                "--format", "json",
                "--theme", "dark",
                "--out", str(out),
                "--preview", str(Path(tmp) / "previews"),
            ]
            with mock.patch.object(sys, "argv", argv):
                self.assertEqual(script.main(), 0)
            data = json.loads(out.read_text(encoding="utf-8"))
            self.assertEqual(list(data), ["dark"])
            self.assertTrue((Path(tmp) / "previews" / "dark.png").exists())

    def test_unknown_theme_exit_code(self):
        """An unknown theme exits with code 2."""
        script = _load_script()
        with mock.patch.object(sys, "argv", ["export_tokens.py", "--theme", "sepia", "--dry-run"]):
            self.assertEqual(script.main(), 2)


if __name__ == "__main__":
    unittest.main()
