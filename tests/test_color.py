"""
Unit tests for RGB parsing/formatting and linear blending.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np

from tonekit.color import as_rgb, blend_colors, mix, parse_hex, relative_luminance, to_hex


class TestRgb(unittest.TestCase):
    """Hex parsing/formatting and color coercion."""

    def test_parse_hex_forms(self):
        """#rrggbb, bare rrggbb and #rgb all parse to the same channels."""
        self.assertEqual(parse_hex("#1677FF"), (22, 119, 255))
        self.assertEqual(parse_hex("1677ff"), (22, 119, 255))
        self.assertEqual(parse_hex("#fff"), (255, 255, 255))

    def test_parse_hex_rejects_garbage(self):
        """Wrong lengths, non-hex digits and non-strings raise ValueError."""
        for bad in ("#12345", "#gggggg", "", "#1234567", None):
            with self.assertRaises(ValueError):
                parse_hex(bad)

    def test_parse_hex_rejects_signed_and_spaced_pairs(self):
        """Pairs int() would accept (signs, spaces) are not hex digits."""
        for bad in ("#-1-1-1", "#+f+f+f", "# f f f", "#-1+f10", "-ff"):
            with self.assertRaises(ValueError):
                parse_hex(bad)

    def test_to_hex_lowercase_and_clamped(self):
        """to_hex emits lowercase #rrggbb and clamps channels to 0-255."""
        self.assertEqual(to_hex((22, 119, 255)), "#1677ff")
        self.assertEqual(to_hex((-4, 300, 16)), "#00ff10")

    def test_as_rgb_accepts_dict_and_sequence(self):
        """as_rgb takes {r,g,b} dicts and clamps sequences."""
        self.assertEqual(as_rgb({"r": 10, "g": 20, "b": 30}), (10, 20, 30))
        self.assertEqual(as_rgb([-1, 300, 128]), (0, 255, 128))
        with self.assertRaises(ValueError):
            as_rgb({"r": 1, "g": 2})

    def test_relative_luminance_extremes(self):
        """White has luminance 1, black 0."""
        self.assertAlmostEqual(relative_luminance((255, 255, 255)), 1.0)
        self.assertAlmostEqual(relative_luminance((0, 0, 0)), 0.0)


class TestBlend(unittest.TestCase):
    """Linear per-channel blending."""

    def test_endpoints_exact(self):
        """Weight 0 returns the first color, weight 1 the second, exactly."""
        a, b = (255, 255, 255), (22, 119, 255)
        self.assertEqual(blend_colors(a, b, weight=0.0), a)
        self.assertEqual(blend_colors(a, b, weight=1.0), b)

    def test_rounds_half_up(self):
        """Halfway channel values round up."""
        # 0 + (1 - 0) * 0.5 = 0.5 -> 1
        self.assertEqual(blend_colors((0, 0, 0), (1, 3, 5), weight=0.5), (1, 2, 3))

    def test_weight_clamped(self):
        """Weights outside [0, 1] are clamped, not extrapolated."""
        a, b = (0, 0, 0), (100, 100, 100)
        self.assertEqual(blend_colors(a, b, weight=-2.0), a)
        self.assertEqual(blend_colors(a, b, weight=7.0), b)

    def test_mix_broadcasts(self):
        """mix broadcasts over arrays of colors and weights and returns uint8."""
        colors = np.array([[0, 0, 0], [200, 100, 50]])
        out = mix(colors[:, None, :], (255, 255, 255), np.array([0.0, 1.0])[None, :, None])
        self.assertEqual(out.shape, (2, 2, 3))
        self.assertEqual(out.dtype, np.uint8)
        self.assertEqual(out[1, 0].tolist(), [200, 100, 50])
        self.assertEqual(out[0, 1].tolist(), [255, 255, 255])


if __name__ == "__main__":
    unittest.main()
