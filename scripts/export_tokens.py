#!/usr/bin/env python3
"""
Export design tokens: resolve every (tone, palette key) of each configured theme and
write them as CSS custom properties (one [data-theme] block per theme) or JSON.

Usage:
  python scripts/export_tokens.py
  python scripts/export_tokens.py --format json --out tokens/tokens.json
  python scripts/export_tokens.py --theme light --preview previews/
  python scripts/export_tokens.py --dry-run   # print token counts only
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Resolve theme palettes into tone tokens and write them as CSS or JSON."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config (default: config/default.yaml)",
    )
    parser.add_argument(
        "--theme",
        action="append",
        default=None,
        help="Theme to export; repeat for several (default: every theme in config)",
    )
    parser.add_argument(
        "--format",
        choices=["css", "json"],
        default=None,
        help="Output format (default: export.format from config)",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output file (default: <export.dir>/<export.filename_prefix>.<format>)",
    )
    parser.add_argument(
        "--preview",
        type=Path,
        default=None,
        help="If set, also save one swatch sheet PNG per theme into this directory",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only print themes and token counts; do not write files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        from tonekit.config import get_output_dir, load_config, themes_from_config
    except ImportError:
        sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
        from tonekit.config import get_output_dir, load_config, themes_from_config
    from tonekit.errors import ThemeConfigError
    from tonekit.export import write_tokens
    from tonekit.preview import save_swatch_sheet

    try:
        config = load_config(args.config)
        themes = themes_from_config(config, args.theme)
    except ThemeConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    export = config.get("export", {})
    fmt = args.format or export.get("format", "css")
    if fmt not in ("css", "json"):
        print(f"Error: export.format must be css or json, got {fmt!r}", file=sys.stderr)
        return 2

    if args.dry_run:
        for name, theme in themes.items():
            print(f"{name}: {len(theme.keys)} keys x {len(theme.scale)} tones = {len(theme.keys) * len(theme.scale)} tokens")
        return 0

    out = args.out or get_output_dir(config) / f"{export.get('filename_prefix', 'tokens')}.{fmt}"
    write_tokens(
        themes.values(),
        out,
        fmt,
        attribute=export.get("attribute", "data-theme"),
        root_theme=export.get("root_theme"),
    )
    print(f"Wrote {fmt} tokens for {', '.join(themes)} to {out}")

    if args.preview is not None:
        for name, theme in themes.items():
            path = save_swatch_sheet(theme, args.preview / f"{name}.png")
            print(f"  swatches: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
