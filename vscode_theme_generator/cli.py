import argparse
import logging

from .export import export_theme
from .palette import BUILTIN_PALETTES, load_palette_from_json
from .workbench import build_theme


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate VS Code color themes from base palettes"
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default="themes",
        help="Output directory (default: themes)",
    )
    parser.add_argument(
        "--from-palette",
        metavar="JSON",
        action="append",
        default=[],
        help="Build a palette JSON file instead of the built-in palettes (repeatable)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log derivation details",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.from_palette:
        palettes = [_load(parser, path) for path in args.from_palette]
    else:
        palettes = list(BUILTIN_PALETTES)

    written = [_run_palette(palette, args.output) for palette in palettes]

    print("\n" + "=" * 60)
    print("Exported:")
    for path in written:
        print(f"  - {path}")
    print("=" * 60)


def _load(parser, path):
    """Load one palette file, reporting bad input as a usage error."""
    try:
        return load_palette_from_json(path)
    except (ValueError, OSError) as e:
        parser.error(f"cannot load palette {path}: {e}")


def _run_palette(palette, output_dir):
    theme = build_theme(palette)
    print(f"Building: {palette.name}")
    print(f"Detected theme type: {theme['type']}")

    path = export_theme(theme, output_dir)
    print(f"Wrote {path}")
    return path


if __name__ == "__main__":
    main()
