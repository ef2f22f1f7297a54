import os
import re

from ..workbench import dump_theme


def theme_filename(name):
    """File name for a theme name, e.g. ``gruvalized-dark-color-theme.json``."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return f"{slug or 'theme'}-color-theme.json"


def export_theme(theme, output_dir):
    """Write a built theme document into ``output_dir``.

    Args:
        theme: Theme document from ``build_theme``
        output_dir: Directory to write into (created if missing)

    Returns:
        Path of the written file
    """
    os.makedirs(output_dir, exist_ok=True)
    filepath = os.path.join(output_dir, theme_filename(theme["name"]))
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(dump_theme(theme))
    return filepath
