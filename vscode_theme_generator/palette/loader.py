import json
from dataclasses import fields

from ..color import is_dark_color
from .palettes import Accents, BaseTones, Palette

PALETTE_TYPES = ("light", "dark")


class PaletteError(ValueError):
    """Raised when palette data is missing a slot or has a malformed field."""


def _read_group(data, group_name, group_cls):
    group = data.get(group_name)
    if not isinstance(group, dict):
        raise PaletteError(f"palette is missing the '{group_name}' table")
    values = {}
    for f in fields(group_cls):
        if f.name not in group:
            raise PaletteError(f"palette '{group_name}' is missing '{f.name}'")
        values[f.name] = group[f.name]
    return group_cls(**values)


def palette_from_dict(data):
    """Build a Palette from a plain dict.

    Args:
        data: Mapping with ``name``, optional ``type``, and ``base`` /
            ``accents`` tables keyed by slot name

    Returns:
        Palette. When ``type`` is absent it is set from the measured
        background lightness.
    """
    if not isinstance(data, dict):
        raise PaletteError("palette data must be a JSON object")
    base = _read_group(data, "base", BaseTones)
    accents = _read_group(data, "accents", Accents)
    name = data.get("name", "Unnamed")
    if not isinstance(name, str):
        raise PaletteError(f"palette name must be a string, got {name!r}")
    palette_type = data.get("type")
    if palette_type is None:
        palette_type = "dark" if is_dark_color(base.base3) else "light"
    elif palette_type not in PALETTE_TYPES:
        raise PaletteError(f'palette type must be "light" or "dark", got {palette_type!r}')
    return Palette(
        name=name,
        type=palette_type,
        base=base,
        accents=accents,
    )


def load_palette_from_json(json_path):
    """Load a Palette from a JSON file.

    Args:
        json_path: Path to palette JSON file

    Returns:
        Palette
    """
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)
    return palette_from_dict(data)
