from .palettes import (
    BUILTIN_PALETTES,
    GRUVALIZED_DARK,
    GRUVALIZED_LIGHT,
    Accents,
    BaseTones,
    Palette,
)
from .loader import PaletteError, load_palette_from_json, palette_from_dict

__all__ = [
    "Palette",
    "BaseTones",
    "Accents",
    "GRUVALIZED_LIGHT",
    "GRUVALIZED_DARK",
    "BUILTIN_PALETTES",
    "PaletteError",
    "load_palette_from_json",
    "palette_from_dict",
]
