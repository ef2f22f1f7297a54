"""Generate VS Code color themes from a 16-color base palette."""

from .color import (
    DEFAULT_ALPHA,
    DEFAULT_STEP,
    HSL,
    RGB,
    InvalidFormat,
    alpha,
    darken,
    hex_to_rgb,
    hsl_to_rgb,
    lighten,
    rgb_to_hex,
    rgb_to_hsl,
)
from .palette import GRUVALIZED_DARK, GRUVALIZED_LIGHT, Palette
from .workbench import (
    PolarityContext,
    StructuralCollision,
    build_theme,
    build_workbench,
    generate_theme,
)

__all__ = [
    "RGB",
    "HSL",
    "DEFAULT_STEP",
    "DEFAULT_ALPHA",
    "InvalidFormat",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "lighten",
    "darken",
    "alpha",
    "Palette",
    "GRUVALIZED_LIGHT",
    "GRUVALIZED_DARK",
    "PolarityContext",
    "StructuralCollision",
    "build_workbench",
    "build_theme",
    "generate_theme",
]
