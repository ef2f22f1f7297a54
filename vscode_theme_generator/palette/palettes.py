"""
Palette - the 16 hand-authored colors a theme is derived from.

A palette holds 8 neutral base tones, ordered from the most
background-like (``base3``) to the most foreground-like (``base03``), and
8 accent colors. The ``type`` tag is advisory only: the generator measures
the background to decide whether the theme is dark or light.
"""

from dataclasses import dataclass, fields
from typing import Tuple

from ..color import hex_to_rgb


@dataclass(frozen=True)
class BaseTones:
    base3: str   # editor background
    base2: str   # panels / tabs
    base1: str   # selection / hover
    base0: str
    base00: str
    base01: str
    base02: str  # dim text
    base03: str  # strong foreground


@dataclass(frozen=True)
class Accents:
    red: str
    green: str
    yellow: str
    blue: str
    purple: str
    aqua: str
    orange: str
    brown: str


@dataclass(frozen=True)
class Palette:
    """Immutable theme input: name, advisory type, base tones and accents."""

    name: str
    type: str
    base: BaseTones
    accents: Accents

    def __post_init__(self):
        # Reject malformed colors up front so derivation never sees them
        for group in (self.base, self.accents):
            for f in fields(group):
                hex_to_rgb(getattr(group, f.name))

    @property
    def tones(self) -> Tuple[str, ...]:
        """Base tones in background-to-foreground order."""
        return tuple(getattr(self.base, f.name) for f in fields(BaseTones))


GRUVALIZED_LIGHT = Palette(
    name="Gruvalized Light",
    type="light",
    base=BaseTones(
        base3="#FAF5E7",
        base2="#F7F1DF",
        base1="#E9E1BF",
        base0="#D9D0AE",
        base00="#B8AE8E",
        base01="#8A8062",
        base02="#6A6A6A",
        base03="#1A1A1A",
    ),
    accents=Accents(
        red="#CC241D",
        green="#448C27",
        yellow="#D79921",
        blue="#4B83CD",
        purple="#7A3E9D",
        aqua="#689D6A",
        orange="#D65D0E",
        brown="#6F2F00",
    ),
)

GRUVALIZED_DARK = Palette(
    name="Gruvalized Dark",
    type="dark",
    base=BaseTones(
        base3="#1D2021",
        base2="#282828",
        base1="#3C3836",
        base0="#504945",
        base00="#665C54",
        base01="#7C6F64",
        base02="#928374",
        base03="#FBF1C7",
    ),
    accents=Accents(
        red="#CC241D",
        green="#98971A",
        yellow="#D79921",
        blue="#458588",
        purple="#B16286",
        aqua="#689D6A",
        orange="#D65D0E",
        brown="#A89984",
    ),
)

BUILTIN_PALETTES = (GRUVALIZED_LIGHT, GRUVALIZED_DARK)
