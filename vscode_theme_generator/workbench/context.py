import logging
from dataclasses import dataclass

from ..color import DEFAULT_STEP, alpha, darken, is_dark_color, lighten
from ..palette import Palette

logger = logging.getLogger(__name__)

BLACK = "#000000"


@dataclass(frozen=True)
class PolarityContext:
    """Working colors shared by every region builder.

    Built once per palette. Builders read polarity from ``is_dark`` and the
    helpers below instead of measuring the palette themselves.
    """

    palette: Palette
    background: str
    panel: str
    selection: str
    foreground: str
    dim: str
    is_dark: bool
    border: str
    hover_bg: str
    inactive_tab_bg: str

    @classmethod
    def from_palette(cls, palette: Palette) -> "PolarityContext":
        tones = palette.tones
        background, panel, selection = tones[0], tones[1], tones[2]
        is_dark = is_dark_color(background)
        # Hover lightens in both polarities, only the step differs
        context = cls(
            palette=palette,
            background=background,
            panel=panel,
            selection=selection,
            foreground=tones[-1],
            dim=tones[-2],
            is_dark=is_dark,
            border=lighten(panel, 0.12) if is_dark else darken(panel, 0.12),
            hover_bg=lighten(panel, 0.06) if is_dark else lighten(panel, 0.03),
            inactive_tab_bg=darken(panel, 0.02) if is_dark else lighten(panel, 0.02),
        )
        logger.debug(
            "Derived %s context for %r: border=%s hover=%s inactive_tab=%s",
            context.polarity,
            palette.name,
            context.border,
            context.hover_bg,
            context.inactive_tab_bg,
        )
        return context

    @property
    def accents(self):
        return self.palette.accents

    @property
    def polarity(self) -> str:
        return "dark" if self.is_dark else "light"

    @property
    def contrast_foreground(self) -> str:
        """Text color for labels drawn on an accent-colored surface."""
        return BLACK if self.is_dark else self.background

    def pick(self, dark_value, light_value):
        return dark_value if self.is_dark else light_value

    def shade(self, hex_color: str, amount: float = DEFAULT_STEP) -> str:
        """Move a color away from the background: lighten when dark, darken when light."""
        if self.is_dark:
            return lighten(hex_color, amount)
        return darken(hex_color, amount)

    def recede(self, hex_color: str, amount: float = DEFAULT_STEP) -> str:
        """Move a color toward the background: darken when dark, lighten when light."""
        if self.is_dark:
            return darken(hex_color, amount)
        return lighten(hex_color, amount)

    def overlay(self, hex_color: str, dark_amount: float, light_amount: float) -> str:
        return alpha(hex_color, self.pick(dark_amount, light_amount))
