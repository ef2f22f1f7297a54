import json
import logging

from ..tokens import build_tokens
from .composer import compose, merge_fragments
from .context import PolarityContext

logger = logging.getLogger(__name__)


def build_theme(palette):
    """Build a VS Code color theme document from a palette.

    Args:
        palette: The source Palette

    Returns:
        dict with ``name``, ``type``, ``colors`` and the token sections
    """
    ctx = PolarityContext.from_palette(palette)
    if palette.type != ctx.polarity:
        logger.warning(
            "Palette %r is tagged %r but its background measures %r; using %r",
            palette.name,
            palette.type,
            ctx.polarity,
            ctx.polarity,
        )

    header = {
        "name": palette.name,
        "type": ctx.polarity,
        "colors": compose(ctx),
    }
    return merge_fragments([("header", header), ("tokens", build_tokens(palette))])


def dump_theme(theme):
    """Serialize a theme document to JSON text."""
    return json.dumps(theme, indent=2)


def generate_theme(palette):
    """Generate the theme document for ``palette`` as JSON text."""
    return dump_theme(build_theme(palette))
