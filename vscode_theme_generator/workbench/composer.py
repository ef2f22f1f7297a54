import logging

from .context import PolarityContext
from .regions import REGION_BUILDERS

logger = logging.getLogger(__name__)


class StructuralCollision(RuntimeError):
    """Raised when two fragments of a theme emit the same key."""

    def __init__(self, key, first, second):
        self.key = key
        self.regions = (first, second)
        super().__init__(f"Key {key!r} emitted by both {first!r} and {second!r}")


def merge_fragments(fragments):
    """Union named fragments into one dict, refusing duplicate keys.

    Args:
        fragments: Iterable of (name, mapping) pairs, merged in order

    Returns:
        dict with the keys of every fragment in fragment order
    """
    merged = {}
    owners = {}
    for name, fragment in fragments:
        for key, value in fragment.items():
            if key in owners:
                raise StructuralCollision(key, owners[key], name)
            owners[key] = name
            merged[key] = value
    return merged


def compose(ctx, builders=REGION_BUILDERS):
    """Run every region builder against ``ctx`` and merge the results."""
    colors = merge_fragments((name, build(ctx)) for name, build in builders)
    logger.debug(
        "Composed %d workbench colors from %d regions for %r",
        len(colors),
        len(builders),
        ctx.palette.name,
    )
    return colors


def build_workbench(palette):
    return compose(PolarityContext.from_palette(palette))
