from .context import PolarityContext
from .composer import StructuralCollision, build_workbench, compose, merge_fragments
from .regions import REGION_BUILDERS
from .theme import build_theme, dump_theme, generate_theme

__all__ = [
    "PolarityContext",
    "REGION_BUILDERS",
    "StructuralCollision",
    "build_workbench",
    "compose",
    "merge_fragments",
    "build_theme",
    "dump_theme",
    "generate_theme",
]
