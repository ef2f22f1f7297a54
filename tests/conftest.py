"""
Pytest configuration and fixtures for theme generator tests.
"""
import pytest

from vscode_theme_generator.palette import GRUVALIZED_DARK, GRUVALIZED_LIGHT
from vscode_theme_generator.workbench import PolarityContext


@pytest.fixture
def dark_ctx():
    return PolarityContext.from_palette(GRUVALIZED_DARK)


@pytest.fixture
def light_ctx():
    return PolarityContext.from_palette(GRUVALIZED_LIGHT)


@pytest.fixture(params=[GRUVALIZED_LIGHT, GRUVALIZED_DARK], ids=["light", "dark"])
def palette(request):
    return request.param


@pytest.fixture
def palette_data():
    """Plain-dict form of the dark palette, as found in a palette JSON file."""
    return {
        "name": "Custom Dark",
        "type": "dark",
        "base": {
            "base3": "#1D2021",
            "base2": "#282828",
            "base1": "#3C3836",
            "base0": "#504945",
            "base00": "#665C54",
            "base01": "#7C6F64",
            "base02": "#928374",
            "base03": "#FBF1C7",
        },
        "accents": {
            "red": "#CC241D",
            "green": "#98971A",
            "yellow": "#D79921",
            "blue": "#458588",
            "purple": "#B16286",
            "aqua": "#689D6A",
            "orange": "#D65D0E",
            "brown": "#A89984",
        },
    }
