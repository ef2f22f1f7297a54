"""
Tests for palette definitions and palette loading.
"""
import dataclasses
import json

import pytest

from vscode_theme_generator.color import InvalidFormat
from vscode_theme_generator.palette import (
    BUILTIN_PALETTES,
    GRUVALIZED_DARK,
    GRUVALIZED_LIGHT,
    BaseTones,
    Palette,
    PaletteError,
    load_palette_from_json,
    palette_from_dict,
)


class TestPalette:

    def test_builtins(self):
        assert BUILTIN_PALETTES == (GRUVALIZED_LIGHT, GRUVALIZED_DARK)
        assert GRUVALIZED_LIGHT.type == "light"
        assert GRUVALIZED_DARK.type == "dark"

    def test_tones_ordered_background_first(self):
        tones = GRUVALIZED_DARK.tones
        assert len(tones) == 8
        assert tones[0] == "#1D2021"
        assert tones[1] == "#282828"
        assert tones[-2] == "#928374"
        assert tones[-1] == "#FBF1C7"

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            GRUVALIZED_DARK.name = "Other"

    def test_rejects_malformed_color(self):
        bad_base = dataclasses.replace(GRUVALIZED_DARK.base, base02="#92837")
        with pytest.raises(InvalidFormat) as exc_info:
            dataclasses.replace(GRUVALIZED_DARK, base=bad_base)
        assert exc_info.value.value == "#92837"

    def test_rejects_malformed_accent(self):
        bad_accents = dataclasses.replace(GRUVALIZED_LIGHT.accents, orange="orange")
        with pytest.raises(InvalidFormat):
            Palette(
                name="Broken",
                type="light",
                base=GRUVALIZED_LIGHT.base,
                accents=bad_accents,
            )


class TestPaletteLoading:

    def test_from_dict(self, palette_data):
        palette = palette_from_dict(palette_data)
        assert palette.name == "Custom Dark"
        assert palette.base == GRUVALIZED_DARK.base
        assert palette.accents == GRUVALIZED_DARK.accents

    def test_type_defaults_to_measured_polarity(self, palette_data):
        del palette_data["type"]
        assert palette_from_dict(palette_data).type == "dark"

    def test_missing_slot(self, palette_data):
        del palette_data["accents"]["brown"]
        with pytest.raises(PaletteError, match="brown"):
            palette_from_dict(palette_data)

    def test_missing_table(self, palette_data):
        del palette_data["base"]
        with pytest.raises(PaletteError, match="base"):
            palette_from_dict(palette_data)

    def test_not_an_object(self):
        with pytest.raises(PaletteError):
            palette_from_dict(["#000000"])

    @pytest.mark.parametrize(
        "field, value",
        [("name", 5), ("name", ["Dark"]), ("type", "dusk"), ("type", True)],
    )
    def test_malformed_header(self, palette_data, field, value):
        palette_data[field] = value
        with pytest.raises(PaletteError, match=f"palette {field} must be"):
            palette_from_dict(palette_data)

    def test_error_message_not_quoted(self, palette_data):
        del palette_data["base"]["base0"]
        with pytest.raises(ValueError) as exc_info:
            palette_from_dict(palette_data)
        assert str(exc_info.value) == "palette 'base' is missing 'base0'"

    def test_malformed_hex(self, palette_data):
        palette_data["base"]["base3"] = "#XYZXYZ"
        with pytest.raises(InvalidFormat):
            palette_from_dict(palette_data)

    def test_load_from_json(self, tmp_path, palette_data):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps(palette_data), encoding="utf-8")

        palette = load_palette_from_json(path)
        assert isinstance(palette.base, BaseTones)
        assert palette.tones == GRUVALIZED_DARK.tones
