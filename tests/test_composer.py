"""
Tests for merging region fragments into the workbench color map.
"""
import pytest

from vscode_theme_generator.palette import GRUVALIZED_DARK, GRUVALIZED_LIGHT
from vscode_theme_generator.workbench import (
    REGION_BUILDERS,
    PolarityContext,
    StructuralCollision,
    build_workbench,
    compose,
    merge_fragments,
)


class TestMergeFragments:

    def test_preserves_order(self):
        merged = merge_fragments([("a", {"x.one": "#000000"}), ("b", {"y.two": "#FFFFFF"})])
        assert list(merged) == ["x.one", "y.two"]

    def test_collision_names_key_and_regions(self):
        with pytest.raises(StructuralCollision) as exc_info:
            merge_fragments([("first", {"tab.border": "#000000"}), ("second", {"tab.border": "#000000"})])
        assert exc_info.value.key == "tab.border"
        assert exc_info.value.regions == ("first", "second")
        assert "tab.border" in str(exc_info.value)

    def test_same_value_still_collides(self):
        with pytest.raises(StructuralCollision):
            merge_fragments([("a", {"k": True}), ("b", {"k": True})])


class TestCompose:

    def test_no_key_emitted_twice(self, palette):
        ctx = PolarityContext.from_palette(palette)
        fragments = [build(ctx) for _, build in REGION_BUILDERS]
        keys = [key for fragment in fragments for key in fragment]
        assert len(keys) == len(set(keys))
        assert len(compose(ctx)) == len(keys)

    def test_same_key_set_for_both_polarities(self):
        assert set(build_workbench(GRUVALIZED_LIGHT)) == set(build_workbench(GRUVALIZED_DARK))

    def test_colliding_builders_fail_fast(self, dark_ctx):
        builders = (
            ("editor", lambda ctx: {"editor.background": ctx.background}),
            ("terminal", lambda ctx: {"editor.background": ctx.panel}),
        )
        with pytest.raises(StructuralCollision) as exc_info:
            compose(dark_ctx, builders)
        assert exc_info.value.regions == ("editor", "terminal")

    def test_custom_builders(self, dark_ctx):
        builders = (("only", lambda ctx: {"editor.background": ctx.background}),)
        assert compose(dark_ctx, builders) == {"editor.background": "#1D2021"}


class TestBuildWorkbench:

    def test_dark_end_to_end(self):
        colors = build_workbench(GRUVALIZED_DARK)
        assert colors["editor.background"] == "#1D2021"
        assert colors["activityBarBadge.foreground"] == "#000000"
        assert colors["button.foreground"] == "#000000"
        assert colors["statusBar.background"] == "#A89984"
        assert colors["tab.hoverBackground"] == "#373737"

    def test_light_end_to_end(self):
        colors = build_workbench(GRUVALIZED_LIGHT)
        assert colors["editor.background"] == "#FAF5E7"
        assert colors["editor.foreground"] == "#1A1A1A"
        assert colors["activityBarBadge.foreground"] == "#FAF5E7"
        assert colors["tab.activeBorderTop"] == "#6F2F00"

    def test_deterministic(self, palette):
        assert build_workbench(palette) == build_workbench(palette)
