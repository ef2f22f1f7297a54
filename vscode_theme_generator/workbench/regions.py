"""
Region builders - one pure function per workbench area.

Each builder takes a PolarityContext and returns the colors for the keys
its region owns. Regions own disjoint key prefixes (``titleBar.*``,
``tab.*``, ``terminal.*`` ...) and never look at each other's output; the
composer rejects any key emitted twice.

Overlay opacities are given as (dark, light) pairs. Dark themes need less
opacity to read against a dark base, light themes need more.
"""

from ..color import alpha, darken, lighten
from .context import BLACK


def build_title_bar(ctx):
    return {
        "titleBar.activeBackground": ctx.panel,
        "titleBar.activeForeground": ctx.foreground,
        "titleBar.inactiveBackground": ctx.recede(ctx.panel, 0.04),
        "titleBar.inactiveForeground": ctx.dim,
        "titleBar.border": ctx.border,
    }


def build_activity_bar(ctx):
    orange = ctx.accents.orange
    return {
        "activityBar.background": ctx.panel,
        "activityBar.foreground": ctx.foreground,
        "activityBar.border": ctx.border,
        "activityBar.activeBorder": orange,
        "activityBarBadge.background": orange,
        "activityBarBadge.foreground": ctx.contrast_foreground,
    }


def build_side_bar(ctx):
    return {
        "sideBar.background": ctx.panel,
        "sideBar.foreground": ctx.foreground,
        "sideBar.border": ctx.border,
        "sideBarSectionHeader.background": ctx.panel,
        "sideBarSectionHeader.border": ctx.border,
    }


def build_minimap(ctx):
    a = ctx.accents
    return {
        "minimap.background": ctx.background,
        "minimap.selectionHighlight": ctx.overlay(ctx.selection, 0.35, 0.85),
        "minimap.findMatchHighlight": ctx.overlay(a.yellow, 0.45, 0.55),
        "minimap.errorHighlight": ctx.overlay(a.red, 0.60, 0.70),
        "minimap.warningHighlight": ctx.overlay(a.yellow, 0.60, 0.70),
        "minimapSlider.background": ctx.overlay(ctx.dim, 0.20, 0.25),
        "minimapSlider.hoverBackground": ctx.overlay(ctx.dim, 0.30, 0.35),
        "minimapSlider.activeBackground": ctx.overlay(ctx.dim, 0.40, 0.45),
        "minimapGutter.addedBackground": a.green,
        "minimapGutter.modifiedBackground": a.blue,
        "minimapGutter.deletedBackground": a.red,
    }


def build_editor(ctx):
    a = ctx.accents
    return {
        "editor.background": ctx.background,
        "editor.foreground": ctx.foreground,
        "editorCursor.foreground": ctx.foreground,
        "editorLineNumber.foreground": ctx.dim,
        "editorLineNumber.activeForeground": ctx.foreground,
        "editor.selectionBackground": ctx.overlay(ctx.selection, 0.35, 0.85),
        "editor.inactiveSelectionBackground": ctx.overlay(ctx.selection, 0.22, 0.55),
        "editor.selectionHighlightBackground": ctx.overlay(ctx.selection, 0.18, 0.45),
        "editor.wordHighlightBackground": ctx.overlay(a.blue, 0.22, 0.18),
        "editor.wordHighlightStrongBackground": ctx.overlay(a.blue, 0.30, 0.25),
        "editor.lineHighlightBackground": ctx.overlay(ctx.selection, 0.30, 0.40),
        "editor.findMatchBackground": ctx.overlay(a.yellow, 0.35, 0.40),
        "editor.findMatchHighlightBackground": ctx.overlay(a.yellow, 0.18, 0.22),
        "editorGutter.background": ctx.background,
        "editorGutter.addedBackground": a.green,
        "editorGutter.modifiedBackground": a.blue,
        "editorGutter.deletedBackground": a.red,
        "editorWhitespace.foreground": ctx.overlay(ctx.dim, 0.35, 0.45),
        "editorIndentGuide.background1": ctx.overlay(ctx.dim, 0.25, 0.35),
        "editorIndentGuide.activeBackground1": ctx.dim,
    }


def build_editor_groups_and_tabs(ctx):
    return {
        "editorGroup.border": ctx.border,
        "editorGroupHeader.tabsBackground": ctx.panel,
        "tab.activeBackground": ctx.panel,
        "tab.activeForeground": ctx.foreground,
        "tab.inactiveBackground": ctx.inactive_tab_bg,
        "tab.inactiveForeground": ctx.dim,
        "tab.border": ctx.panel,
        "tab.activeBorderTop": ctx.accents.brown,
        "tab.hoverBackground": ctx.hover_bg,
    }


def build_breadcrumbs(ctx):
    return {
        "breadcrumb.background": ctx.panel,
        "breadcrumb.foreground": ctx.dim,
        "breadcrumb.focusForeground": ctx.foreground,
        "breadcrumb.activeSelectionForeground": ctx.accents.blue,
    }


def build_status_bar(ctx):
    return {
        "statusBar.background": ctx.accents.brown,
        "statusBar.foreground": ctx.contrast_foreground,
    }


# Palette accent -> ANSI slot name
ANSI_ACCENTS = (
    ("Red", "red"),
    ("Green", "green"),
    ("Yellow", "yellow"),
    ("Blue", "blue"),
    ("Magenta", "purple"),
    ("Cyan", "aqua"),
)


def build_terminal(ctx):
    """Terminal colors, including the 16-entry ANSI table.

    Bright variants of the chromatic slots step away from the background.
    Black and white are synthesized from the neutrals so they follow the
    palette instead of being fixed constants.
    """
    if ctx.is_dark:
        black, white = ctx.background, darken(ctx.foreground)
        bright_black, bright_white = ctx.dim, ctx.foreground
    else:
        black, white = ctx.foreground, darken(ctx.background, 0.12)
        bright_black, bright_white = ctx.dim, ctx.background

    colors = {
        "terminal.background": ctx.background,
        "terminal.foreground": ctx.foreground,
        "terminalCursor.foreground": ctx.foreground,
        "terminal.selectionBackground": ctx.overlay(ctx.selection, 0.35, 0.85),
        "terminal.ansiBlack": black,
        "terminal.ansiBrightBlack": bright_black,
    }
    for slot, accent_name in ANSI_ACCENTS:
        accent = getattr(ctx.accents, accent_name)
        colors[f"terminal.ansi{slot}"] = accent
        colors[f"terminal.ansiBright{slot}"] = ctx.shade(accent)
    colors["terminal.ansiWhite"] = white
    colors["terminal.ansiBrightWhite"] = bright_white
    return colors


def build_lists(ctx):
    a = ctx.accents
    fg, dim, selection = ctx.foreground, ctx.dim, ctx.selection
    return {
        # Active selection (list has focus)
        "list.activeSelectionBackground": selection,
        "list.activeSelectionForeground": fg,
        "list.activeSelectionIconForeground": a.brown,
        # Drag and drop
        "list.dropBackground": ctx.overlay(a.blue, 0.25, 0.20),
        "list.dropBetweenBackground": a.blue,
        # Focused item
        "list.focusBackground": ctx.overlay(a.blue, 0.18, 0.14),
        "list.focusForeground": fg,
        "list.focusHighlightForeground": a.orange,
        "list.focusOutline": a.blue,
        "list.focusAndSelectionOutline": darken(a.blue, ctx.pick(0.04, 0.08)),
        # Search matches
        "list.highlightForeground": a.orange,
        # Hover
        "list.hoverBackground": ctx.hover_bg,
        "list.hoverForeground": fg,
        # Inactive selection (list does not have focus)
        "list.inactiveSelectionBackground": ctx.overlay(selection, 0.22, 0.55),
        "list.inactiveSelectionForeground": fg,
        "list.inactiveSelectionIconForeground": dim,
        "list.inactiveFocusBackground": ctx.overlay(a.blue, 0.10, 0.08),
        "list.inactiveFocusOutline": lighten(a.blue, ctx.pick(0.12, 0.06)),
        # Item states
        "list.invalidItemForeground": a.red,
        "list.errorForeground": a.red,
        "list.warningForeground": a.yellow,
        "list.deemphasizedForeground": dim,
        # Type filter widget
        "listFilterWidget.background": ctx.overlay(a.blue, 0.25, 0.15),
        "listFilterWidget.outline": a.blue,
        "listFilterWidget.noMatchesOutline": a.red,
        "listFilterWidget.shadow": ctx.overlay(BLACK, 0.35, 0.15),
        "list.filterMatchBackground": ctx.overlay(a.yellow, 0.22, 0.25),
        "list.filterMatchBorder": a.orange,
        # Trees
        "tree.indentGuidesStroke": dim,
        "tree.inactiveIndentGuidesStroke": alpha(dim, 0.6),
        "tree.tableColumnsBorder": ctx.border,
        "tree.tableOddRowsBackground": ctx.recede(ctx.panel, 0.03),
    }


def build_buttons(ctx):
    orange = ctx.accents.orange
    return {
        "button.background": orange,
        "button.foreground": ctx.contrast_foreground,
        "button.hoverBackground": ctx.shade(orange),
    }


def build_notifications(ctx):
    return {
        "notifications.background": ctx.panel,
        "notifications.foreground": ctx.foreground,
        "notificationCenterHeader.background": ctx.panel,
        "widget.shadow": ctx.overlay(BLACK, 0.35, 0.15),
    }


def build_diff(ctx):
    a = ctx.accents
    return {
        "diffEditor.insertedTextBackground": ctx.overlay(a.green, 0.18, 0.20),
        "diffEditor.removedTextBackground": ctx.overlay(a.red, 0.18, 0.20),
    }


REGION_BUILDERS = (
    ("titleBar", build_title_bar),
    ("activityBar", build_activity_bar),
    ("sideBar", build_side_bar),
    ("minimap", build_minimap),
    ("editor", build_editor),
    ("editorGroups", build_editor_groups_and_tabs),
    ("breadcrumbs", build_breadcrumbs),
    ("statusBar", build_status_bar),
    ("terminal", build_terminal),
    ("lists", build_lists),
    ("buttons", build_buttons),
    ("notifications", build_notifications),
    ("diff", build_diff),
)
