"""Syntax token colors: TextMate scope rules and semantic token colors."""

COMMENT = "#AAAAAA"
ILLEGAL = "#660000"
OPERATOR = "#777777"
CONSTANT = "#AB6526"
FUNCTION = "#AA3731"


def _rule(name, scope, foreground, font_style=None):
    settings = {}
    if font_style:
        settings["fontStyle"] = font_style
    settings["foreground"] = foreground
    return {"name": name, "scope": scope, "settings": settings}


def build_token_colors(palette):
    a = palette.accents
    return [
        _rule("Comments", ["comment", "punctuation.definition.comment"], COMMENT, "italic"),
        _rule("Doc Comments", ["comment.documentation", "comment.block.documentation"], a.green),
        _rule("Invalid - Illegal", "invalid.illegal", ILLEGAL),
        _rule("Operators", "keyword.operator", OPERATOR),
        _rule("Keywords", ["keyword", "storage"], a.blue),
        _rule("Types", ["storage.type", "support.type"], a.purple),
        _rule(
            "Language Constants",
            ["constant.language", "support.constant", "variable.language"],
            CONSTANT,
        ),
        _rule("Variables", ["variable", "support.variable"], a.purple),
        _rule("Functions", ["entity.name.function", "support.function"], FUNCTION, "bold"),
        _rule("Strings", "string", a.green),
        _rule("Numbers", ["constant.numeric", "constant.character", "constant"], CONSTANT),
    ]


def build_semantic_token_colors(palette):
    a = palette.accents
    return {
        "namespace": a.purple,
        "class": {"bold": True, "foreground": a.purple},
        "interface": {"bold": True, "foreground": a.purple},
        "enum": {"foreground": CONSTANT},
        "typeParameter": a.purple,
        "parameter": a.purple,
        "variable": a.purple,
        "property": a.purple,
        "function": {"foreground": FUNCTION, "bold": True},
        "method": {"foreground": FUNCTION, "bold": True},
        "string": a.green,
        "number": CONSTANT,
        "regexp": a.blue,
        "comment": COMMENT,
        "keyword": a.blue,
        "operator": OPERATOR,
        "modifier": a.blue,
        "deprecated": {"strikethrough": True},
    }


def build_tokens(palette):
    """Token section of a theme document for ``palette``.

    Returns:
        dict with ``tokenColors``, ``semanticHighlighting`` and
        ``semanticTokenColors``
    """
    return {
        "tokenColors": build_token_colors(palette),
        "semanticHighlighting": True,
        "semanticTokenColors": build_semantic_token_colors(palette),
    }
