import json

import pytest

from zalo.color import BLACK, WHITE, Color, InvalidHexColor
from zalo.font_style import FontStyle
from zalo.raw_theme import RawTheme, TokenColorSettings
from zalo.theme import (
    CompiledTheme,
    Style,
    StyleModifier,
    ThemeType,
    compile_theme,
    load_theme,
)


def make_raw(token_colors, kind=None, colors=None):
    data = {
        "name": "test",
        "colors": colors or {"editor.foreground": "#111111", "editor.background": "#EEEEEE"},
        "tokenColors": token_colors,
    }
    if kind is not None:
        data["type"] = kind
    return RawTheme.from_mapping(data)


def test_can_load_default_from_token_colors(tmp_path):
    path = tmp_path / "theme.json"
    path.write_text(
        json.dumps(
            {
                "name": "test",
                "colors": {"foreground": "#000000", "background": "#FFFFFF"},
                "tokenColors": [
                    {"settings": {"background": "#23262E", "foreground": "#D5CED9"}},
                    {"scope": ["comment"], "settings": {"foreground": "#A0A1A7cc"}},
                ],
            }
        ),
        encoding="utf-8",
    )
    compiled = load_theme(path)
    assert compiled.default_style.background.as_hex() == "#23262E"
    assert compiled.default_style.foreground.as_hex() == "#D5CED9"
    assert compiled.name == "test"
    assert len(compiled.rules) == 1
    assert compiled.rules[0].style_modifier.foreground.as_hex() == "#A0A1A7CC"


def test_rules_sorted_by_specificity():
    raw = make_raw(
        [
            {"scope": "a.b.c", "settings": {"foreground": "#010101"}},
            {"scope": "x y", "settings": {"foreground": "#020202"}},
            {"scope": "a", "settings": {"foreground": "#030303"}},
        ]
    )
    compiled = compile_theme(raw)
    order = [
        (rule.selector.target_scope.build_string(), len(rule.selector.parent_scopes))
        for rule in compiled.rules
    ]
    assert order == [("a", 0), ("y", 1), ("a.b.c", 0)]


def test_invalid_selectors_are_skipped():
    raw = make_raw([{"scope": ["string >", "comment"], "settings": {"foreground": "#FF0000"}}])
    compiled = compile_theme(raw)
    assert [r.selector.target_scope.build_string() for r in compiled.rules] == ["comment"]


def test_editor_colors_and_type():
    raw = make_raw(
        [],
        kind="Light",
        colors={
            "editor.foreground": "#111111",
            "editor.background": "#EEEEEE",
            "editor.lineHighlightBackground": "#abc",
            "editorLineNumber.foreground": "#123456",
        },
    )
    compiled = CompiledTheme.from_raw_theme(raw)
    assert compiled.theme_type is ThemeType.LIGHT
    assert compiled.default_style == Style(
        Color(17, 17, 17), Color(238, 238, 238), FontStyle(0)
    )
    assert compiled.highlight_background_color == Color(170, 187, 204)
    assert compiled.line_number_foreground == Color(18, 52, 86)


def test_missing_type_defaults_to_dark():
    assert compile_theme(make_raw([])).theme_type is ThemeType.DARK


def test_invalid_color_raises():
    raw = make_raw([{"scope": "comment", "settings": {"foreground": "#GG"}}])
    with pytest.raises(InvalidHexColor):
        compile_theme(raw)


@pytest.mark.parametrize(
    "text, expected",
    [("light", ThemeType.LIGHT), ("LIGHT", ThemeType.LIGHT), ("dark", ThemeType.DARK), ("hc", ThemeType.DARK)],
)
def test_theme_type_from_str(text, expected):
    assert ThemeType.from_theme_str(text) is expected


def test_style_defaults_and_decorations():
    style = Style()
    assert style.foreground == BLACK
    assert style.background == WHITE
    assert style.has_decorations() is False
    assert Style(font_style=FontStyle.UNDERLINE).has_decorations() is True
    assert Style(font_style=FontStyle.STRIKETHROUGH).has_decorations() is True
    assert Style(font_style=FontStyle.BOLD | FontStyle.ITALIC).has_decorations() is False


def test_modifier_from_settings_skips_inherit():
    modifier = StyleModifier.from_settings(
        TokenColorSettings(foreground="inherit", background="#fff", font_style="bold italic")
    )
    assert modifier.foreground is None
    assert modifier.background == WHITE
    assert modifier.font_style == FontStyle.BOLD | FontStyle.ITALIC


def test_modifier_apply_to_and_properties():
    base = Style(Color(1, 2, 3), Color(4, 5, 6), FontStyle.BOLD)
    assert StyleModifier().has_properties() is False
    assert StyleModifier().apply_to(base) == base
    modifier = StyleModifier(foreground=Color(9, 9, 9), font_style=FontStyle(0))
    assert modifier.has_properties() is True
    assert modifier.apply_to(base) == Style(Color(9, 9, 9), Color(4, 5, 6), FontStyle(0))