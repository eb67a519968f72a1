import pytest

from zalo.options import (
    PLAIN_GRAMMAR_NAME,
    HighlightOptions,
    RenderOptions,
    normalize_string,
)
from zalo.variant import Dual, Single


def test_render_options_defaults():
    options = RenderOptions()
    assert options.show_line_numbers is False
    assert options.line_number_start == 1
    assert options.highlight_lines == []
    assert options.hide_lines == []


def test_render_options_ranges_are_inclusive():
    options = RenderOptions(highlight_lines=[(3, 3), (5, 5)], hide_lines=[(4, 4)])
    assert [n for n in range(1, 7) if options.is_highlighted(n)] == [3, 5]
    assert [n for n in range(1, 7) if options.is_hidden(n)] == [4]


def test_render_options_wide_range():
    options = RenderOptions(hide_lines=[(2, 4)])
    assert not options.is_hidden(1)
    assert all(options.is_hidden(n) for n in (2, 3, 4))
    assert not options.is_hidden(5)


def test_normalize_string_line_endings():
    assert normalize_string("a\r\nb\rc\nd") == "a\nb\nc\nd"


@pytest.mark.parametrize("text", ["", "plain", "x\r\n\r\ny", "\r\r\n\n"])
def test_normalize_string_invariants(text):
    result = normalize_string(text)
    assert "\r" not in result
    assert normalize_string(result) == result
    assert result.count("\n") == text.count("\n") + text.count("\r") - text.count("\r\n")


def test_highlight_options_single_lowercases_and_defaults():
    options = HighlightOptions("JavaScript", Single("Vitesse-Black"))
    assert options.lang == "JavaScript".lower()
    assert options.theme == Single("Vitesse-Black".lower())
    assert options.merge_same_style is True
    assert options.merge_whitespaces is True
    assert options.plain_fallback is False


def test_highlight_options_dual_disables_style_merging():
    options = HighlightOptions("rust", Dual(light="Light-Plus", dark="Dark-Plus"))
    assert options.theme == Dual("light-plus", "dark-plus")
    assert options.merge_same_style is False


def test_highlight_options_builders_chain():
    options = (
        HighlightOptions("unknown", Single("vitesse-black"))
        .merge_whitespace(False)
        .merge_same_style_tokens(False)
        .fallback_to_plain(True)
    )
    assert options.merge_whitespaces is False
    assert options.merge_same_style is False
    assert options.plain_fallback is True


def test_highlight_options_equality_is_case_insensitive():
    first = HighlightOptions("PYTHON", Single("NORD"))
    second = HighlightOptions("python", Single("nord"))
    assert first == second
    assert hash(first) == hash(second)
    assert first != second.fallback_to_plain(True)


def test_highlight_options_rejects_bad_theme():
    with pytest.raises(TypeError):
        HighlightOptions("python", "nord")


def test_plain_grammar_name_as_language():
    options = HighlightOptions(PLAIN_GRAMMAR_NAME.upper(), Single("nord"))
    assert options.lang == "text"