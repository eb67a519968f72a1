"""Options for highlighting and for rendering highlighted code."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from zalo.variant import Dual, Single

PLAIN_GRAMMAR_NAME = "text"
"""The default grammar name, where nothing is highlighted."""

LineRange = Tuple[int, int]


def _in_ranges(ranges: Iterable[LineRange], line: int) -> bool:
    return any(start <= line <= end for start, end in ranges)


@dataclass
class RenderOptions:
    """Options shared by the renderers.

    Line ranges are inclusive ``(first, last)`` pairs, counted from 1.
    """

    show_line_numbers: bool = False
    line_number_start: int = 1
    highlight_lines: list[LineRange] = field(default_factory=list)
    hide_lines: list[LineRange] = field(default_factory=list)

    def is_hidden(self, line: int) -> bool:
        """Whether the 1-based ``line`` should not be rendered."""
        return _in_ranges(self.hide_lines, line)

    def is_highlighted(self, line: int) -> bool:
        """Whether the 1-based ``line`` should be highlighted."""
        return _in_ranges(self.highlight_lines, line)


def normalize_string(text: str) -> str:
    """Turn CRLF and lone CR line endings into LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class HighlightOptions:
    """Options for highlighting by the registry, not for rendering.

    Language and theme names are case-insensitive. With dual themes,
    merging same-style tokens is disabled by default since tokens may
    merge differently per theme.
    """

    def __init__(self, lang: str, theme: Single[str] | Dual[str]) -> None:
        if isinstance(theme, Single):
            self.theme: Single[str] | Dual[str] = Single(theme.value.lower())
            self.merge_same_style = True
        elif isinstance(theme, Dual):
            self.theme = Dual(theme.light.lower(), theme.dark.lower())
            self.merge_same_style = False
        else:
            raise TypeError(f"expected Single or Dual, got {type(theme).__name__}")
        self.lang = lang.lower()
        self.merge_whitespaces = True
        self.plain_fallback = False

    def merge_whitespace(self, value: bool) -> HighlightOptions:
        """Merge whitespace tokens with the next non-whitespace token."""
        self.merge_whitespaces = value
        return self

    def merge_same_style_tokens(self, value: bool) -> HighlightOptions:
        """Merge adjacent tokens that share a style."""
        self.merge_same_style = value
        return self

    def fallback_to_plain(self, value: bool) -> HighlightOptions:
        """Use the plain grammar when the requested one is missing."""
        self.plain_fallback = value
        return self

    def _key(self) -> tuple:
        return (
            self.lang,
            self.theme,
            self.merge_whitespaces,
            self.merge_same_style,
            self.plain_fallback,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HighlightOptions):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"HighlightOptions(lang={self.lang!r}, theme={self.theme!r}, "
            f"merge_whitespaces={self.merge_whitespaces}, "
            f"merge_same_style={self.merge_same_style}, "
            f"plain_fallback={self.plain_fallback})"
        )