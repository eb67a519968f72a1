"""TextMate font styles as a compact bit set."""

from __future__ import annotations

import enum


class FontStyle(enum.IntFlag):
    """Bold, underline, italic and strikethrough flags."""

    BOLD = 1
    UNDERLINE = 2
    ITALIC = 4
    STRIKETHROUGH = 8

    @classmethod
    def from_theme_str(cls, text: str) -> FontStyle:
        """Build the style from a theme ``fontStyle`` string."""
        style = cls(0)
        if "bold" in text:
            style |= cls.BOLD
        if "italic" in text:
            style |= cls.ITALIC
        if "underline" in text:
            style |= cls.UNDERLINE
        if "strikethrough" in text:
            style |= cls.STRIKETHROUGH
        return style

    def ansi_escapes(self) -> str:
        """Return the ANSI SGR parameters for this style, each led by ';'."""
        codes = (
            (FontStyle.BOLD, ";1"),
            (FontStyle.ITALIC, ";3"),
            (FontStyle.UNDERLINE, ";4"),
            (FontStyle.STRIKETHROUGH, ";9"),
        )
        return "".join(code for flag, code in codes if flag in self)

    def css_attributes(self) -> list[str]:
        """Return the CSS declarations for this style."""
        out = []
        if FontStyle.BOLD in self:
            out.append("font-weight: bold;")
        if FontStyle.ITALIC in self:
            out.append("font-style: italic;")
        underline = FontStyle.UNDERLINE in self
        strike = FontStyle.STRIKETHROUGH in self
        if underline and strike:
            out.append("text-decoration: underline line-through;")
        elif underline:
            out.append("text-decoration: underline;")
        elif strike:
            out.append("text-decoration: line-through;")
        return out