"""Compiled themes: concrete styles and selector rules sorted by specificity."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Union

from zalo.color import BLACK, WHITE, Color
from zalo.font_style import FontStyle
from zalo.raw_theme import RawTheme, TokenColorSettings
from zalo.selector import ThemeSelector, parse_selector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Style:
    """A complete style: foreground, background and font style."""

    foreground: Color = BLACK
    background: Color = WHITE
    font_style: FontStyle = FontStyle(0)

    def has_decorations(self) -> bool:
        """Whether the style is underlined or struck through."""
        return (
            FontStyle.UNDERLINE in self.font_style
            or FontStyle.STRIKETHROUGH in self.font_style
        )


@dataclass(frozen=True)
class StyleModifier:
    """A partial style from a theme rule; unset parts inherit from a base."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None
    font_style: Optional[FontStyle] = None

    @classmethod
    def from_settings(cls, settings: TokenColorSettings) -> StyleModifier:
        """Build from rule settings; raises ``InvalidHexColor`` on bad colours."""
        fg = settings.effective_foreground()
        bg = settings.effective_background()
        return cls(
            foreground=Color.from_hex(fg) if fg is not None else None,
            background=Color.from_hex(bg) if bg is not None else None,
            font_style=(
                FontStyle.from_theme_str(settings.font_style)
                if settings.font_style is not None
                else None
            ),
        )

    def apply_to(self, base: Style) -> Style:
        """Return ``base`` with the set parts of this modifier applied."""
        return Style(
            foreground=self.foreground if self.foreground is not None else base.foreground,
            background=self.background if self.background is not None else base.background,
            font_style=self.font_style if self.font_style is not None else base.font_style,
        )

    def has_properties(self) -> bool:
        return (
            self.foreground is not None
            or self.background is not None
            or self.font_style is not None
        )


class ThemeType(enum.Enum):
    """Whether a theme is light or dark."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_theme_str(cls, text: str) -> ThemeType:
        """``light`` (any case) is light; anything else is dark."""
        return cls.LIGHT if text.lower() == "light" and text.isascii() else cls.DARK


@dataclass(frozen=True)
class CompiledThemeRule:
    """A selector with the style modifier it applies."""

    selector: ThemeSelector
    style_modifier: StyleModifier


@dataclass
class SummarizedTheme:
    """Short theme description for listings."""

    id: str
    index: Optional[int]
    name: str
    dark: bool


def _specificity(selector: ThemeSelector) -> tuple[int, int]:
    return (len(selector.target_scope), len(selector.parent_scopes))


@dataclass
class CompiledTheme:
    """A theme ready for matching; rules run from least to most specific."""

    name: str
    theme_type: ThemeType
    default_style: Style
    highlight_background_color: Optional[Color] = None
    line_number_foreground: Optional[Color] = None
    rules: list[CompiledThemeRule] = field(default_factory=list)

    @classmethod
    def from_raw_theme(cls, raw: RawTheme) -> CompiledTheme:
        """Compile a raw theme; raises ``InvalidHexColor`` on bad colours."""
        theme_type = (
            ThemeType.from_theme_str(raw.kind) if raw.kind is not None else ThemeType.DARK
        )
        colors = raw.colors
        foreground = Color.from_hex(colors.foreground)
        background = Color.from_hex(colors.background)
        highlight = (
            Color.from_hex(colors.highlight_background)
            if colors.highlight_background is not None
            else None
        )
        line_number = (
            Color.from_hex(colors.line_number_foreground)
            if colors.line_number_foreground is not None
            else None
        )

        rules: list[CompiledThemeRule] = []
        for token_rule in raw.token_colors:
            # A rule without scope carries defaults in some themes.
            if not token_rule.scope:
                fg = token_rule.settings.effective_foreground()
                if fg is not None:
                    foreground = Color.from_hex(fg)
                bg = token_rule.settings.effective_background()
                if bg is not None:
                    background = Color.from_hex(bg)
                continue

            selectors = []
            for pattern in token_rule.scope:
                selector = parse_selector(pattern)
                if selector is None:
                    logger.debug(
                        "Failed to parse theme selector %r in theme %s", pattern, raw.name
                    )
                else:
                    selectors.append(selector)

            if selectors:
                modifier = StyleModifier.from_settings(token_rule.settings)
                rules.extend(CompiledThemeRule(sel, modifier) for sel in selectors)

        rules.sort(key=lambda rule: _specificity(rule.selector))

        return cls(
            name=raw.name,
            theme_type=theme_type,
            default_style=Style(foreground, background, FontStyle(0)),
            highlight_background_color=highlight,
            line_number_foreground=line_number,
            rules=rules,
        )


def compile_theme(raw: RawTheme) -> CompiledTheme:
    """Compile a raw theme."""
    return CompiledTheme.from_raw_theme(raw)


def load_theme(path: Union[str, os.PathLike]) -> CompiledTheme:
    """Load a theme JSON file and compile it."""
    return compile_theme(RawTheme.load_from_file(path))