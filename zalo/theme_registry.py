"""A collection of compiled themes addressed by case-insensitive name."""

from __future__ import annotations

import os
from typing import Optional, Union

from zalo import css
from zalo.css import IdentifierShortener
from zalo.theme import CompiledTheme, SummarizedTheme, ThemeType, load_theme


class ThemeNotFound(LookupError):
    """Raised when a requested theme is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"theme not found: {name}")
        self.name = name


class ThemeRegistry:
    """Holds compiled themes keyed by their lower-cased name."""

    def __init__(self, shortener: Optional[IdentifierShortener] = None) -> None:
        self.themes: dict[str, CompiledTheme] = {}
        self.shortener = shortener

    def add_theme(self, theme: CompiledTheme) -> None:
        """Add or replace a compiled theme under its own name."""
        self.themes[theme.name.lower()] = theme

    def add_theme_from_path(self, path: Union[str, os.PathLike]) -> CompiledTheme:
        """Load, compile and add the theme stored at ``path``."""
        theme = load_theme(path)
        self.add_theme(theme)
        return theme

    def get_theme(self, name: str) -> CompiledTheme:
        """Return the theme called ``name``; raises :class:`ThemeNotFound`."""
        try:
            return self.themes[name.lower()]
        except KeyError:
            raise ThemeNotFound(name) from None

    def contains_theme(self, name: str) -> bool:
        return name.lower() in self.themes

    def _shortener(
        self, shortener: Optional[IdentifierShortener]
    ) -> Optional[IdentifierShortener]:
        return shortener if shortener is not None else self.shortener

    def generate_css(
        self,
        theme_name: str,
        prefix: str,
        shortener: Optional[IdentifierShortener] = None,
    ) -> str:
        """Generate the stylesheet of one theme with classes starting with ``prefix``."""
        theme = self.get_theme(theme_name)
        return css.generate_css(theme, prefix, self._shortener(shortener))

    def generate_all_css(
        self, prefix: str, shortener: Optional[IdentifierShortener] = None
    ) -> dict[str, str]:
        """Generate a stylesheet for every theme, keyed by theme id."""
        chosen = self._shortener(shortener)
        return {
            name: css.generate_css(theme, prefix, chosen)
            for name, theme in self.themes.items()
        }

    def get_all_themes(self) -> list[SummarizedTheme]:
        """Summaries sorted by name then id, numbered from 1."""
        ordered = sorted(self.themes.items(), key=lambda item: (item[1].name, item[0]))
        return [
            SummarizedTheme(
                id=theme_id,
                index=index,
                name=theme.name,
                dark=theme.theme_type is ThemeType.DARK,
            )
            for index, (theme_id, theme) in enumerate(ordered, start=1)
        ]

    def get_theme_names(self) -> list[str]:
        """The ids of all themes in the registry."""
        return list(self.themes)