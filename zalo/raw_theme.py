"""Themes as loaded from VSCode theme JSON files, before compilation."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union


class ThemeFormatError(ValueError):
    """Raised when theme data does not have the expected shape."""


def _optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ThemeFormatError(f"field {key!r} must be a string")


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ThemeFormatError(f"{what} must be an object")
    return data


@dataclass
class TokenColorSettings:
    """Colour and font settings of one token colour rule."""

    foreground: Optional[str] = None
    background: Optional[str] = None
    font_style: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TokenColorSettings:
        data = _require_mapping(data, "settings")
        return cls(
            foreground=_optional_str(data, "foreground"),
            background=_optional_str(data, "background"),
            font_style=_optional_str(data, "fontStyle"),
        )

    def effective_foreground(self) -> Optional[str]:
        """The foreground, unless absent or ``inherit``."""
        return None if self.foreground == "inherit" else self.foreground

    def effective_background(self) -> Optional[str]:
        """The background, unless absent or ``inherit``."""
        return None if self.background == "inherit" else self.background


@dataclass
class Colors:
    """Editor colours of a theme."""

    foreground: str
    background: str
    highlight_background: Optional[str] = None
    line_number_foreground: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Colors:
        """Read colours; ``foreground``/``editor.foreground`` (and the same
        for background) are accepted, the first one present wins."""
        data = _require_mapping(data, "colors")
        found: dict[str, str] = {}
        targets = {
            "foreground": "foreground",
            "editor.foreground": "foreground",
            "background": "background",
            "editor.background": "background",
            "editor.lineHighlightBackground": "highlight_background",
            "editorLineNumber.foreground": "line_number_foreground",
        }
        for key, value in data.items():
            target = targets.get(key)
            if target is None:
                continue
            if target in ("foreground", "background") and target in found:
                continue
            if not isinstance(value, str):
                raise ThemeFormatError(f"field {key!r} must be a string")
            found[target] = value
        if "foreground" not in found:
            raise ThemeFormatError("missing field `foreground or editor.foreground`")
        if "background" not in found:
            raise ThemeFormatError("missing field `background or editor.background`")
        return cls(**found)


@dataclass
class TokenColorRule:
    """One entry of ``tokenColors``: scope selectors and their settings."""

    scope: list[str] = field(default_factory=list)
    settings: TokenColorSettings = field(default_factory=TokenColorSettings)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TokenColorRule:
        """Read a rule; ``scope`` may be a comma-separated string or a list."""
        data = _require_mapping(data, "token color rule")
        if "scope" not in data:
            scope: list[str] = []
        else:
            raw_scope = data["scope"]
            if isinstance(raw_scope, str):
                scope = [part.strip() for part in raw_scope.split(",")]
            elif isinstance(raw_scope, list) and all(
                isinstance(item, str) for item in raw_scope
            ):
                scope = list(raw_scope)
            else:
                raise ThemeFormatError("scope must be a string or array of strings")
        settings = (
            TokenColorSettings.from_mapping(data["settings"])
            if "settings" in data
            else TokenColorSettings()
        )
        return cls(scope=scope, settings=settings)


@dataclass
class RawTheme:
    """A theme as found in a theme JSON file."""

    name: str
    kind: Optional[str]
    colors: Colors
    token_colors: list[TokenColorRule]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RawTheme:
        data = _require_mapping(data, "theme")
        name = data.get("name")
        if not isinstance(name, str):
            raise ThemeFormatError("missing or invalid field `name`")
        if "colors" not in data:
            raise ThemeFormatError("missing field `colors`")
        token_colors = data.get("tokenColors")
        if not isinstance(token_colors, list):
            raise ThemeFormatError("missing or invalid field `tokenColors`")
        return cls(
            name=name,
            kind=_optional_str(data, "type"),
            colors=Colors.from_mapping(data["colors"]),
            token_colors=[TokenColorRule.from_mapping(rule) for rule in token_colors],
        )

    @classmethod
    def load_from_file(cls, path: Union[str, os.PathLike]) -> RawTheme:
        """Read and parse a theme JSON file."""
        with open(path, encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ThemeFormatError(f"invalid JSON in {path}: {exc}") from exc
        return cls.from_mapping(data)