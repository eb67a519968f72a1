"""RGBA colours parsed from theme hex strings."""

from __future__ import annotations

import string
from dataclasses import dataclass

_HEX_DIGITS = frozenset(string.hexdigits)


class InvalidHexColor(ValueError):
    """Raised when a string is not a valid hex colour."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"invalid hex color {value!r}: {reason}")
        self.value = value
        self.reason = reason


def _parse_component(part: str, original: str) -> int:
    if not part or not set(part) <= _HEX_DIGITS:
        raise InvalidHexColor(original, f"invalid hex component '{part}'")
    return int(part, 16)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit components."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, hex_str: str) -> Color:
        """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``, ``white`` or ``black``.

        The leading ``#`` is optional. Raises :class:`InvalidHexColor`.
        """
        original = hex_str
        digits = hex_str.lstrip("#")
        if digits == "white":
            return WHITE
        if digits == "black":
            return BLACK

        if len(digits) in (3, 4):
            values = [_parse_component(ch, original) * 17 for ch in digits]
        elif len(digits) in (6, 8):
            values = [
                _parse_component(digits[i : i + 2], original)
                for i in range(0, len(digits), 2)
            ]
        else:
            raise InvalidHexColor(original, f"invalid length {len(digits.encode())}")
        return cls(*values)

    def as_hex(self) -> str:
        """Return the uppercase hex form, with alpha only when not opaque."""
        if self.a < 255:
            return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def as_css_color_property(self) -> str:
        return f"color: {self.as_hex()};"

    def as_css_bg_color_property(self) -> str:
        return f"background-color: {self.as_hex()};"

    def as_ansi_fg(self) -> str:
        """Return the ANSI truecolor foreground parameters."""
        return f"38;2;{self.r};{self.g};{self.b}"

    def as_ansi_bg(self) -> str:
        """Return the ANSI truecolor background parameters."""
        return f"48;2;{self.r};{self.g};{self.b}"


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)


def css_light_dark_color(light: Color, dark: Color) -> str:
    """CSS ``color`` declaration switching between a light and dark colour."""
    return f"color: light-dark({light.as_hex()}, {dark.as_hex()});"


def css_light_dark_bg_color(light: Color, dark: Color) -> str:
    """CSS ``background-color`` declaration switching between light and dark."""
    return f"background-color: light-dark({light.as_hex()}, {dark.as_hex()});"