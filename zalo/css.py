"""CSS stylesheets for compiled themes, used with class-based HTML output."""

from __future__ import annotations

from typing import Callable, Optional

from zalo.scope import EMPTY_ATOM_NUMBER, MAX_ATOMS_IN_SCOPE, Scope, global_repository
from zalo.theme import CompiledTheme, CompiledThemeRule

IdentifierShortener = Callable[[str, str], str]
"""Maps an escaped identifier and a class prefix to the final class name."""


def prefix_identifier(identifier: str, prefix: str) -> str:
    """Default shortener: the prefix followed by the identifier."""
    return f"{prefix}{identifier}"


def _resolve(shortener: Optional[IdentifierShortener]) -> IdentifierShortener:
    return shortener if shortener is not None else prefix_identifier


def escape_css_identifier(
    identifier: str, prefix: str, shortener: Optional[IdentifierShortener] = None
) -> str:
    """Escape characters that may not appear in a CSS class name, then shorten.

    Letters, ``-`` and ``_`` are kept, digits too unless they come first;
    anything else becomes a hex escape followed by a space.
    """
    output = ""
    for ch in identifier:
        if (ch.isascii() and ch.isalpha()) or ch in "-_" or (
            output and ch.isascii() and ch.isdigit()
        ):
            output += ch
        else:
            output += f"\\{ord(ch):x} "
    return _resolve(shortener)(output, prefix)


def scope_to_css_classes(
    scope: Scope, prefix: str, shortener: Optional[IdentifierShortener] = None
) -> list[str]:
    """Return the sorted, de-duplicated CSS classes for the atoms of ``scope``.

    Empty atoms are left out.
    """
    repo = global_repository()
    classes: set[str] = set()
    for i in range(MAX_ATOMS_IN_SCOPE):
        atom_number = scope.atom_at(i)
        if atom_number == 0:
            break
        if atom_number == EMPTY_ATOM_NUMBER:
            continue
        atom = repo.atom_number_to_str(atom_number)
        classes.add(escape_css_identifier(atom, prefix, shortener))
    return sorted(classes)


def scope_to_css_selector(
    scope: Scope,
    prefix: str,
    as_class: bool,
    shortener: Optional[IdentifierShortener] = None,
) -> str:
    """Turn a scope into a CSS selector (``.g-a.g-b``) or class list (``g-a g-b``)."""
    classes = scope_to_css_classes(scope, prefix, shortener)
    if as_class:
        return " ".join(classes)
    return "".join(f".{cls}" for cls in classes)


def _rule_css(
    rule: CompiledThemeRule, prefix: str, shortener: Optional[IdentifierShortener]
) -> Optional[str]:
    modifier = rule.style_modifier
    declarations: list[str] = []
    if modifier.foreground is not None:
        declarations.append(modifier.foreground.as_css_color_property())
    if modifier.background is not None:
        declarations.append(modifier.background.as_css_bg_color_property())
    if modifier.font_style is not None:
        attributes = modifier.font_style.css_attributes()
        if attributes:
            declarations.append("".join(attributes))
    if not declarations:
        return None
    selector = scope_to_css_selector(
        rule.selector.target_scope, prefix, False, shortener
    )
    body = "".join(f" {decl}" for decl in declarations)
    return f"{selector} {{{body} }}\n"


def generate_css(
    theme: CompiledTheme, prefix: str, shortener: Optional[IdentifierShortener] = None
) -> str:
    """Generate the stylesheet for ``theme`` with classes starting with ``prefix``."""
    parts = ["/*\n", f' * theme "{theme.name}" generated by zalo\n', " */\n", "\n"]
    for rule in theme.rules:
        if not rule.style_modifier.has_properties():
            continue
        css = _rule_css(rule, prefix, shortener)
        if css is not None:
            parts.append(css)
    return "".join(parts)