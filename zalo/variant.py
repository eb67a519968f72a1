"""Single or dual (light/dark) values, used for themes and styles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Single(Generic[T]):
    """A single theme was requested."""

    value: T


@dataclass(frozen=True)
class Dual(Generic[T]):
    """Light and dark themes were requested."""

    light: T
    dark: T


ThemeVariant = Union[Single[T], Dual[T]]


def has_decoration(variant: ThemeVariant) -> bool:
    """Whether any style in the variant carries underline or strikethrough."""
    if isinstance(variant, Single):
        return variant.value.has_decorations()
    if isinstance(variant, Dual):
        return variant.light.has_decorations() or variant.dark.has_decorations()
    raise TypeError(f"expected Single or Dual, got {type(variant).__name__}")