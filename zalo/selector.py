"""Theme selectors and their matching against scope stacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

from zalo.scope import Scope, global_repository


@dataclass(frozen=True)
class Anywhere:
    """A parent scope that may appear anywhere further up the stack."""

    scope: Scope


@dataclass(frozen=True)
class Direct:
    """A parent scope that must be the immediate parent (``>`` combinator)."""

    scope: Scope


Parent = Union[Anywhere, Direct]


@dataclass(frozen=True)
class ThemeSelector:
    """A parsed selector: the target scope plus parent requirements.

    ``parent_scopes`` runs from the innermost parent to the outermost one.
    """

    target_scope: Scope
    parent_scopes: Tuple[Parent, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parent_scopes", tuple(self.parent_scopes))

    def matches(self, scope_stack: Sequence[Scope]) -> bool:
        """Whether the selector matches a stack ordered outermost to innermost.

        The target must prefix the innermost scope; each parent requirement
        is then satisfied walking up the stack, ``Anywhere`` parents skipping
        intermediate scopes and ``Direct`` parents requiring adjacency.
        """
        if not scope_stack:
            return False
        if not self.target_scope.is_prefix_of(scope_stack[-1]):
            return False
        if not self.parent_scopes:
            return True

        rest = list(scope_stack[:-1])
        end = len(rest)
        last_index = len(self.parent_scopes) - 1
        for index, required in enumerate(self.parent_scopes):
            if isinstance(required, Direct):
                if end == 0 or not required.scope.is_prefix_of(rest[end - 1]):
                    return False
                end -= 1
            else:
                found = next(
                    (
                        pos
                        for pos in range(end - 1, -1, -1)
                        if required.scope.is_prefix_of(rest[pos])
                    ),
                    None,
                )
                if found is None:
                    return False
                end = found
            if end == 0 and index != last_index:
                return False
        return True


def parse_selector(text: str) -> Optional[ThemeSelector]:
    """Parse a selector such as ``"source.js meta.function > string"``.

    Returns ``None`` when the selector is empty or ends with ``>``.
    """
    parts = text.split()
    if not parts:
        return None
    *rest, last = parts
    if last == ">":
        return None

    repo = global_repository()
    target = repo.parse(last)
    parents: list[Parent] = []
    is_direct = False
    for part in reversed(rest):
        if part == ">":
            is_direct = True
            continue
        scope = repo.parse(part)
        parents.append(Direct(scope) if is_direct else Anywhere(scope))
        is_direct = False
    return ThemeSelector(target, tuple(parents))