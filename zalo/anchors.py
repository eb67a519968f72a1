"""Which of the ``\\A`` and ``\\G`` regex anchors may match at a position.

Anchors that are not active are replaced by a character that practically
never occurs in source text, so the regex cannot match through them.
"""

from __future__ import annotations

import enum
from typing import Optional

_NEVER_MATCHES = "\uffff"


class AnchorActive(enum.Enum):
    """The set of anchors allowed to match in the current context."""

    A = "allow_A=true, allow_G=false"
    G = "allow_A=false, allow_G=true"
    AG = "allow_A=true, allow_G=true"
    NONE = "allow_A=false, allow_G=false"

    def replace_anchors(self, pattern: str) -> str:
        """Neutralise the anchors of ``pattern`` that are not active here."""
        if self is AnchorActive.AG:
            return pattern
        if self is AnchorActive.A:
            return pattern.replace("\\G", _NEVER_MATCHES)
        if self is AnchorActive.G:
            return pattern.replace("\\A", _NEVER_MATCHES)
        return pattern.replace("\\A", _NEVER_MATCHES).replace("\\G", _NEVER_MATCHES)

    def __str__(self) -> str:
        return self.value


def anchor_active(
    is_first_line: bool, anchor_position: Optional[int], current_pos: int
) -> AnchorActive:
    """Work out the active anchors.

    ``\\A`` is active on the first line only; ``\\G`` is active when the
    current position equals the anchor position.
    """
    g_active = anchor_position is not None and anchor_position == current_pos
    if is_first_line:
        return AnchorActive.AG if g_active else AnchorActive.A
    return AnchorActive.G if g_active else AnchorActive.NONE