"""Hierarchical scopes packed into a single 128-bit integer.

A scope such as ``source.rust.meta.function`` is split into atoms. Each
atom is interned in a repository and stored as a 16-bit number
(repository index + 1). Up to eight atoms are kept, most significant
first, so integer comparison orders scopes lexicographically by atom.
Atoms beyond the eighth are dropped.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

MAX_ATOMS_IN_SCOPE = 8
# Leaves room for 0 (unused slot) and the maximum (empty atom).
MAX_ATOMS_IN_REPOSITORY = 0xFFFF - 2
EMPTY_ATOM_INDEX = 0xFFFF - 1
EMPTY_ATOM_NUMBER = 0xFFFF

_ATOM_BITS = 16
_ATOM_MASK = 0xFFFF
_FULL_MASK = (1 << (MAX_ATOMS_IN_SCOPE * _ATOM_BITS)) - 1


def _shift_for(index: int) -> int:
    return (MAX_ATOMS_IN_SCOPE - 1 - index) * _ATOM_BITS


@dataclass(frozen=True, order=True)
class Scope:
    """A bit-packed scope; compare, hash and test prefixes in constant time."""

    atoms: int = 0

    def atom_at(self, index: int) -> int:
        """Return the atom number at ``index``: 0 if unused, else index + 1."""
        if not 0 <= index < MAX_ATOMS_IN_SCOPE:
            raise IndexError(f"atom index {index} out of range")
        return (self.atoms >> _shift_for(index)) & _ATOM_MASK

    def _missing_atoms(self) -> int:
        if self.atoms == 0:
            return MAX_ATOMS_IN_SCOPE
        trailing_zeros = (self.atoms & -self.atoms).bit_length() - 1
        return trailing_zeros // _ATOM_BITS

    def __len__(self) -> int:
        return MAX_ATOMS_IN_SCOPE - self._missing_atoms()

    def is_empty(self) -> bool:
        return self.atoms == 0

    def is_prefix_of(self, other: Scope) -> bool:
        """Whether every atom of this scope begins ``other``."""
        missing = self._missing_atoms()
        if missing == MAX_ATOMS_IN_SCOPE:
            return True
        mask = (_FULL_MASK << (missing * _ATOM_BITS)) & _FULL_MASK
        return (self.atoms ^ other.atoms) & mask == 0

    def build_string(self) -> str:
        """Rebuild the dotted text form from the global repository."""
        return global_repository().to_string(self)

    def __str__(self) -> str:
        return self.build_string()

    def __repr__(self) -> str:
        return f'Scope("{self.build_string()}")'


@dataclass
class ScopeRepository:
    """Interns scope atoms, mapping each string to a stable index."""

    atoms: list[str] = field(default_factory=list)
    atom_index_map: dict[str, int] = field(default_factory=dict)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def atom_to_index(self, atom: str) -> int:
        """Return the index of ``atom``, registering it if new."""
        if not atom:
            return EMPTY_ATOM_INDEX
        with self._lock:
            index = self.atom_index_map.get(atom)
            if index is not None:
                return index
            if len(self.atoms) >= MAX_ATOMS_IN_REPOSITORY:
                raise OverflowError(
                    "Too many atoms in repository: exceeded "
                    f"MAX_ATOMS_IN_REPOSITORY of {MAX_ATOMS_IN_REPOSITORY}"
                )
            index = len(self.atoms)
            self.atoms.append(atom)
            self.atom_index_map[atom] = index
            return index

    def atom_number_to_str(self, atom_number: int) -> str:
        """Return the atom stored under a 1-based atom number."""
        if atom_number <= 0:
            raise ValueError("atom number must be positive")
        return self.atoms[atom_number - 1]

    def parse(self, text: str) -> Scope:
        """Pack a dotted scope string, keeping at most eight atoms."""
        if not text:
            return Scope()
        atoms = 0
        for i, part in enumerate(text.split(".")[:MAX_ATOMS_IN_SCOPE]):
            atom_number = self.atom_to_index(part) + 1
            atoms |= atom_number << _shift_for(i)
        return Scope(atoms)

    def to_string(self, scope: Scope) -> str:
        """Rebuild the dotted text of a packed scope."""
        parts: list[str] = []
        for i in range(MAX_ATOMS_IN_SCOPE):
            atom_number = scope.atom_at(i)
            if atom_number == 0:
                break
            if atom_number == EMPTY_ATOM_NUMBER:
                parts.append("")
            else:
                parts.append(self.atom_number_to_str(atom_number))
        return ".".join(parts)


_global_lock = threading.Lock()
_global_repo = ScopeRepository()


def global_repository() -> ScopeRepository:
    """Return the process-wide scope repository."""
    with _global_lock:
        return _global_repo


def replace_global_repository(repo: ScopeRepository) -> None:
    """Swap the process-wide scope repository, e.g. after loading saved state."""
    global _global_repo
    with _global_lock:
        _global_repo = repo


def parse_scopes(text: str) -> list[Scope]:
    """Parse whitespace-separated scope names into scopes."""
    repo = global_repository()
    return [repo.parse(part) for part in text.split()]