# bundlecache/names.py
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple


def normalize_name(name: str) -> str:
    """Lookup key for a resource name. Case-only differences never matter."""
    return name.casefold()


def strip_mesh_id_suffix(name: str, length: int = 2) -> str | None:
    """
    Recover the object name from a multi-mesh export name.

    Exports name their meshes "<object>_<id>" with a single digit id, so the
    last ``length`` characters are dropped. Names that are not longer than
    the suffix have no object part and yield None.
    """
    if length <= 0:
        raise ValueError(f"suffix length must be positive, got {length}")
    if len(name) <= length:
        return None
    return name[:-length]


class RenameTable:
    """
    Immutable mapping from retired resource names to their current names.
    Both sides are normalized on construction.
    """

    __slots__ = ("_renames",)

    def __init__(
        self, renames: Mapping[str, str] | Iterable[Tuple[str, str]] = ()
    ) -> None:
        pairs = renames.items() if isinstance(renames, Mapping) else renames
        self._renames: Mapping[str, str] = MappingProxyType(
            {normalize_name(old): normalize_name(new) for old, new in pairs}
        )

    @classmethod
    def empty(cls) -> RenameTable:
        return cls()

    def get(self, name: str) -> str | None:
        """Current name for a retired one, or None if it was never renamed."""
        return self._renames.get(normalize_name(name))

    def items(self):
        return self._renames.items()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._renames

    def __iter__(self) -> Iterator[str]:
        return iter(self._renames)

    def __len__(self) -> int:
        return len(self._renames)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RenameTable):
            return NotImplemented
        return dict(self._renames) == dict(other._renames)

    def __hash__(self) -> int:
        return hash(frozenset(self._renames.items()))

    def __repr__(self) -> str:
        return f"RenameTable({dict(self._renames)!r})"
