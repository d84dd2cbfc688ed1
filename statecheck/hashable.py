"""Hashable set and mapping types for use inside hashed model states.

Python's built-in ``set`` and ``dict`` are unhashable, so they cannot appear
in states that are themselves hashed or stored in sets. These subclasses hash
by sorting the hashes of their entries, so the result does not depend on
insertion order.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _combined_hash(entry_hashes: Iterable[int]) -> int:
    return hash(tuple(sorted(entry_hashes)))


class HashableSet(set):
    """A mutable set that is hashable.

    Entries are hashed individually, the hashes are sorted and then combined,
    so two equal sets always hash the same. Ordering compares hashes, which
    gives an arbitrary but consistent total order across instances.

    Mutating a set while it is stored in another hashed collection breaks
    that collection, just as it would for any other hashable object.
    """

    def __hash__(self) -> int:
        return _combined_hash(hash(value) for value in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (set, frozenset)):
            return NotImplemented
        return set.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HashableSet):
            return NotImplemented
        return hash(self) < hash(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HashableSet):
            return NotImplemented
        return hash(self) <= hash(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HashableSet):
            return NotImplemented
        return hash(self) > hash(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HashableSet):
            return NotImplemented
        return hash(self) >= hash(other)

    def __repr__(self) -> str:
        return "{" + ", ".join(repr(value) for value in self) + "}"

    def copy(self) -> HashableSet:
        """Return a shallow copy of the same type."""
        return type(self)(self)


class HashableMap(dict):
    """A mutable mapping that is hashable.

    Each key-value pair is hashed together, the hashes are sorted and then
    combined, so two equal maps always hash the same. Values must therefore
    be hashable too. Ordering compares hashes, which gives an arbitrary but
    consistent total order across instances.
    """

    def __hash__(self) -> int:
        return _combined_hash(hash((key, value)) for key, value in self.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, dict):
            return NotImplemented
        return dict.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HashableMap):
            return NotImplemented
        return hash(self) < hash(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HashableMap):
            return NotImplemented
        return hash(self) <= hash(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HashableMap):
            return NotImplemented
        return hash(self) > hash(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HashableMap):
            return NotImplemented
        return hash(self) >= hash(other)

    def __repr__(self) -> str:
        return dict.__repr__(self)

    def copy(self) -> HashableMap:
        """Return a shallow copy of the same type."""
        return type(self)(self)

    @classmethod
    def fromkeys(cls, iterable: Iterable[Any], value: Any = None) -> HashableMap:
        return cls((key, value) for key in iterable)