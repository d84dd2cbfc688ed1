"""A map whose keys are exactly the natural numbers ``0..len``."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any


def _index_of(key: Any) -> int:
    index = operator.index(key)
    if index < 0:
        raise IndexError(f"Negative key index. index={index}")
    return index


class DenseNatMap:
    """A map in which each key corresponds to a unique index in ``range(len(self))``.

    It behaves like a list of values, but is indexed by keys of a chosen type
    (anything usable as an index, i.e. implementing ``__index__``). Keys are
    produced by calling ``key_type`` with the index.

    Build one from values in key order, from ``(key, value)`` pairs with
    :meth:`from_pairs`, or by inserting pairs in order with :meth:`insert`.
    """

    __slots__ = ("_values", "_key_type")

    def __init__(
        self, values: Iterable[Any] = (), key_type: Callable[[int], Any] = int
    ) -> None:
        self._values = list(values)
        self._key_type = key_type

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Any, Any]]) -> DenseNatMap:
        """Build a map from ``(key, value)`` pairs in any order.

        The key indices must be exactly ``0..n`` with no gaps or duplicates,
        otherwise :class:`ValueError` is raised. The key type is taken from
        the first key.
        """
        pairs = list(pairs)
        key_type: Callable[[int], Any] = type(pairs[0][0]) if pairs else int
        indexed = sorted(
            ((_index_of(key), value) for key, value in pairs),
            key=operator.itemgetter(0),
        )
        for expected, (index, _) in enumerate(indexed):
            if index != expected:
                raise ValueError(
                    f"Invalid key at index. index={index}, expected_index={expected}"
                )
        return cls((value for _, value in indexed), key_type=key_type)

    def get(self, key: Any) -> Any:
        """Return the value for ``key``, or ``None`` if the key is out of range."""
        index = operator.index(key)
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def insert(self, key: Any, value: Any) -> Any:
        """Set ``key`` to ``value`` and return the previous value, or ``None``.

        The key must either already be present or be the next index
        (``len(self)``); otherwise :class:`IndexError` is raised.
        """
        index = _index_of(key)
        length = len(self._values)
        if index > length:
            raise IndexError(f"Out of bounds. index={index}, len={length}")
        if index == length:
            self._values.append(value)
            return None
        previous = self._values[index]
        self._values[index] = value
        return previous

    def keys(self) -> Iterator[Any]:
        """Iterate over the keys in index order."""
        return map(self._key_type, range(len(self._values)))

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over ``(key, value)`` pairs in index order."""
        return ((self._key_type(i), v) for i, v in enumerate(self._values))

    def values(self) -> Iterator[Any]:
        """Iterate over the values in index order."""
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, key: Any) -> Any:
        index = _index_of(key)
        try:
            return self._values[index]
        except IndexError:
            raise IndexError(
                f"Out of bounds. index={index}, len={len(self._values)}"
            ) from None

    def __setitem__(self, key: Any, value: Any) -> None:
        index = _index_of(key)
        if index >= len(self._values):
            raise IndexError(f"Out of bounds. index={index}, len={len(self._values)}")
        self._values[index] = value

    def __contains__(self, key: object) -> bool:
        try:
            index = operator.index(key)  # type: ignore[arg-type]
        except TypeError:
            return False
        return 0 <= index < len(self._values)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the keys in index order."""
        return self.keys()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseNatMap):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(tuple(self._values))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"