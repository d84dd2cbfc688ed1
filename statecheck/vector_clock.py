"""Vector clocks giving a partial causal order on distributed events."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest


class VectorClock:
    """An immutable vector clock.

    Missing trailing components count as zero, so ``VectorClock([1])`` equals
    ``VectorClock([1, 0])`` and both hash the same.
    """

    __slots__ = ("_components",)

    def __init__(self, components: Iterable[int] = ()) -> None:
        values = tuple(int(c) for c in components)
        if any(c < 0 for c in values):
            raise ValueError(f"Clock components must be non-negative: {values!r}")
        self._components = values

    @property
    def components(self) -> tuple[int, ...]:
        """The stored components, including any trailing zeros."""
        return self._components

    @staticmethod
    def merge_max(c1: VectorClock, c2: VectorClock) -> VectorClock:
        """Return a clock taking the maximum of each pair of components."""
        return VectorClock(
            max(a, b)
            for a, b in zip_longest(c1._components, c2._components, fillvalue=0)
        )

    def incremented(self, index: int) -> VectorClock:
        """Return a copy with the component at ``index`` incremented."""
        if index < 0:
            raise ValueError(f"Clock index must be non-negative: {index}")
        values = list(self._components)
        if index >= len(values):
            values.extend([0] * (index + 1 - len(values)))
        values[index] += 1
        return VectorClock(values)

    def partial_cmp(self, other: VectorClock) -> int | None:
        """Compare causally: ``-1`` before, ``0`` equal, ``1`` after, ``None`` concurrent."""
        expected = 0
        for a, b in zip_longest(self._components, other._components, fillvalue=0):
            ordering = (a > b) - (a < b)
            if expected == 0:
                expected = ordering
            elif ordering != expected and ordering != 0:
                return None
        return expected

    def _trimmed(self) -> tuple[int, ...]:
        values = self._components
        end = len(values)
        while end and values[end - 1] == 0:
            end -= 1
        return values[:end]

    def __str__(self) -> str:
        return "<" + "".join(f"{c}, " for c in self._components) + "...>"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._components)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self._trimmed() == other._trimmed()

    def __hash__(self) -> int:
        return hash(self._trimmed())

    def __lt__(self, other: VectorClock) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.partial_cmp(other) == -1

    def __le__(self, other: VectorClock) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.partial_cmp(other) in (-1, 0)

    def __gt__(self, other: VectorClock) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.partial_cmp(other) == 1

    def __ge__(self, other: VectorClock) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.partial_cmp(other) in (1, 0)