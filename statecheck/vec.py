"""A stack-like vector used as a reference specification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from statecheck.spec import SequentialSpec


@dataclass(frozen=True)
class Push:
    """Append a value."""

    value: Any

    def __repr__(self) -> str:
        return f"Push({self.value!r})"


@dataclass(frozen=True)
class Pop:
    """Remove and return the last value, if any."""

    def __repr__(self) -> str:
        return "Pop"


@dataclass(frozen=True)
class Len:
    """Query the number of values."""

    def __repr__(self) -> str:
        return "Len"


@dataclass(frozen=True)
class PushOk:
    """Result of a :class:`Push`."""

    def __repr__(self) -> str:
        return "PushOk"


@dataclass(frozen=True)
class PopOk:
    """Result of a :class:`Pop`; ``value`` is ``None`` when the vector was empty."""

    value: Any = None

    def __repr__(self) -> str:
        return f"PopOk({self.value!r})"


@dataclass(frozen=True)
class LenOk:
    """Result of a :class:`Len`."""

    length: int

    def __repr__(self) -> str:
        return f"LenOk({self.length!r})"


@dataclass
class VecSpec(SequentialSpec):
    """A growable sequence supporting push, pop and length queries."""

    items: list = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def _pop(self) -> Any:
        return self.items.pop() if self.items else None

    def invoke(self, op: Push | Pop | Len) -> PushOk | PopOk | LenOk:
        match op:
            case Push(value):
                self.items.append(value)
                return PushOk()
            case Pop():
                return PopOk(self._pop())
            case Len():
                return LenOk(len(self.items))
        raise TypeError(f"unsupported vector operation: {op!r}")

    def is_valid_step(self, op: Push | Pop | Len, ret: PushOk | PopOk | LenOk) -> bool:
        match op, ret:
            case Push(value), PushOk():
                self.items.append(value)
                return True
            case Pop(), PopOk(value):
                return self._pop() == value
            case Len(), LenOk(length):
                return len(self.items) == length
        return False