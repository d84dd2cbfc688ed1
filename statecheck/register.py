"""A read/write register used as a reference specification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from statecheck.spec import SequentialSpec


@dataclass(frozen=True)
class Write:
    """Overwrite the register's value."""

    value: Any

    def __repr__(self) -> str:
        return f"Write({self.value!r})"


@dataclass(frozen=True)
class Read:
    """Read the register's value."""

    def __repr__(self) -> str:
        return "Read"


@dataclass(frozen=True)
class WriteOk:
    """Result of a :class:`Write`."""

    def __repr__(self) -> str:
        return "WriteOk"


@dataclass(frozen=True)
class ReadOk:
    """Result of a :class:`Read`, carrying the value read."""

    value: Any

    def __repr__(self) -> str:
        return f"ReadOk({self.value!r})"


@dataclass
class Register(SequentialSpec):
    """A register holding a single value."""

    value: Any = None

    def invoke(self, op: Write | Read) -> WriteOk | ReadOk:
        match op:
            case Write(value):
                self.value = value
                return WriteOk()
            case Read():
                return ReadOk(self.value)
        raise TypeError(f"unsupported register operation: {op!r}")

    def is_valid_step(self, op: Write | Read, ret: WriteOk | ReadOk) -> bool:
        match op, ret:
            case Write(value), WriteOk():
                self.value = value
                return True
            case Read(), ReadOk(value):
                return self.value == value
        return False