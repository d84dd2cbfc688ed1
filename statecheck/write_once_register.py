"""A write-once register used as a reference specification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from statecheck.spec import SequentialSpec


@dataclass(frozen=True)
class WOWrite:
    """Attempt to write a value; only the first distinct write succeeds."""

    value: Any

    def __repr__(self) -> str:
        return f"WOWrite({self.value!r})"


@dataclass(frozen=True)
class WORead:
    """Read the register's value, ``None`` if never written."""

    def __repr__(self) -> str:
        return "WORead"


@dataclass(frozen=True)
class WOWriteOk:
    """A write that took effect or matched the stored value."""

    def __repr__(self) -> str:
        return "WOWriteOk"


@dataclass(frozen=True)
class WOWriteFail:
    """A write rejected because a different value was already stored."""

    def __repr__(self) -> str:
        return "WOWriteFail"


@dataclass(frozen=True)
class WOReadOk:
    """Result of a :class:`WORead`."""

    value: Any = None

    def __repr__(self) -> str:
        return f"WOReadOk({self.value!r})"


@dataclass
class WORegister(SequentialSpec):
    """A register that can be written once; ``None`` means unwritten."""

    value: Any = None

    def invoke(self, op: WOWrite | WORead) -> WOWriteOk | WOWriteFail | WOReadOk:
        match op:
            case WOWrite(value):
                if self.value is None or self.value == value:
                    self.value = value
                    return WOWriteOk()
                return WOWriteFail()
            case WORead():
                return WOReadOk(self.value)
        raise TypeError(f"unsupported write-once register operation: {op!r}")

    def is_valid_step(
        self, op: WOWrite | WORead, ret: WOWriteOk | WOWriteFail | WOReadOk
    ) -> bool:
        match op, ret:
            case WOWrite(value), WOWriteOk():
                if self.value is None:
                    self.value = value
                    return True
                return self.value == value
            case WOWrite(value), WOWriteFail():
                return self.value is not None and self.value != value
            case WORead(), WOReadOk(value):
                return self.value == value
        return False