"""Reference sequential specifications and the interface of consistency testers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any


class HistoryError(ValueError):
    """Raised when a recorded operation history is malformed.

    A malformed history is one where a thread invokes an operation while another
    is still in flight, or returns without a matching invocation.
    """


class SequentialSpec(ABC):
    """An object whose operational semantics serve as a reference.

    Subclasses define how an operation changes the object and what it returns.
    """

    @abstractmethod
    def invoke(self, op: Any) -> Any:
        """Apply ``op`` to this object and return its result."""

    def is_valid_step(self, op: Any, ret: Any) -> bool:
        """Apply ``op`` and report whether it produces ``ret``."""
        return self.invoke(op) == ret

    def is_valid_history(self, history: Iterable[tuple[Any, Any]]) -> bool:
        """Report whether every ``(op, ret)`` pair in order is a valid step.

        The object is mutated as the history is replayed, and checking stops
        at the first invalid step.
        """
        return all(self.is_valid_step(op, ret) for op, ret in history)


class ConsistencyTester(ABC):
    """Records invocations and returns and checks them against a reference spec.

    Recording methods return the tester so that calls can be chained, and raise
    :class:`HistoryError` when the history itself is malformed (as opposed to
    merely inconsistent).
    """

    @abstractmethod
    def on_invoke(self, thread_id: Any, op: Any) -> ConsistencyTester:
        """Record that ``thread_id`` invoked ``op``."""

    @abstractmethod
    def on_return(self, thread_id: Any, ret: Any) -> ConsistencyTester:
        """Record that the operation in flight for ``thread_id`` returned ``ret``."""

    @abstractmethod
    def is_consistent(self) -> bool:
        """Report whether the recorded history satisfies the consistency model."""

    def on_invret(self, thread_id: Any, op: Any, ret: Any) -> ConsistencyTester:
        """Record an invocation of ``op`` immediately followed by its return ``ret``."""
        return self.on_invoke(thread_id, op).on_return(thread_id, ret)