"""Checking recorded concurrent histories for sequential consistency."""

from __future__ import annotations

import copy
from collections.abc import Hashable
from typing import Any

from statecheck.spec import ConsistencyTester, HistoryError, SequentialSpec


class SequentialConsistencyTester(ConsistencyTester):
    """Validates a concurrent history against a :class:`SequentialSpec`.

    Sequential consistency requires that operations be applied atomically and
    that operations within a thread keep their order. Unlike linearizability,
    no order is imposed between operations of different threads, even when
    they did not overlap in time.

    Thread identifiers must be hashable and mutually comparable; threads are
    explored in ascending order of identifier.
    """

    def __init__(self, init_ref_obj: SequentialSpec) -> None:
        self._init_ref_obj = init_ref_obj
        self._history_by_thread: dict[Hashable, list[tuple[Any, Any]]] = {}
        self._in_flight_by_thread: dict[Hashable, Any] = {}
        self._is_valid_history = True

    def __len__(self) -> int:
        """Number of operations completed or in flight across all threads."""
        return len(self._in_flight_by_thread) + sum(
            len(history) for history in self._history_by_thread.values()
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(init_ref_obj={self._init_ref_obj!r}, "
            f"history_by_thread={self._sorted_history()!r}, "
            f"in_flight_by_thread={dict(sorted(self._in_flight_by_thread.items()))!r}, "
            f"is_valid_history={self._is_valid_history!r})"
        )

    def _sorted_history(self) -> dict[Hashable, list[tuple[Any, Any]]]:
        return dict(sorted(self._history_by_thread.items()))

    def _ensure_valid(self) -> None:
        if not self._is_valid_history:
            raise HistoryError("Earlier history was invalid.")

    def on_invoke(self, thread_id: Hashable, op: Any) -> SequentialConsistencyTester:
        """Record that ``thread_id`` invoked ``op``.

        Raises :class:`HistoryError` if the thread already has an operation in
        flight; the tester then rejects all further recording.
        """
        self._ensure_valid()
        if thread_id in self._in_flight_by_thread:
            self._is_valid_history = False
            raise HistoryError(
                "Thread already has an operation in flight. "
                f"thread_id={thread_id!r}, "
                f"op={self._in_flight_by_thread[thread_id]!r}, "
                f"history_by_thread={self._sorted_history()!r}"
            )
        self._in_flight_by_thread[thread_id] = op
        self._history_by_thread.setdefault(thread_id, [])
        return self

    def on_return(self, thread_id: Hashable, ret: Any) -> SequentialConsistencyTester:
        """Record that the operation in flight for ``thread_id`` returned ``ret``.

        Raises :class:`HistoryError` if no operation is in flight for the
        thread; the tester then rejects all further recording.
        """
        self._ensure_valid()
        history = self._history_by_thread.setdefault(thread_id, [])
        try:
            op = self._in_flight_by_thread.pop(thread_id)
        except KeyError:
            self._is_valid_history = False
            raise HistoryError(
                "There is no in-flight invocation for this thread ID. "
                f"thread_id={thread_id!r}, unexpected_return={ret!r}, "
                f"history={history!r}"
            ) from None
        history.append((op, ret))
        return self

    def is_consistent(self) -> bool:
        """Report whether the recorded history is sequentially consistent."""
        return self.serialized_history() is not None

    def serialized_history(self) -> list[tuple[Any, Any]] | None:
        """Find a total order of the recorded operations valid for the spec.

        Completed operations must all appear; in-flight operations may be
        included with whatever result the spec gives them. Returns ``None`` if
        the history is invalid or no such order exists.
        """
        if not self._is_valid_history:
            return None
        positions = {thread_id: 0 for thread_id in self._history_by_thread}
        return self._serialize(
            [],
            self._init_ref_obj,
            positions,
            frozenset(self._in_flight_by_thread),
        )

    def _serialize(
        self,
        valid_history: list[tuple[Any, Any]],
        ref_obj: SequentialSpec,
        positions: dict[Hashable, int],
        in_flight: frozenset,
    ) -> list[tuple[Any, Any]] | None:
        if all(
            positions[thread_id] >= len(history)
            for thread_id, history in self._history_by_thread.items()
        ):
            return valid_history

        for thread_id in sorted(positions):
            history = self._history_by_thread[thread_id]
            position = positions[thread_id]
            next_positions = positions
            next_in_flight = in_flight
            next_obj = copy.deepcopy(ref_obj)
            if position >= len(history):
                # No completed operations left; perhaps one still in flight.
                if thread_id not in in_flight:
                    continue
                op = self._in_flight_by_thread[thread_id]
                ret = next_obj.invoke(op)
                next_in_flight = in_flight - {thread_id}
            else:
                op, ret = history[position]
                if not next_obj.is_valid_step(op, ret):
                    continue
                next_positions = {**positions, thread_id: position + 1}
            result = self._serialize(
                [*valid_history, (op, ret)], next_obj, next_positions, next_in_flight
            )
            if result is not None:
                return result
        return None