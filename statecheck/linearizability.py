"""Checking recorded concurrent histories for linearizability."""

from __future__ import annotations

import copy
from collections.abc import Hashable
from typing import Any

from statecheck.spec import ConsistencyTester, HistoryError, SequentialSpec

# Index of the last operation completed by each other thread when an
# operation was invoked.
LastCompleted = dict[Hashable, int]


class LinearizabilityTester(ConsistencyTester):
    """Validates a concurrent history against a :class:`SequentialSpec`.

    Linearizability requires that operations be applied atomically and that
    non-overlapping operations keep their real-time order, even across threads.
    To enforce the latter, each invocation records the index of the last
    operation every other thread had completed at that moment, and no order is
    accepted that places the new operation before any of those.

    Thread identifiers must be hashable and mutually comparable; threads are
    explored in ascending order of identifier.
    """

    def __init__(self, init_ref_obj: SequentialSpec) -> None:
        self._init_ref_obj = init_ref_obj
        self._history_by_thread: dict[
            Hashable, list[tuple[LastCompleted, Any, Any]]
        ] = {}
        self._in_flight_by_thread: dict[Hashable, tuple[LastCompleted, Any]] = {}
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

    def _sorted_history(self) -> dict[Hashable, list[tuple[LastCompleted, Any, Any]]]:
        return dict(sorted(self._history_by_thread.items()))

    def _ensure_valid(self) -> None:
        if not self._is_valid_history:
            raise HistoryError("Earlier history was invalid.")

    def on_invoke(self, thread_id: Hashable, op: Any) -> LinearizabilityTester:
        """Record that ``thread_id`` invoked ``op``.

        Raises :class:`HistoryError` if the thread already has an operation in
        flight; the tester then rejects all further recording.
        """
        self._ensure_valid()
        if thread_id in self._in_flight_by_thread:
            self._is_valid_history = False
            _, in_flight_op = self._in_flight_by_thread[thread_id]
            raise HistoryError(
                "Thread already has an operation in flight. "
                f"thread_id={thread_id!r}, "
                f"op={in_flight_op!r}, "
                f"history_by_thread={self._sorted_history()!r}"
            )
        last_completed = {
            peer_id: len(history) - 1
            for peer_id, history in sorted(self._history_by_thread.items())
            if peer_id != thread_id and history
        }
        self._in_flight_by_thread[thread_id] = (last_completed, op)
        self._history_by_thread.setdefault(thread_id, [])
        return self

    def on_return(self, thread_id: Hashable, ret: Any) -> LinearizabilityTester:
        """Record that the operation in flight for ``thread_id`` returned ``ret``.

        Raises :class:`HistoryError` if no operation is in flight for the
        thread; the tester then rejects all further recording.
        """
        self._ensure_valid()
        history = self._history_by_thread.setdefault(thread_id, [])
        try:
            last_completed, op = self._in_flight_by_thread.pop(thread_id)
        except KeyError:
            self._is_valid_history = False
            raise HistoryError(
                "There is no in-flight invocation for this thread ID. "
                f"thread_id={thread_id!r}, unexpected_return={ret!r}, "
                f"history={history!r}"
            ) from None
        history.append((last_completed, op, ret))
        return self

    def is_consistent(self) -> bool:
        """Report whether the recorded history is linearizable."""
        return self.serialized_history() is not None

    def serialized_history(self) -> list[tuple[Any, Any]] | None:
        """Find a total order of the recorded operations valid for the spec.

        Completed operations must all appear and respect real-time order;
        in-flight operations may be included with whatever result the spec
        gives them. Returns ``None`` if the history is invalid or no such
        order exists.
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

    def _violates_real_time(
        self, last_completed: LastCompleted, positions: dict[Hashable, int]
    ) -> bool:
        """Whether some prerequisite peer operation has not been placed yet."""
        for peer_id, min_peer_index in last_completed.items():
            position = positions.get(peer_id)
            if position is None:
                continue
            if position < len(self._history_by_thread[peer_id]) and position <= min_peer_index:
                return True
        return False

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
            if position >= len(history):
                # No completed operations left; perhaps one still in flight.
                if thread_id not in in_flight:
                    continue
                last_completed, op = self._in_flight_by_thread[thread_id]
                if self._violates_real_time(last_completed, positions):
                    continue
                next_obj = copy.deepcopy(ref_obj)
                ret = next_obj.invoke(op)
                next_in_flight = in_flight - {thread_id}
            else:
                last_completed, op, ret = history[position]
                next_positions = {**positions, thread_id: position + 1}
                if self._violates_real_time(last_completed, next_positions):
                    continue
                next_obj = copy.deepcopy(ref_obj)
                if not next_obj.is_valid_step(op, ret):
                    continue
            result = self._serialize(
                [*valid_history, (op, ret)], next_obj, next_positions, next_in_flight
            )
            if result is not None:
                return result
        return None