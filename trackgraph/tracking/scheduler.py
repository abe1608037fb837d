"""End-of-cycle job scheduling.

Several inputs of a tracked graphic can change as part of one logical
update (hover ends while the visible window shifts, selection toggles
with a mode change). Work scheduled with ``schedule_once`` during a cycle
runs a single time when the outermost cycle ends, using whatever state is
current at that moment.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Tuple


class UpdateScheduler:
    """Collects jobs during an update cycle and flushes them at its end."""

    def __init__(self):
        self._depth = 0
        self._flushing = False
        # Insertion-ordered; keyed so a job is queued at most once per cycle
        self._pending: Dict[Tuple[int, str], Callable[[], Any]] = {}

    @property
    def in_cycle(self) -> bool:
        """True while an update cycle is open or being flushed."""
        return self._depth > 0 or self._flushing

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @contextmanager
    def cycle(self) -> Iterator["UpdateScheduler"]:
        """Open an update cycle. Nested cycles flush with the outermost one."""
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1
            if self._depth == 0:
                self.flush()

    def schedule_once(self, target: Any, method_name: str) -> None:
        """Queue ``target.method_name()`` to run at the end of the cycle.

        Scheduling the same target/method again before the flush is a
        no-op. Outside any cycle the job runs immediately.
        """
        key = (id(target), method_name)
        if key not in self._pending:
            self._pending[key] = getattr(target, method_name)
        if not self.in_cycle:
            self.flush()

    def cancel(self, target: Any, method_name: str) -> bool:
        """Drop a pending job. Returns True if one was queued."""
        return self._pending.pop((id(target), method_name), None) is not None

    def flush(self) -> None:
        """Run pending jobs, including ones queued while flushing."""
        if self._flushing:
            return
        self._flushing = True
        try:
            while self._pending:
                key = next(iter(self._pending))
                job = self._pending.pop(key)
                job()
        finally:
            self._flushing = False
