"""
Cooperative timer queue for the game timeline.

Nothing runs on its own: the host advances simulated time with `advance(dt)`
and every task that came due runs in due-time order on the caller's thread.
Scheduling returns a `Task` handle that doubles as the cancellation token.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, List, Optional, Tuple


class Task:
    """Handle for a scheduled callback"""

    def __init__(self, func: Callable[[], None], execute_at: float, interval: Optional[float] = None):
        self.func = func
        self.execute_at = execute_at
        self.interval = interval
        self.cancelled = False

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    def cancel(self):
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else f"at={self.execute_at:.3f}"
        return f"<Task {getattr(self.func, '__name__', 'callback')} {state}>"


class TaskScheduler:
    """Runs one-shot and repeating tasks against a simulated clock"""

    def __init__(self):
        self._time = 0.0
        self._counter = itertools.count()
        self._queue: List[Tuple[float, int, Task]] = []

    @property
    def time(self) -> float:
        return self._time

    def schedule(self, delay: float, func: Callable[[], None]) -> Task:
        """Run `func` once, `delay` seconds from now"""
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        task = Task(func, self._time + delay)
        self._push(task)
        return task

    def schedule_interval(self, interval: float, func: Callable[[], None]) -> Task:
        """Run `func` every `interval` seconds, first call one interval from now"""
        if interval <= 0:
            raise ValueError(f"interval must be > 0, got {interval}")
        task = Task(func, self._time + interval, interval)
        self._push(task)
        return task

    def advance(self, dt: float):
        """Move the clock forward and run every task that came due"""
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        now = self._time + dt

        while self._queue and self._queue[0][0] <= now:
            execute_at, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            # Callbacks see the time they were due at
            self._time = execute_at
            task.func()
            if task.repeating and not task.cancelled:
                task.execute_at = execute_at + task.interval
                self._push(task)

        self._time = now

    def cancel_all(self):
        for _, _, task in self._queue:
            task.cancel()
        self._queue.clear()

    def pending(self) -> int:
        return sum(1 for _, _, task in self._queue if not task.cancelled)

    def _push(self, task: Task):
        heapq.heappush(self._queue, (task.execute_at, next(self._counter), task))

    def __repr__(self) -> str:
        return f"<TaskScheduler time={self._time:.2f} tasks={self.pending()}>"
