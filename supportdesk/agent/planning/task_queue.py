"""Max-priority task queue with FIFO tie-break."""

import heapq
import itertools
import threading

from supportdesk.agent.planning.models import Task
from supportdesk.observability.metrics import PENDING_TASKS


class TaskQueue:
    """Priority queue of Tasks, highest priority first.

    Tasks of equal priority come out in insertion order. Every operation
    takes the queue's own lock, which is independent of any context lock.

    With metrics enabled the queue contributes to the process-wide
    ``PENDING_TASKS`` gauge, which sums pending tasks over all queues.
    """

    def __init__(self, metrics_enabled: bool = True) -> None:
        self._heap: list[tuple[int, int, Task]] = []
        self._sequence = itertools.count()
        self._lock = threading.Lock()
        self._metrics_enabled = metrics_enabled

    def add_task(self, task_id: str, priority: int, description: str = "") -> Task:
        task = Task(task_id=task_id, priority=priority, description=description)
        with self._lock:
            # heapq is a min-heap: negate priority, break ties by sequence
            heapq.heappush(self._heap, (-priority, next(self._sequence), task))
        if self._metrics_enabled:
            PENDING_TASKS.inc()
        return task

    def get_next_task(self) -> Task | None:
        """Remove and return the highest-priority task, or None when empty."""
        with self._lock:
            if not self._heap:
                return None
            _, _, task = heapq.heappop(self._heap)
        if self._metrics_enabled:
            PENDING_TASKS.dec()
        return task

    def has_pending_tasks(self) -> bool:
        return bool(self._heap)

    def pending_count(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
