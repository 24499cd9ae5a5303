"""WaitingQueueSet — one FIFO of issue ids per category."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from support_desk.domain.value_objects.enums import IssueType


class WaitingQueueSet:
    """Per-category FIFO queues of issue ids awaiting a free agent.

    Queues are created lazily on first enqueue. Not thread-safe on its own:
    the dispatcher only touches it while holding its lock.
    """

    def __init__(self) -> None:
        self._queues: dict[IssueType, deque[int]] = {}

    def enqueue(self, category: IssueType, issue_id: int) -> None:
        self._queues.setdefault(category, deque()).append(issue_id)

    def pop(self, category: IssueType) -> int | None:
        """Pop the head of one category's queue, or None if it is empty."""
        queue = self._queues.get(category)
        if not queue:
            return None
        return queue.popleft()

    def dequeue_eligible(self, categories: Iterable[IssueType]) -> int | None:
        """Pop the head of the first non-empty queue, scanning in the given order.

        Stops at the first non-empty queue whatever its head holds. Draining
        uses pop() per category instead, so a stale head moves the scan on to
        the next category rather than back to the first one.
        """
        for category in categories:
            issue_id = self.pop(category)
            if issue_id is not None:
                return issue_id
        return None

    def remove(self, issue_id: int) -> bool:
        """Drop an id from whichever queue holds it. Returns True if found."""
        for queue in self._queues.values():
            if issue_id in queue:
                queue.remove(issue_id)
                return True
        return False

    def depth(self, category: IssueType) -> int:
        return len(self._queues.get(category, ()))

    def snapshot(self) -> dict[IssueType, list[int]]:
        """Copy of every non-empty queue, head first."""
        return {cat: list(q) for cat, q in self._queues.items() if q}

    def __contains__(self, issue_id: object) -> bool:
        return any(issue_id in q for q in self._queues.values())

    def __len__(self) -> int:
        return sum(len(q) for q in self._queues.values())
