"""
Purpose: Holds ride requests waiting for a driver.
What it does:
- Owns the in-memory pending list (strict FIFO, never reordered)

Provides operations:
   - enqueue(request)
   - dequeue()
   - size() / is_empty()
   - stats()

No priority, no cancellation, no peeking past the front.

Rule: Queue owns ordering only, the dispatch engine owns matching.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Deque, Iterator, List

from common.errors import QueueEmpty
from .models import RideRequest


@dataclass
class QueueStats:
    pending: int
    enqueued_total: int
    dequeued_total: int
    now: datetime = field(default_factory=datetime.now)


@dataclass
class RequestQueue:
    """
    In-memory FIFO of pending ride requests.
    """
    _pending: Deque[RideRequest] = field(default_factory=deque)

    #counters for stats
    _enqueued_total: int = 0
    _dequeued_total: int = 0

    # --- Public API ---

    def enqueue(self, request: RideRequest) -> None:
        """
        Add a request at the back of the queue.
        """
        self._pending.append(request)
        self._enqueued_total += 1

    def dequeue(self) -> RideRequest:
        """
        Remove and return the oldest request.
        """
        if not self._pending:
            raise QueueEmpty("No pending ride requests")
        self._dequeued_total += 1
        return self._pending.popleft()

    def size(self) -> int:
        return len(self._pending)

    def is_empty(self) -> bool:
        return not self._pending

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[RideRequest]:
        # snapshot, oldest first; iterating never consumes
        return iter(list(self._pending))

    def pending(self) -> List[RideRequest]:
        return list(self._pending)

    def stats(self) -> QueueStats:
        return QueueStats(
            pending=len(self._pending),
            enqueued_total=self._enqueued_total,
            dequeued_total=self._dequeued_total,
            now=datetime.now(),
        )
