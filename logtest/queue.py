"""
The process-wide capture queue.

Every installed sink appends to, and every :class:`~logtest.Logger` handle
drains, the one :class:`CaptureQueue` returned by :func:`get_queue`.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from logtest.record import Record


class CaptureQueue:
    """Unbounded FIFO of :class:`~logtest.record.Record` objects.

    Each operation holds the internal lock only while it touches the deque,
    so records appended from several threads are ordered by the moment they
    acquire it.
    """

    def __init__(self) -> None:
        self._records: deque[Record] = deque()
        self._lock = threading.Lock()

    def append(self, record: Record) -> None:
        with self._lock:
            self._records.append(record)

    def popleft(self) -> Record | None:
        with self._lock:
            if not self._records:
                return None
            return self._records.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} records={len(self)}>"


_queue: CaptureQueue | None = None
_queue_lock = threading.Lock()


def get_queue() -> CaptureQueue:
    """Return the process-wide queue, creating it on first use."""
    global _queue  # noqa: PLW0603
    if _queue is None:
        with _queue_lock:
            if _queue is None:
                _queue = CaptureQueue()
    return _queue
