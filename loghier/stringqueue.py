"""An appender that keeps formatted messages in a queue in memory."""

from __future__ import annotations

from collections import deque

from .appender import LayoutAppender
from .loggingevent import LoggingEvent

__all__ = ["StringQueueAppender"]


class StringQueueAppender(LayoutAppender):
    """Stores every formatted event in a first-in, first-out queue."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._queue: deque[str] = deque()

    @property
    def queue(self) -> deque[str]:
        """The queue of formatted messages, oldest first."""
        return self._queue

    def close(self) -> None:
        """Nothing to release."""

    def reopen(self) -> bool:
        return True

    def queue_size(self) -> int:
        """Return the number of queued messages."""
        return len(self._queue)

    def pop_message(self) -> str:
        """Remove and return the oldest message, or ``""`` if the queue is empty."""
        return self._queue.popleft() if self._queue else ""

    def _append(self, event: LoggingEvent) -> None:
        self._queue.append(self._get_layout().format(event))