"""Chained filters that accept, deny or pass on logging events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

from .loggingevent import LoggingEvent

__all__ = ["Decision", "Filter"]


class Decision(IntEnum):
    """The verdict of a filter on one event."""

    DENY = -1
    NEUTRAL = 0
    ACCEPT = 1


class Filter(ABC):
    """A link in a filter chain.

    ``decide`` consults this filter and then, while the answer is neutral,
    the filters chained after it. Subclasses implement ``_decide``.
    """

    def __init__(self) -> None:
        self._chained_filter: Filter | None = None

    def set_chained_filter(self, filter: "Filter | None") -> None:
        """Set the filter that follows this one."""
        self._chained_filter = filter

    def get_chained_filter(self) -> "Filter | None":
        """Return the next filter, or ``None`` at the end of the chain."""
        return self._chained_filter

    def get_end_of_chain(self) -> "Filter":
        """Return the last filter of the chain that starts here."""
        end = self
        while end._chained_filter is not None:
            end = end._chained_filter
        return end

    def append_chained_filter(self, filter: "Filter") -> None:
        """Add ``filter`` to the end of the chain."""
        self.get_end_of_chain().set_chained_filter(filter)

    def decide(self, event: LoggingEvent) -> Decision:
        """Walk the chain until a filter gives a non-neutral decision."""
        current: Filter | None = self
        decision = Decision.NEUTRAL
        while current is not None:
            decision = Decision(current._decide(event))
            if decision != Decision.NEUTRAL:
                break
            current = current._chained_filter
        return decision

    @abstractmethod
    def _decide(self, event: LoggingEvent) -> Decision:
        """Return this filter's own decision on ``event``."""