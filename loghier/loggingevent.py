"""The record passed from categories to appenders, layouts and filters."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .timestamp import TimeStamp

__all__ = ["LoggingEvent"]


def _current_thread_name() -> str:
    return str(threading.get_ident())


@dataclass(frozen=True)
class LoggingEvent:
    """One logging request: category, message, context and priority.

    The thread name and time stamp are filled in when the event is made.
    """

    category_name: str
    message: str
    ndc: str
    priority: int
    thread_name: str = field(default_factory=_current_thread_name)
    time_stamp: TimeStamp = field(default_factory=TimeStamp.now)