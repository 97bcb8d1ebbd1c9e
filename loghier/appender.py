"""Appenders, which deliver logging events, and the layouts that format them."""

from __future__ import annotations

import threading
import weakref
from abc import ABC, abstractmethod

from .filter import Decision, Filter
from .loggingevent import LoggingEvent

__all__ = [
    "Layout",
    "BasicLayout",
    "Appender",
    "AppenderSkeleton",
    "LayoutAppender",
]

NOTSET = 800

_PRIORITY_NAMES = (
    "FATAL",
    "ALERT",
    "CRIT",
    "ERROR",
    "WARN",
    "NOTICE",
    "INFO",
    "DEBUG",
    "NOTSET",
)


def _priority_name(priority: int) -> str:
    index = (priority + 1) // 100
    if 0 <= index < len(_PRIORITY_NAMES):
        return _PRIORITY_NAMES[index]
    return "UNKNOWN"


class Layout(ABC):
    """Turns a logging event into the text an appender writes."""

    @abstractmethod
    def format(self, event: LoggingEvent) -> str:
        """Return the formatted text for ``event``."""


class BasicLayout(Layout):
    """Fixed layout: ``"seconds priority category ndc: message"`` and a newline."""

    def format(self, event: LoggingEvent) -> str:
        return (
            f"{event.time_stamp.seconds} {_priority_name(event.priority)} "
            f"{event.category_name} {event.ndc}: {event.message}\n"
        )


class Appender(ABC):
    """Delivers logging events somewhere.

    Every live appender is registered under its name; a later appender with
    the same name takes the place of the earlier one in the registry.
    """

    _registry: "weakref.WeakValueDictionary[str, Appender]" = weakref.WeakValueDictionary()
    _registry_lock = threading.RLock()

    def __init__(self, name: str) -> None:
        self._name = name
        Appender._add_appender(self)

    @property
    def name(self) -> str:
        """The name that identifies this appender."""
        return self._name

    @staticmethod
    def _add_appender(appender: "Appender") -> None:
        with Appender._registry_lock:
            Appender._registry[appender.name] = appender

    @staticmethod
    def _remove_appender(appender: "Appender") -> None:
        with Appender._registry_lock:
            if Appender._registry.get(appender.name) is appender:
                del Appender._registry[appender.name]

    @staticmethod
    def _all_appenders() -> list["Appender"]:
        with Appender._registry_lock:
            return list(Appender._registry.values())

    @staticmethod
    def get_appender(name: str) -> "Appender | None":
        """Return the registered appender called ``name``, or ``None``."""
        with Appender._registry_lock:
            return Appender._registry.get(name)

    @staticmethod
    def reopen_all() -> bool:
        """Reopen every appender; True when all of them succeeded."""
        results = [appender.reopen() for appender in Appender._all_appenders()]
        return all(results)

    @staticmethod
    def close_all() -> None:
        """Close every registered appender."""
        for appender in Appender._all_appenders():
            appender.close()

    @abstractmethod
    def do_append(self, event: LoggingEvent) -> None:
        """Log ``event`` in this appender's own way."""

    @abstractmethod
    def reopen(self) -> bool:
        """Reopen the output destination; False if that failed."""

    @abstractmethod
    def close(self) -> None:
        """Release the resources the appender holds."""

    @abstractmethod
    def requires_layout(self) -> bool:
        """True when the appender uses a layout."""

    @abstractmethod
    def set_layout(self, layout: Layout | None) -> None:
        """Set the layout the appender formats events with."""

    @abstractmethod
    def set_threshold(self, priority: int) -> None:
        """Set the lowest priority the appender lets through."""

    @abstractmethod
    def get_threshold(self) -> int:
        """Return the threshold priority."""

    @abstractmethod
    def set_filter(self, filter: Filter | None) -> None:
        """Set the filter chain consulted before appending."""

    @abstractmethod
    def get_filter(self) -> Filter | None:
        """Return the filter chain, or ``None``."""


class AppenderSkeleton(Appender):
    """Appender base that handles the threshold and the filter chain.

    Subclasses implement ``_append`` to do the actual output.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._threshold = NOTSET
        self._filter: Filter | None = None

    def do_append(self, event: LoggingEvent) -> None:
        """Append ``event`` if it passes the threshold and is not denied."""
        if self._threshold != NOTSET and event.priority > self._threshold:
            return
        if self._filter is not None and self._filter.decide(event) == Decision.DENY:
            return
        self._append(event)

    def reopen(self) -> bool:
        return True

    def set_threshold(self, priority: int) -> None:
        self._threshold = priority

    def get_threshold(self) -> int:
        return self._threshold

    def set_filter(self, filter: Filter | None) -> None:
        self._filter = filter

    def get_filter(self) -> Filter | None:
        return self._filter

    @abstractmethod
    def _append(self, event: LoggingEvent) -> None:
        """Write ``event`` out."""


class LayoutAppender(AppenderSkeleton):
    """Base for appenders that format events with a layout.

    The layout defaults to a ``BasicLayout``.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._layout: Layout = BasicLayout()

    def requires_layout(self) -> bool:
        return True

    def set_layout(self, layout: Layout | None = None) -> None:
        """Use ``layout``, or a fresh ``BasicLayout`` when it is ``None``."""
        self._layout = layout if layout is not None else BasicLayout()

    def _get_layout(self) -> Layout:
        return self._layout