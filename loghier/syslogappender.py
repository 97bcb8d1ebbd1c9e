"""An appender that sends formatted events to the system log."""

from __future__ import annotations

try:
    import syslog as _syslog
except ImportError:  # not available on every platform
    _syslog = None

from .appender import LayoutAppender
from .factoryparams import FactoryParams
from .loggingevent import LoggingEvent

__all__ = ["to_syslog_priority", "SyslogAppender", "create_syslog_appender"]

LOG_EMERG = 0
LOG_ALERT = 1
LOG_CRIT = 2
LOG_ERR = 3
LOG_WARNING = 4
LOG_NOTICE = 5
LOG_INFO = 6
LOG_DEBUG = 7

_PRIORITIES = (
    LOG_EMERG,
    LOG_ALERT,
    LOG_CRIT,
    LOG_ERR,
    LOG_WARNING,
    LOG_NOTICE,
    LOG_INFO,
    LOG_DEBUG,
)


def to_syslog_priority(priority: int) -> int:
    """Map a logging priority onto a syslog priority level."""
    index = (priority + 1) // 100
    if index < 0:
        return LOG_EMERG
    if index > 7:
        return LOG_DEBUG
    return _PRIORITIES[index]


def _backend():
    if _syslog is None:
        raise OSError("syslog is not available on this platform")
    return _syslog


class SyslogAppender(LayoutAppender):
    """Writes each formatted event with ``syslog`` under ``syslog_name``."""

    def __init__(self, name: str, syslog_name: str, facility: int = 0) -> None:
        super().__init__(name)
        self.syslog_name = syslog_name
        self.facility = facility
        self.open()

    def open(self) -> None:
        """Open the connection to the system logger."""
        _backend().openlog(self.syslog_name, 0, self.facility)

    def close(self) -> None:
        """Close the connection to the system logger."""
        _backend().closelog()

    def reopen(self) -> bool:
        self.close()
        self.open()
        return True

    def _append(self, event: LoggingEvent) -> None:
        message = self._get_layout().format(event)
        priority = to_syslog_priority(event.priority)
        _backend().syslog(priority | self.facility, message)


def create_syslog_appender(params: FactoryParams) -> SyslogAppender:
    """Build a ``SyslogAppender`` from ``name``, ``syslog_name`` and ``facility``."""
    validator = params.get_for("syslog appender")
    name = validator.required("name")
    syslog_name = validator.required("syslog_name")
    facility = validator.optional("facility", 0, int)
    return SyslogAppender(name, syslog_name, facility)