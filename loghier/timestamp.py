"""Wall-clock time stamps with microsecond resolution."""

from __future__ import annotations

import time
from dataclasses import dataclass

__all__ = ["TimeStamp", "start_stamp"]


@dataclass(frozen=True, order=True)
class TimeStamp:
    """Seconds and microseconds elapsed since the epoch."""

    seconds: int = 0
    micro_seconds: int = 0

    @classmethod
    def now(cls) -> "TimeStamp":
        """Return a stamp for the current time."""
        seconds, nanos = divmod(time.time_ns(), 1_000_000_000)
        return cls(seconds, nanos // 1000)

    def milliseconds(self) -> int:
        """Return the sub-second part in whole milliseconds."""
        return self.micro_seconds // 1000


_START_STAMP = TimeStamp.now()


def start_stamp() -> TimeStamp:
    """Return the stamp taken when the package was first loaded."""
    return _START_STAMP