"""Small string helpers: printf-style formatting, trimming and splitting."""

from __future__ import annotations

from typing import Any, Iterable

from .formatting import sprintf

__all__ = ["vform", "trim", "split"]

_WHITESPACE = " \t\r\n"
_INT_MAX = 2**31 - 1


def vform(fmt: str | None, args: Iterable[Any]) -> str:
    """Return ``fmt`` formatted with the sequence ``args``, as vsprintf would."""
    return sprintf(fmt, *args)


def trim(s: str) -> str:
    """Return ``s`` without leading or trailing spaces, tabs, CRs and LFs."""
    return s.strip(_WHITESPACE)


def split(s: str, delimiter: str, max_segments: int = _INT_MAX) -> list[str]:
    """Split ``s`` on ``delimiter`` into at most ``max_segments`` segments.

    The string is scanned from left to right, so the last segment may still
    contain the delimiter. At least one segment is always returned.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    if max_segments <= 1:
        return [s]
    return s.split(delimiter, max_segments - 1)