"""Nested diagnostic contexts, kept separately for every thread."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

__all__ = [
    "DiagnosticContext",
    "NDC",
    "get_ndc",
    "clear",
    "clone_stack",
    "get",
    "get_depth",
    "inherit",
    "pop",
    "push",
    "set_max_depth",
]


@dataclass(frozen=True)
class DiagnosticContext:
    """One level of context: its own message and the joined full message."""

    message: str
    full_message: str = field(default="")

    @classmethod
    def nested(cls, message: str, parent: "DiagnosticContext | None" = None) -> "DiagnosticContext":
        """Make a context below ``parent``; the full message joins both with a space."""
        if parent is None:
            return cls(message, message)
        return cls(message, f"{parent.full_message} {message}")

    def __post_init__(self) -> None:
        if not self.full_message:
            object.__setattr__(self, "full_message", self.message)


class NDC:
    """A stack of diagnostic contexts."""

    def __init__(self) -> None:
        self._stack: list[DiagnosticContext] = []
        self._max_depth: int | None = None

    @property
    def max_depth(self) -> int | None:
        """The maximum depth last set; recorded but not enforced."""
        return self._max_depth

    def clear(self) -> None:
        """Drop every context."""
        self._stack.clear()

    def clone_stack(self) -> list[DiagnosticContext]:
        """Return a copy of the stack, for another thread to ``inherit``."""
        return list(self._stack)

    def get(self) -> str:
        """Return the full message of the innermost context, or ``""``."""
        return self._stack[-1].full_message if self._stack else ""

    def get_depth(self) -> int:
        """Return the nesting depth."""
        return len(self._stack)

    def inherit(self, stack: list[DiagnosticContext]) -> None:
        """Replace the stack with a copy of ``stack``."""
        self._stack = list(stack)

    def pop(self) -> str:
        """Remove the innermost context and return its message, or ``""``."""
        if not self._stack:
            return ""
        return self._stack.pop().message

    def push(self, message: str) -> None:
        """Enter a new context described by ``message``."""
        parent = self._stack[-1] if self._stack else None
        self._stack.append(DiagnosticContext.nested(message, parent))

    def set_max_depth(self, max_depth: int) -> None:
        """Record a maximum depth; the stack is not limited by it."""
        self._max_depth = int(max_depth)


_local = threading.local()


def get_ndc() -> NDC:
    """Return the NDC of the current thread, creating it on first use."""
    ndc = getattr(_local, "ndc", None)
    if ndc is None:
        ndc = NDC()
        _local.ndc = ndc
    return ndc


def clear() -> None:
    """Clear the current thread's NDC."""
    get_ndc().clear()


def clone_stack() -> list[DiagnosticContext]:
    """Return a copy of the current thread's context stack."""
    return get_ndc().clone_stack()


def get() -> str:
    """Return the current thread's context string."""
    return get_ndc().get()


def get_depth() -> int:
    """Return the current thread's nesting depth."""
    return get_ndc().get_depth()


def inherit(stack: list[DiagnosticContext]) -> None:
    """Make the current thread's stack a copy of ``stack``."""
    get_ndc().inherit(stack)


def pop() -> str:
    """Leave the current thread's innermost context."""
    return get_ndc().pop()


def push(message: str) -> None:
    """Enter a context in the current thread."""
    get_ndc().push(message)


def set_max_depth(max_depth: int) -> None:
    """Record a maximum depth for the current thread; it is not enforced."""
    get_ndc().set_max_depth(max_depth)