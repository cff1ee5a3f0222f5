"""Named registry of readiness latches and signals."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .latch import Latch, Signal

CHANNEL_READY = "channel_ready"
PROVIDER_READY = "provider_ready"


class ReadinessGate:
    """Suspend continuations by name until the named dependency is ready.

    Each name is declared once as either a latch (ready forever after the
    first notification) or a signal (released per notification). Waiting on
    or notifying an undeclared name raises :class:`KeyError`.

    Examples
    --------
    >>> gate = ReadinessGate()
    >>> _ = gate.latch(CHANNEL_READY)
    >>> calls = []
    >>> gate.wait(CHANNEL_READY, lambda value: calls.append(("first", value)))
    >>> gate.is_ready(CHANNEL_READY)
    False
    >>> gate.notify(CHANNEL_READY, "c1")
    True
    >>> gate.wait(CHANNEL_READY, lambda value: calls.append(("late", value)))
    >>> calls
    [('first', 'c1'), ('late', 'c1')]
    """

    def __init__(self) -> None:
        self._entries: dict[str, Latch[Any] | Signal[Any]] = {}

    def latch(self, name: str) -> Latch[Any]:
        """Declare (or return) the latch registered under ``name``."""

        entry = self._entries.get(name)
        if entry is None:
            entry = self._entries[name] = Latch(name)
        if not isinstance(entry, Latch):
            raise ValueError(f"{name!r} is already declared as a signal")
        return entry

    def signal(self, name: str) -> Signal[Any]:
        """Declare (or return) the multi-shot signal registered under ``name``."""

        entry = self._entries.get(name)
        if entry is None:
            entry = self._entries[name] = Signal(name)
        if not isinstance(entry, Signal):
            raise ValueError(f"{name!r} is already declared as a latch")
        return entry

    def wait(self, name: str, continuation: Callable[[Any], None]) -> None:
        """Register ``continuation`` against ``name`` without blocking."""

        self._entries[name].wait(continuation)

    def notify(self, name: str, value: Any = None) -> bool:
        """Release waiters on ``name``.

        Returns ``True`` when the notification had an effect: the first
        resolution of a latch, or any fire of a signal.
        """

        entry = self._entries[name]
        if isinstance(entry, Latch):
            return entry.resolve(value)
        entry.fire(value)
        return True

    def is_ready(self, name: str) -> bool:
        """Return ``True`` when ``name`` is a resolved latch."""

        entry = self._entries.get(name)
        return isinstance(entry, Latch) and entry.resolved

    def pending(self, name: str) -> int:
        """Number of continuations currently suspended on ``name``."""

        entry = self._entries.get(name)
        return 0 if entry is None else entry.pending_count


__all__ = ["CHANNEL_READY", "PROVIDER_READY", "ReadinessGate"]
