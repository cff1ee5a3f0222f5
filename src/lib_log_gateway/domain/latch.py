"""Readiness primitives used to suspend work until a dependency exists.

Purpose
-------
Replace event-emitter style ``on``/``once``/``emit`` wiring with explicit
types whose semantics are visible at the call site.

Contents
--------
* :class:`Latch` - one-time settable readiness; late waiters fire at once.
* :class:`Signal` - multi-shot event; late waiters wait for the next fire.

System Role
-----------
Backs both gateway suspension points ("channel ready" and "provider ready").
Waiters are plain callables receiving the resolved value; nothing blocks.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import Any, Deque, Generic, TypeVar

T = TypeVar("T")

Waiter = Callable[[T], None]

LOGGER = logging.getLogger(__name__)

_PENDING = object()


def _run_waiter(name: str, waiter: Callable[[Any], None], value: Any) -> None:
    """Invoke ``waiter`` and log instead of propagating failures."""
    try:
        waiter(value)
    except Exception as exc:  # noqa: BLE001
        LOGGER.error("Waiter on %r raised an exception; continuing", name, exc_info=exc)


class Latch(Generic[T]):
    """Readiness flag with two states: pending and ``resolved(value)``.

    Examples
    --------
    >>> latch = Latch("channel")
    >>> seen = []
    >>> latch.wait(seen.append)
    >>> latch.resolve("c1")
    True
    >>> latch.resolve("c2")
    False
    >>> latch.wait(seen.append)
    >>> seen
    ['c1', 'c1']
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._value: Any = _PENDING
        self._waiters: Deque[Waiter[T]] = deque()

    @property
    def name(self) -> str:
        return self._name

    @property
    def resolved(self) -> bool:
        """Return ``True`` once :meth:`resolve` has been called."""

        return self._value is not _PENDING

    @property
    def value(self) -> T:
        """Return the resolved value.

        Raises
        ------
        RuntimeError
            When the latch is still pending.
        """

        if self._value is _PENDING:
            raise RuntimeError(f"Latch {self._name!r} is still pending")
        return self._value

    @property
    def pending_count(self) -> int:
        """Number of waiters suspended on this latch."""

        return len(self._waiters)

    def wait(self, waiter: Waiter[T]) -> None:
        """Register ``waiter``; run it immediately when already resolved."""

        if self._value is not _PENDING:
            _run_waiter(self._name, waiter, self._value)
            return
        self._waiters.append(waiter)

    def resolve(self, value: T) -> bool:
        """Resolve the latch and release all waiters in registration order.

        Returns ``False`` (and does nothing) when already resolved.
        """

        if self._value is not _PENDING:
            return False
        self._value = value
        while self._waiters:
            _run_waiter(self._name, self._waiters.popleft(), value)
        return True

    def discard(self) -> list[Waiter[T]]:
        """Drop and return the suspended waiters without running them."""

        dropped = list(self._waiters)
        self._waiters.clear()
        return dropped


class Signal(Generic[T]):
    """Multi-shot event: each :meth:`fire` releases only current waiters.

    Examples
    --------
    >>> signal = Signal("tick")
    >>> seen = []
    >>> signal.wait(seen.append)
    >>> signal.fire(1)
    1
    >>> signal.wait(seen.append)
    >>> seen
    [1]
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._waiters: Deque[Waiter[T]] = deque()

    @property
    def name(self) -> str:
        return self._name

    @property
    def pending_count(self) -> int:
        return len(self._waiters)

    def wait(self, waiter: Waiter[T]) -> None:
        """Register ``waiter`` for the next :meth:`fire`."""

        self._waiters.append(waiter)

    def fire(self, value: T) -> int:
        """Run the waiters registered so far once each; return how many ran."""

        current = list(self._waiters)
        self._waiters.clear()
        for waiter in current:
            _run_waiter(self._name, waiter, value)
        return len(current)


__all__ = ["Latch", "Signal", "Waiter"]
