"""Synchronous in-process bus implementing :class:`BusPort`.

Purpose
-------
Give demos, tests, and single-process hosts a concrete bus so envelopes
emitted by the gateway can be routed back into :meth:`Gateway.print` or any
other subscriber.

Contents
--------
* :class:`InMemoryBus` - channel-keyed subscriber lists with publish history.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping
from typing import Any

from lib_log_gateway.application.ports.bus import BusHandler, BusPort

LOGGER = logging.getLogger(__name__)


class InMemoryBus(BusPort):
    """Deliver payloads to subscribers synchronously, in subscription order.

    Examples
    --------
    >>> bus = InMemoryBus()
    >>> received = []
    >>> bus.subscribe("c1", received.append)
    >>> bus.publish("c1", {"msg": "[]"})
    >>> received, bus.published
    ([{'msg': '[]'}], [('c1', {'msg': '[]'})])
    """

    def __init__(self) -> None:
        self._subscribers: defaultdict[str, list[BusHandler]] = defaultdict(list)
        self._published: list[tuple[str, dict[str, Any]]] = []

    @property
    def published(self) -> list[tuple[str, dict[str, Any]]]:
        """Return a copy of every ``(channel, payload)`` published so far."""

        return list(self._published)

    def subscribe(self, channel: str, handler: BusHandler) -> None:
        self._subscribers[channel].append(handler)

    def publish(self, channel: str, payload: Mapping[str, Any]) -> None:
        """Record ``payload`` and hand it to each subscriber of ``channel``."""

        snapshot = dict(payload)
        self._published.append((channel, snapshot))
        for handler in list(self._subscribers.get(channel, ())):
            try:
                handler(snapshot)
            except Exception as exc:  # noqa: BLE001
                LOGGER.error("Bus subscriber on %r raised an exception; continuing", channel, exc_info=exc)


__all__ = ["InMemoryBus"]
