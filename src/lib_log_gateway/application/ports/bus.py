"""Port describing the publish/subscribe bus envelopes travel on."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

BusHandler = Callable[[Mapping[str, Any]], None]


@runtime_checkable
class BusPort(Protocol):
    """Deliver wire mappings to the subscribers of a named channel."""

    def publish(self, channel: str, payload: Mapping[str, Any]) -> None:
        """Publish ``payload`` on ``channel``."""

    def subscribe(self, channel: str, handler: BusHandler) -> None:
        """Invoke ``handler`` for every payload later published on ``channel``."""


__all__ = ["BusHandler", "BusPort"]
