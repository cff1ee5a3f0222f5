"""Configuration accepted from the trusted control source.

Purpose
-------
Parse the inbound control message into immutable value objects and decide
whether it is well formed, without ever raising at the trust boundary.

Contents
--------
* :class:`GatewayConfig` - read-only configuration plus the console target.
* :class:`ControlMessage` - channel identity paired with its configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class GatewayConfig:
    """Immutable view over the configuration delivered with a bind.

    ``raw`` is a read-only proxy over a shallow copy of the inbound mapping;
    ``console`` is the object found at ``raw["global"]["console"]``.
    """

    raw: Mapping[str, Any]
    console: Any

    @classmethod
    def from_mapping(cls, payload: Any) -> "GatewayConfig | None":
        """Return a config for ``payload`` or ``None`` when it is malformed.

        Examples
        --------
        >>> GatewayConfig.from_mapping({"global": {"console": "X"}}).console
        'X'
        >>> GatewayConfig.from_mapping({"global": {}}) is None
        True
        >>> GatewayConfig.from_mapping("nope") is None
        True
        """

        if not isinstance(payload, Mapping):
            return None
        scope = payload.get("global")
        if not isinstance(scope, Mapping) or "console" not in scope:
            return None
        return cls(raw=MappingProxyType(dict(payload)), console=scope["console"])


@dataclass(frozen=True)
class ControlMessage:
    """Validated control message carrying channel identity and config."""

    channel: str
    config: GatewayConfig

    @classmethod
    def parse(cls, message: Any) -> "ControlMessage | None":
        """Parse ``message`` or return ``None`` for any malformed shape.

        Examples
        --------
        >>> ControlMessage.parse({"channel": "c1", "config": {"global": {"console": None}}}).channel
        'c1'
        >>> ControlMessage.parse({"channel": "", "config": {"global": {"console": None}}}) is None
        True
        """

        if not isinstance(message, Mapping):
            return None
        channel = message.get("channel")
        if not isinstance(channel, str) or not channel:
            return None
        config = GatewayConfig.from_mapping(message.get("config"))
        if config is None:
            return None
        return cls(channel=channel, config=config)


__all__ = ["ControlMessage", "GatewayConfig"]
