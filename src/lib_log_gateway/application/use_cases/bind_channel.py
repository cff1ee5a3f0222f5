"""Configuration binder accepting channel identity from the control source.

Purpose
-------
Perform the one-time, idempotent bind that switches the gateway from
buffering to emitting.

Contents
--------
* :data:`TRUSTED_SOURCE` - default origin allowed to bind.
* :class:`ChannelBinder` - write-once holder of channel, config and console.

System Role
-----------
Everything downstream stays inert until :meth:`ChannelBinder.on_message`
resolves the ``channel_ready`` latch. Malformed or unauthorised messages are
ignored silently (reported only to diagnostics) so a bad control message can
never halt the host.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from lib_log_gateway.application.ports.diagnostics import DiagnosticHook, emit_diagnostic
from lib_log_gateway.domain.configuration import ControlMessage, GatewayConfig
from lib_log_gateway.domain.readiness import CHANNEL_READY, ReadinessGate

TRUSTED_SOURCE = "control"

LOGGER = logging.getLogger(__name__)


class ChannelBinder:
    """Accept the first valid control message and ignore everything after.

    Examples
    --------
    >>> gate = ReadinessGate()
    >>> binder = ChannelBinder(gate)
    >>> binder.on_message("control", {"channel": "c1", "config": {"global": {"console": None}}})
    True
    >>> binder.on_message("control", {"channel": "c2", "config": {"global": {"console": None}}})
    False
    >>> binder.channel, gate.is_ready("channel_ready")
    ('c1', True)
    """

    def __init__(
        self,
        gate: ReadinessGate,
        *,
        trusted_source: str = TRUSTED_SOURCE,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        self._gate = gate
        self._latch = gate.latch(CHANNEL_READY)
        self._trusted_source = trusted_source
        self._diagnostic = diagnostic
        self._channel: str | None = None
        self._config: GatewayConfig | None = None
        self._bound_hooks: list[Callable[[str], None]] = []

    @property
    def bound(self) -> bool:
        return self._channel is not None

    @property
    def channel(self) -> str | None:
        return self._channel

    @property
    def config(self) -> GatewayConfig | None:
        return self._config

    @property
    def console(self) -> Any:
        """Console target from the bound config, ``None`` while unbound."""

        return self._config.console if self._config is not None else None

    def when_bound(self, hook: Callable[[str], None]) -> None:
        """Run ``hook(channel)`` at bind time, before buffered calls are released.

        Runs immediately when the channel is already bound.
        """

        if self._channel is not None:
            self._run_hook(hook, self._channel)
            return
        self._bound_hooks.append(hook)

    def on_message(self, source: str, message: Any) -> bool:
        """Bind from ``message`` when it comes from the trusted source.

        Returns ``True`` only for the call that actually bound.
        """

        if self._channel is not None:
            self._ignore("already_bound", source)
            return False
        if source != self._trusted_source:
            self._ignore("untrusted_source", source)
            return False
        parsed = ControlMessage.parse(message)
        if parsed is None:
            self._ignore("malformed", source)
            return False

        self._channel = parsed.channel
        self._config = parsed.config
        LOGGER.debug("Gateway bound to channel %r", parsed.channel)
        emit_diagnostic(self._diagnostic, "bound", {"channel": parsed.channel, "pending": self._latch.pending_count})
        hooks, self._bound_hooks = self._bound_hooks, []
        for hook in hooks:
            self._run_hook(hook, parsed.channel)
        self._gate.notify(CHANNEL_READY, parsed.channel)
        return True

    def _run_hook(self, hook: Callable[[str], None], channel: str) -> None:
        try:
            hook(channel)
        except Exception as exc:  # noqa: BLE001
            LOGGER.error("Bind hook for channel %r raised; continuing", channel, exc_info=exc)

    def _ignore(self, reason: str, source: str) -> None:
        LOGGER.debug("Ignoring control message from %r: %s", source, reason)
        emit_diagnostic(self._diagnostic, "bind_ignored", {"reason": reason, "source": source})


__all__ = ["ChannelBinder", "TRUSTED_SOURCE"]
