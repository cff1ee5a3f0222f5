"""Gateway façade composing binder, emitter, acquirer, and printer.

Purpose
-------
Offer the console-shaped surface (``log``/``info``/``debug``/``warn``/
``error``) that host code calls before the logging channel exists, plus the
two inbound entry points used by the host: :meth:`Gateway.on_message` for
control messages and :meth:`Gateway.print` for envelopes coming back from the
bus.

System Role
-----------
Outer shell over the application use cases. Every public logging method
returns ``None`` and never raises; failures are absorbed in the use cases and
surfaced only through stdlib logging and the diagnostic hook.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from lib_log_gateway.application.ports.bus import BusPort
from lib_log_gateway.application.ports.capability import DEFAULT_LOGGER_CAPABILITY, CapabilityHostPort
from lib_log_gateway.application.ports.diagnostics import DiagnosticHook
from lib_log_gateway.application.use_cases import (
    TRUSTED_SOURCE,
    AcquisitionState,
    ChannelBinder,
    EnvelopePrinter,
    MessageEmitter,
    ProviderAcquirer,
)
from lib_log_gateway.domain.configuration import GatewayConfig
from lib_log_gateway.domain.envelope import Envelope
from lib_log_gateway.domain.readiness import CHANNEL_READY, ReadinessGate
from lib_log_gateway.domain.severity import Severity

from ._loggers import NamedLogger

LOGGER = logging.getLogger(__name__)


def _is_nested_gateway(target: Any) -> bool:
    """Return ``True`` when ``target`` advertises itself as a gateway."""
    return bool(getattr(target, "is_gateway", False))


class Gateway:
    """Deferred-dispatch logging gateway.

    Parameters
    ----------
    bus:
        Bus the envelopes are published on once a channel is bound.
    host:
        Capability host asked (once) for the logger provider.
    console:
        Optional console target used by :meth:`error` until a bind supplies
        the configured one.
    trusted_source:
        Origin whose control messages may bind the channel.
    capability:
        Name of the logger capability requested from ``host``.
    diagnostic:
        Optional hook receiving ``(name, payload)`` milestones.

    Examples
    --------
    >>> from lib_log_gateway.adapters import InMemoryBus, StaticCapabilityHost
    >>> bus = InMemoryBus()
    >>> gateway = Gateway(bus=bus, host=StaticCapabilityHost({}))
    >>> gateway.log("hello", 42)
    >>> bus.published
    []
    >>> gateway.on_message("control", {"channel": "c1", "config": {"global": {"console": None}}})
    True
    >>> bus.published[0][1]["msg"]
    '["hello",42]'
    """

    is_gateway = True

    def __init__(
        self,
        *,
        bus: BusPort,
        host: CapabilityHostPort,
        console: Any = None,
        trusted_source: str = TRUSTED_SOURCE,
        capability: str = DEFAULT_LOGGER_CAPABILITY,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        self._bus = bus
        self._gate = ReadinessGate()
        self._initial_console = console
        self._binder = ChannelBinder(self._gate, trusted_source=trusted_source, diagnostic=diagnostic)
        self._emitter = MessageEmitter(binder=self._binder, gate=self._gate, bus=bus, diagnostic=diagnostic)
        self._acquirer = ProviderAcquirer(host=host, gate=self._gate, capability=capability, diagnostic=diagnostic)
        self._printer = EnvelopePrinter(
            acquirer=self._acquirer,
            is_self_console=lambda: self.console is self,
            diagnostic=diagnostic,
        )

    def __str__(self) -> str:
        return "[Console]"

    @property
    def bound(self) -> bool:
        return self._binder.bound

    @property
    def channel(self) -> str | None:
        return self._binder.channel

    @property
    def config(self) -> GatewayConfig | None:
        return self._binder.config

    @property
    def console(self) -> Any:
        """Configured console target, or the construction-time fallback."""

        if self._binder.bound:
            return self._binder.console
        return self._initial_console

    @property
    def provider_state(self) -> AcquisitionState:
        return self._acquirer.state

    @property
    def pending(self) -> int:
        """Number of log calls waiting for the channel to bind."""

        return self._gate.pending(CHANNEL_READY)

    def on_message(self, source: str, message: Any) -> bool:
        """Handle a control message; returns ``True`` only when it bound."""

        return self._binder.on_message(source, message)

    def attach(self) -> None:
        """Route envelopes published on the bound channel back into :meth:`print`.

        The subscription is made at bind time ahead of the buffered calls
        (immediately when already bound), so calls logged before attaching
        still reach the provider.
        """

        self._binder.when_bound(lambda channel: self._bus.subscribe(channel, self.print))

    def format(self, severity: Severity | str, source: str | None, payload: str | Iterable[Any]) -> None:
        """Format ``payload`` and emit it now or once the channel binds."""

        self._emitter.format(Severity.coerce(severity), source, payload)

    def print(self, message: Envelope | Mapping[str, Any]) -> None:
        """Print an envelope through the logger provider."""

        self._printer.print(message)

    def log(self, *args: Any) -> None:
        self.format(Severity.LOG, None, args)

    def info(self, *args: Any) -> None:
        self.format(Severity.INFO, None, args)

    def debug(self, *args: Any) -> None:
        self.format(Severity.DEBUG, None, args)

    def warn(self, *args: Any) -> None:
        self.format(Severity.WARN, None, args)

    def error(self, *args: Any) -> None:
        """Emit an error and mirror it straight to the console target.

        The direct call is skipped when no console is known or the console is
        itself a gateway.
        """

        self.format(Severity.ERROR, None, args)
        console = self.console
        if console is None or _is_nested_gateway(console):
            return
        try:
            console.error(*args)
        except Exception as exc:  # noqa: BLE001
            LOGGER.error("Console target raised while mirroring an error", exc_info=exc)

    def get_logger(self, name: str) -> NamedLogger:
        """Return a logger tagging every call with ``name``."""

        return NamedLogger(self, name)


__all__ = ["Gateway"]
