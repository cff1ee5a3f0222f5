"""Format log calls and emit envelopes once the channel is bound."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from lib_log_gateway.application.ports.bus import BusPort
from lib_log_gateway.application.ports.diagnostics import DiagnosticHook, emit_diagnostic
from lib_log_gateway.domain.envelope import Envelope
from lib_log_gateway.domain.formatting import canonicalize
from lib_log_gateway.domain.pending import PendingCall
from lib_log_gateway.domain.readiness import CHANNEL_READY, ReadinessGate
from lib_log_gateway.domain.severity import Severity

from .bind_channel import ChannelBinder

LOGGER = logging.getLogger(__name__)


class MessageEmitter:
    """Turn raw call payloads into envelopes on the bound channel.

    Binding is re-checked on every call. While unbound each call is captured
    as a :class:`PendingCall` on the ``channel_ready`` latch and replayed in
    call order when the binder resolves it.
    """

    def __init__(
        self,
        *,
        binder: ChannelBinder,
        gate: ReadinessGate,
        bus: BusPort,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        self._binder = binder
        self._gate = gate
        self._bus = bus
        self._diagnostic = diagnostic

    def format(self, severity: Severity, source: str | None, payload: str | Iterable[Any]) -> None:
        """Canonicalize ``payload`` and emit it, or defer until bound."""

        call = PendingCall(severity=severity, source=source, arguments=tuple(canonicalize(payload, source)))
        self._dispatch(call)

    def _dispatch(self, call: PendingCall) -> None:
        channel = self._binder.channel
        if channel is None:
            emit_diagnostic(self._diagnostic, "buffered", call.describe())
            self._gate.wait(CHANNEL_READY, lambda _channel: self._dispatch(call))
            return
        self._emit(channel, call)

    def _emit(self, channel: str, call: PendingCall) -> None:
        try:
            envelope = Envelope.build(call.severity, call.source, call.arguments)
            self._bus.publish(channel, envelope.to_dict())
        except Exception as exc:  # noqa: BLE001
            LOGGER.error("Publishing envelope on %r failed; dropping it", channel, exc_info=exc)
            emit_diagnostic(self._diagnostic, "emit_failed", {"channel": channel, "exception": repr(exc), **call.describe()})
            return
        emit_diagnostic(self._diagnostic, "emitted", {"channel": channel, **call.describe()})


__all__ = ["MessageEmitter"]
