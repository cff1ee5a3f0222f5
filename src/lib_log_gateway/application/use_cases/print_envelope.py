"""Print path: decode envelopes and hand them to the logging provider."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from lib_log_gateway.application.ports.diagnostics import DiagnosticHook, emit_diagnostic
from lib_log_gateway.domain.envelope import Envelope

from .acquire_provider import ProviderAcquirer, ProviderHandle

LOGGER = logging.getLogger(__name__)


def _done() -> None:
    """Completion callback handed to provider methods; nothing to do."""


class EnvelopePrinter:
    """Route envelopes to the provider method named by their severity.

    ``is_self_console`` is consulted when the provider is ready; when it
    returns ``True`` the console target is the gateway itself and printing
    would echo back into it, so nothing is invoked.
    """

    def __init__(
        self,
        *,
        acquirer: ProviderAcquirer,
        is_self_console: Callable[[], bool],
        diagnostic: DiagnosticHook = None,
    ) -> None:
        self._acquirer = acquirer
        self._is_self_console = is_self_console
        self._diagnostic = diagnostic

    def print(self, message: Envelope | Mapping[str, Any]) -> None:
        """Print ``message`` once the provider is available."""

        try:
            envelope = message if isinstance(message, Envelope) else Envelope.from_mapping(message)
        except ValueError as exc:
            LOGGER.warning("Discarding malformed envelope: %s", exc)
            emit_diagnostic(self._diagnostic, "print_rejected", {"exception": repr(exc)})
            return
        self._acquirer.when_ready(lambda handle: self._deliver(handle, envelope))

    def _deliver(self, handle: ProviderHandle, envelope: Envelope) -> None:
        if self._is_self_console():
            emit_diagnostic(self._diagnostic, "print_suppressed", {"severity": envelope.severity.value, "source": envelope.source})
            return
        method = handle.dispatch[envelope.severity]
        try:
            method(envelope.source, envelope.arguments(), _done)
        except Exception as exc:  # noqa: BLE001
            LOGGER.error("Logger provider raised while printing %s", envelope.severity.value, exc_info=exc)
            emit_diagnostic(self._diagnostic, "provider_error", {"severity": envelope.severity.value, "exception": repr(exc)})


__all__ = ["EnvelopePrinter"]
