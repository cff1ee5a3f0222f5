"""Lazy, exactly-once acquisition of the logging provider.

Purpose
-------
Request the named logger capability from the host the first time something
needs to be printed, and hold every print request behind the
``provider_ready`` latch until it resolves.

Contents
--------
* :class:`ProviderHandle` - provider instance plus its validated dispatch table.
* :func:`build_dispatch_table` - explicit severity-to-method mapping.
* :class:`ProviderAcquirer` - state machine ``idle -> requesting -> ready|failed``.

System Role
-----------
Second suspension point of the gateway. Acquisition failures are logged,
reported as ``provider_failed``, and every suspended or later print is
dropped (``print_dropped``); there is no retry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from lib_log_gateway.application.ports.capability import DEFAULT_LOGGER_CAPABILITY, CapabilityHostPort
from lib_log_gateway.application.ports.diagnostics import DiagnosticHook, emit_diagnostic
from lib_log_gateway.application.ports.provider import Completion, ProviderFactory
from lib_log_gateway.domain.readiness import PROVIDER_READY, ReadinessGate
from lib_log_gateway.domain.severity import Severity

LOGGER = logging.getLogger(__name__)

ProviderMethod = Callable[[str | None, Sequence[Any], Completion], None]


def build_dispatch_table(provider: object) -> Mapping[Severity, ProviderMethod]:
    """Resolve one bound method per severity on ``provider``.

    Raises
    ------
    TypeError
        When ``provider`` lacks a callable for any severity.
    """

    table: dict[Severity, ProviderMethod] = {}
    missing: list[str] = []
    for severity in Severity:
        method = getattr(provider, severity.value, None)
        if callable(method):
            table[severity] = method
        else:
            missing.append(severity.value)
    if missing:
        raise TypeError(f"Logger provider {provider!r} is missing methods: {', '.join(missing)}")
    return MappingProxyType(table)


@dataclass(frozen=True)
class ProviderHandle:
    """Acquired provider and its severity dispatch table."""

    provider: object
    dispatch: Mapping[Severity, ProviderMethod]

    @classmethod
    def from_factory(cls, factory: ProviderFactory) -> "ProviderHandle":
        provider = factory()
        return cls(provider=provider, dispatch=build_dispatch_table(provider))


class AcquisitionState(Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    READY = "ready"
    FAILED = "failed"


class ProviderAcquirer:
    """Acquire the provider once and fan its readiness out to all callers."""

    def __init__(
        self,
        *,
        host: CapabilityHostPort,
        gate: ReadinessGate,
        capability: str = DEFAULT_LOGGER_CAPABILITY,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        self._host = host
        self._gate = gate
        self._latch = gate.latch(PROVIDER_READY)
        self._capability = capability
        self._diagnostic = diagnostic
        self._state = AcquisitionState.IDLE
        self._handle: ProviderHandle | None = None

    @property
    def state(self) -> AcquisitionState:
        return self._state

    @property
    def handle(self) -> ProviderHandle | None:
        return self._handle

    def when_ready(self, continuation: Callable[[ProviderHandle], None]) -> None:
        """Run ``continuation`` with the handle now or once it is acquired."""

        if self._state is AcquisitionState.FAILED:
            emit_diagnostic(self._diagnostic, "print_dropped", {"reason": "provider_failed", "capability": self._capability})
            return
        self._gate.wait(PROVIDER_READY, continuation)
        if self._state is AcquisitionState.IDLE:
            self._request()

    def _request(self) -> None:
        self._state = AcquisitionState.REQUESTING
        emit_diagnostic(self._diagnostic, "provider_requested", {"capability": self._capability})
        try:
            self._host.request(self._capability, self._on_ready, self._on_error)
        except Exception as exc:  # noqa: BLE001
            self._on_error(exc)

    def _on_ready(self, factory: ProviderFactory) -> None:
        if self._state is not AcquisitionState.REQUESTING:
            return
        try:
            handle = ProviderHandle.from_factory(factory)
        except Exception as exc:  # noqa: BLE001
            self._on_error(exc)
            return
        self._handle = handle
        self._state = AcquisitionState.READY
        emit_diagnostic(
            self._diagnostic,
            "provider_ready",
            {"capability": self._capability, "pending": self._latch.pending_count},
        )
        self._gate.notify(PROVIDER_READY, handle)

    def _on_error(self, exc: BaseException) -> None:
        if self._state is not AcquisitionState.REQUESTING:
            return
        self._state = AcquisitionState.FAILED
        dropped = len(self._latch.discard())
        LOGGER.error("Acquiring logger capability %r failed", self._capability, exc_info=exc)
        emit_diagnostic(
            self._diagnostic,
            "provider_failed",
            {"capability": self._capability, "exception": repr(exc), "dropped": dropped},
        )
        for _ in range(dropped):
            emit_diagnostic(self._diagnostic, "print_dropped", {"reason": "provider_failed", "capability": self._capability})


__all__ = ["AcquisitionState", "ProviderAcquirer", "ProviderHandle", "build_dispatch_table"]
