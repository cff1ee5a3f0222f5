"""Ports connecting the gateway use cases to the outside world."""

from __future__ import annotations

from .bus import BusHandler, BusPort
from .capability import DEFAULT_LOGGER_CAPABILITY, CapabilityHostPort
from .console import ConsoleTargetPort
from .diagnostics import DiagnosticHook, emit_diagnostic
from .provider import Completion, LoggerProviderPort, ProviderFactory

__all__ = [
    "BusHandler",
    "BusPort",
    "CapabilityHostPort",
    "Completion",
    "ConsoleTargetPort",
    "DEFAULT_LOGGER_CAPABILITY",
    "DiagnosticHook",
    "LoggerProviderPort",
    "ProviderFactory",
    "emit_diagnostic",
]
