"""Public package surface of the deferred-dispatch logging gateway.

A :class:`Gateway` accepts console-style log calls before its output channel
exists, buffers them behind a readiness latch, and replays them in order once
a trusted control message binds the channel. Envelopes coming back from the
bus are printed through a logger provider that is acquired lazily, exactly
once, behind a second latch.
"""

from __future__ import annotations

from .adapters import (
    AsyncioCapabilityHost,
    DeferredCapabilityHost,
    InMemoryBus,
    RichConsoleProvider,
    RichConsoleTarget,
    StaticCapabilityHost,
)
from .application.use_cases import AcquisitionState
from .config import GatewaySettings, build_settings
from .domain import Envelope, Latch, ReadinessGate, Severity, Signal, canonicalize, decode_arguments, encode_arguments
from .lib_log_gateway import gatewaydemo, summary_info
from .runtime import Gateway, NamedLogger, build_gateway, build_local_gateway, get_logger

__all__ = [
    "AcquisitionState",
    "AsyncioCapabilityHost",
    "DeferredCapabilityHost",
    "Envelope",
    "Gateway",
    "GatewaySettings",
    "InMemoryBus",
    "Latch",
    "NamedLogger",
    "ReadinessGate",
    "RichConsoleProvider",
    "RichConsoleTarget",
    "Severity",
    "Signal",
    "StaticCapabilityHost",
    "build_gateway",
    "build_local_gateway",
    "build_settings",
    "canonicalize",
    "decode_arguments",
    "encode_arguments",
    "gatewaydemo",
    "get_logger",
    "summary_info",
]
