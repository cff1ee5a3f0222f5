"""Domain entities and value objects used by the logging gateway."""

from __future__ import annotations

from .codec import decode_arguments, encode_arguments
from .configuration import ControlMessage, GatewayConfig
from .envelope import REQUEST_KIND, Envelope
from .formatting import canonicalize
from .latch import Latch, Signal
from .pending import PendingCall
from .readiness import CHANNEL_READY, PROVIDER_READY, ReadinessGate
from .severity import Severity

__all__ = [
    "CHANNEL_READY",
    "ControlMessage",
    "Envelope",
    "GatewayConfig",
    "Latch",
    "PROVIDER_READY",
    "PendingCall",
    "REQUEST_KIND",
    "ReadinessGate",
    "Severity",
    "Signal",
    "canonicalize",
    "decode_arguments",
    "encode_arguments",
]
