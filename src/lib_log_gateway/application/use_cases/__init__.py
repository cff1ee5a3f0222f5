"""Use cases composing the gateway's binding, emission, and print paths."""

from __future__ import annotations

from .acquire_provider import AcquisitionState, ProviderAcquirer, ProviderHandle, build_dispatch_table
from .bind_channel import TRUSTED_SOURCE, ChannelBinder
from .emit_message import MessageEmitter
from .print_envelope import EnvelopePrinter

__all__ = [
    "AcquisitionState",
    "ChannelBinder",
    "EnvelopePrinter",
    "MessageEmitter",
    "ProviderAcquirer",
    "ProviderHandle",
    "TRUSTED_SOURCE",
    "build_dispatch_table",
]
