"""Concrete adapters for the gateway ports."""

from __future__ import annotations

from .bus import InMemoryBus
from .capability import AsyncioCapabilityHost, DeferredCapabilityHost, StaticCapabilityHost
from .console import RichConsoleProvider, RichConsoleTarget

__all__ = [
    "AsyncioCapabilityHost",
    "DeferredCapabilityHost",
    "InMemoryBus",
    "RichConsoleProvider",
    "RichConsoleTarget",
    "StaticCapabilityHost",
]
