"""Composition helpers wiring settings, adapters, and the gateway.

Purpose
-------
Translate :class:`GatewaySettings` into a live :class:`Gateway` plus the
default Rich collaborators, keeping wiring declarative and testable.
"""

from __future__ import annotations

from typing import Any

from lib_log_gateway.adapters import InMemoryBus, RichConsoleProvider, RichConsoleTarget, StaticCapabilityHost
from lib_log_gateway.application.ports import BusPort, CapabilityHostPort, DiagnosticHook, ProviderFactory
from lib_log_gateway.config import GatewaySettings

from ._gateway import Gateway


def build_gateway(
    settings: GatewaySettings,
    *,
    bus: BusPort,
    host: CapabilityHostPort,
    console: Any = None,
    diagnostic: DiagnosticHook = None,
) -> Gateway:
    """Assemble a gateway from resolved settings and host collaborators."""

    return Gateway(
        bus=bus,
        host=host,
        console=console,
        trusted_source=settings.trusted_source,
        capability=settings.capability,
        diagnostic=diagnostic,
    )


def rich_provider_factory(settings: GatewaySettings, **kwargs: Any) -> ProviderFactory:
    """Return a factory producing :class:`RichConsoleProvider` instances."""

    def _factory() -> RichConsoleProvider:
        return RichConsoleProvider(force_color=settings.force_color, no_color=settings.no_color, **kwargs)

    return _factory


def build_local_gateway(
    settings: GatewaySettings,
    *,
    diagnostic: DiagnosticHook = None,
    **console_kwargs: Any,
) -> tuple[Gateway, InMemoryBus]:
    """Compose a self-contained gateway rendering through Rich.

    The gateway publishes on an :class:`InMemoryBus` that feeds envelopes
    straight back into :meth:`Gateway.print`, with the Rich provider served by
    a :class:`StaticCapabilityHost` under ``settings.capability``. The channel
    is still unbound; callers decide when to send the control message.
    """

    bus = InMemoryBus()
    host = StaticCapabilityHost({settings.capability: rich_provider_factory(settings, **console_kwargs)})
    gateway = build_gateway(settings, bus=bus, host=host, diagnostic=diagnostic)
    gateway.attach()
    return gateway, bus


def console_target(settings: GatewaySettings, **kwargs: Any) -> RichConsoleTarget:
    """Return the Rich console target matching ``settings`` colour flags."""

    return RichConsoleTarget(force_color=settings.force_color, no_color=settings.no_color, **kwargs)


__all__ = ["build_gateway", "build_local_gateway", "console_target", "rich_provider_factory"]
