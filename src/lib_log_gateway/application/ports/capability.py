"""Port for the host answering named capability requests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from .provider import ProviderFactory

DEFAULT_LOGGER_CAPABILITY = "core.logger"


@runtime_checkable
class CapabilityHostPort(Protocol):
    """Resolve a named capability asynchronously through continuations.

    Exactly one of ``on_ready`` / ``on_error`` is expected to run, either
    immediately or at some later point chosen by the host.
    """

    def request(
        self,
        name: str,
        on_ready: Callable[[ProviderFactory], None],
        on_error: Callable[[BaseException], None],
    ) -> None:
        """Start resolving ``name``."""


__all__ = ["CapabilityHostPort", "DEFAULT_LOGGER_CAPABILITY"]
