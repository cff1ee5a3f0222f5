"""Capability host adapters implementing :class:`CapabilityHostPort`.

Purpose
-------
Answer the gateway's request for the ``core.logger`` capability in the three
ways hosts commonly need: from a fixed registry, under external control, or
by awaiting a coroutine on the running asyncio loop.

Contents
--------
* :class:`StaticCapabilityHost` - resolves synchronously from a mapping.
* :class:`DeferredCapabilityHost` - parks requests until ``resolve``/``fail``.
* :class:`AsyncioCapabilityHost` - bridges an ``async`` resolver via tasks.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass

from lib_log_gateway.application.ports.capability import CapabilityHostPort
from lib_log_gateway.application.ports.provider import ProviderFactory

ReadyCallback = Callable[[ProviderFactory], None]
ErrorCallback = Callable[[BaseException], None]


class StaticCapabilityHost(CapabilityHostPort):
    """Resolve capabilities immediately from a fixed registry."""

    def __init__(self, capabilities: Mapping[str, ProviderFactory]) -> None:
        self._capabilities = dict(capabilities)

    def request(self, name: str, on_ready: ReadyCallback, on_error: ErrorCallback) -> None:
        try:
            factory = self._capabilities[name]
        except KeyError:
            on_error(LookupError(f"Unknown capability: {name!r}"))
            return
        on_ready(factory)


@dataclass
class _ParkedRequest:
    name: str
    on_ready: ReadyCallback
    on_error: ErrorCallback


class DeferredCapabilityHost(CapabilityHostPort):
    """Hold requests until the host decides how to answer them.

    Examples
    --------
    >>> host = DeferredCapabilityHost()
    >>> results = []
    >>> host.request("core.logger", results.append, results.append)
    >>> host.requested
    ['core.logger']
    >>> host.resolve("core.logger", dict)
    1
    >>> results
    [<class 'dict'>]
    """

    def __init__(self) -> None:
        self._parked: list[_ParkedRequest] = []
        self._history: list[str] = []

    @property
    def requested(self) -> list[str]:
        """Names requested so far, including answered ones."""

        return list(self._history)

    def request(self, name: str, on_ready: ReadyCallback, on_error: ErrorCallback) -> None:
        self._history.append(name)
        self._parked.append(_ParkedRequest(name, on_ready, on_error))

    def resolve(self, name: str, factory: ProviderFactory) -> int:
        """Answer parked requests for ``name`` with ``factory``; return the count."""

        parked_requests = self._take(name)
        for parked in parked_requests:
            parked.on_ready(factory)
        return len(parked_requests)

    def fail(self, name: str, error: BaseException) -> int:
        """Fail parked requests for ``name`` with ``error``; return the count."""

        parked_requests = self._take(name)
        for parked in parked_requests:
            parked.on_error(error)
        return len(parked_requests)

    def _take(self, name: str) -> list[_ParkedRequest]:
        matching = [parked for parked in self._parked if parked.name == name]
        self._parked = [parked for parked in self._parked if parked.name != name]
        return matching


class AsyncioCapabilityHost(CapabilityHostPort):
    """Resolve capabilities by awaiting ``resolver(name)`` on an event loop.

    The loop is the one passed at construction or, when omitted, the loop
    running at request time. Requests made without any loop fail through
    ``on_error`` with :class:`RuntimeError`.
    """

    def __init__(
        self,
        resolver: Callable[[str], Awaitable[ProviderFactory]],
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._resolver = resolver
        self._loop = loop

    def request(self, name: str, on_ready: ReadyCallback, on_error: ErrorCallback) -> None:
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                on_error(exc)
                return

        async def _resolve() -> ProviderFactory:
            return await self._resolver(name)

        task = loop.create_task(_resolve())

        def _complete(done: asyncio.Task[ProviderFactory]) -> None:
            if done.cancelled():
                on_error(asyncio.CancelledError(f"Capability request for {name!r} was cancelled"))
                return
            error = done.exception()
            if error is not None:
                on_error(error)
                return
            on_ready(done.result())

        task.add_done_callback(_complete)


__all__ = ["AsyncioCapabilityHost", "DeferredCapabilityHost", "StaticCapabilityHost"]
