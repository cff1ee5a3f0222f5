"""Port for the logging provider that finally renders messages.

Purpose
-------
Specify the provider contract resolved through a capability request: every
severity is a method accepting ``(source, arguments, done)``.

Contents
--------
* :class:`LoggerProviderPort` - runtime-checkable provider protocol.
* :data:`ProviderFactory` - constructible returned by the capability host.
* :data:`Completion` - completion callback type passed to provider methods.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

Completion = Callable[[], None]


@runtime_checkable
class LoggerProviderPort(Protocol):
    """Render decoded log arguments for each severity.

    Examples
    --------
    >>> class Recorder:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def _record(self, source, arguments, done):
    ...         self.lines.append((source, list(arguments)))
    ...         done()
    ...     log = info = debug = warn = error = _record
    >>> isinstance(Recorder(), LoggerProviderPort)
    True
    """

    def log(self, source: str | None, arguments: Sequence[Any], done: Completion) -> None: ...

    def info(self, source: str | None, arguments: Sequence[Any], done: Completion) -> None: ...

    def debug(self, source: str | None, arguments: Sequence[Any], done: Completion) -> None: ...

    def warn(self, source: str | None, arguments: Sequence[Any], done: Completion) -> None: ...

    def error(self, source: str | None, arguments: Sequence[Any], done: Completion) -> None: ...


ProviderFactory = Callable[[], LoggerProviderPort]


__all__ = ["Completion", "LoggerProviderPort", "ProviderFactory"]
