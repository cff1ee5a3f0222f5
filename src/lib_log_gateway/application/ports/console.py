"""Console target port for the direct error side channel.

Purpose
-------
Describe the console-like object delivered in the bound configuration
(``config["global"]["console"]``). The gateway only ever calls ``error`` on it
directly; the remaining methods exist so hosts can hand over any
``console``-shaped object.

System Role
-----------
Keeps :meth:`Gateway.error` independent from Rich or ``print``; adapters such
as :class:`lib_log_gateway.adapters.RichConsoleTarget` plug in here.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConsoleTargetPort(Protocol):
    """Variadic console surface mirroring the gateway's severities."""

    def log(self, *args: Any) -> None: ...

    def info(self, *args: Any) -> None: ...

    def debug(self, *args: Any) -> None: ...

    def warn(self, *args: Any) -> None: ...

    def error(self, *args: Any) -> None: ...


__all__ = ["ConsoleTargetPort"]
