"""Named loggers multiplexing through one gateway."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol

from lib_log_gateway.domain.severity import Severity

if TYPE_CHECKING:
    from ._gateway import Gateway


class _Formatter(Protocol):
    def format(self, severity: Severity | str, source: str | None, payload: str | Iterable[Any]) -> None: ...


class NamedLogger:
    """Console-like façade that tags every call with a fixed source name.

    The proxy keeps callers decoupled from the gateway: each severity method
    forwards its variadic arguments to the gateway's formatter together with
    the logger name.
    """

    def __init__(self, gateway: _Formatter, name: str) -> None:
        self._gateway = gateway
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def log(self, *args: Any) -> None:
        self._gateway.format(Severity.LOG, self._name, list(args))

    def info(self, *args: Any) -> None:
        self._gateway.format(Severity.INFO, self._name, list(args))

    def debug(self, *args: Any) -> None:
        self._gateway.format(Severity.DEBUG, self._name, list(args))

    def warn(self, *args: Any) -> None:
        self._gateway.format(Severity.WARN, self._name, list(args))

    def error(self, *args: Any) -> None:
        self._gateway.format(Severity.ERROR, self._name, list(args))


def get_logger(gateway: "Gateway", name: str) -> NamedLogger:
    """Return a :class:`NamedLogger` bound to ``gateway`` under ``name``."""

    return NamedLogger(gateway, name)


__all__ = ["NamedLogger", "get_logger"]
