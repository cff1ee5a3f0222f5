"""Runtime façade: the gateway, named loggers, and composition helpers."""

from __future__ import annotations

from ._composition import build_gateway, build_local_gateway, console_target, rich_provider_factory
from ._gateway import Gateway
from ._loggers import NamedLogger, get_logger

__all__ = [
    "Gateway",
    "NamedLogger",
    "build_gateway",
    "build_local_gateway",
    "console_target",
    "get_logger",
    "rich_provider_factory",
]
