"""Severity abstraction for gateway log calls.

Purpose
-------
Model the five console-style severities carried in envelopes and used to pick
the provider method that renders a message.

Contents
--------
* :class:`Severity` enum with name coercion and presentation metadata.
* ``_STYLE_TABLE`` / ``_PYTHON_LEVELS`` constants consumed by adapters.

System Role
-----------
Shared by the formatter (envelope ``severity`` field), the print path
(dispatch-table keys), and the Rich adapter (styles).
"""

from __future__ import annotations

import logging
from enum import Enum


class Severity(Enum):
    """Severities understood by the gateway; values are the wire names."""

    LOG = "log"
    INFO = "info"
    DEBUG = "debug"
    WARN = "warn"
    ERROR = "error"

    @property
    def style(self) -> str:
        """Return the default Rich style for this severity."""

        return _STYLE_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant closest to this severity."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        normalized = name.strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown severity: {name!r}") from exc

    @classmethod
    def coerce(cls, value: "Severity | str") -> "Severity":
        """Return ``value`` as a :class:`Severity`, parsing strings by name."""

        if isinstance(value, Severity):
            return value
        return cls.from_name(value)


_STYLE_TABLE = {
    Severity.LOG: "",
    Severity.INFO: "cyan",
    Severity.DEBUG: "dim",
    Severity.WARN: "yellow",
    Severity.ERROR: "red",
}

_PYTHON_LEVELS = {
    Severity.LOG: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


__all__ = ["Severity"]
