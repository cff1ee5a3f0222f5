"""Deferred log call captured while a dependency is not ready."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .severity import Severity


@dataclass(slots=True, frozen=True)
class PendingCall:
    """A log call waiting on a latch; replayed once and then discarded."""

    severity: Severity
    source: str | None
    arguments: tuple[Any, ...]

    def describe(self) -> dict[str, Any]:
        """Return the diagnostic payload used when the call is buffered or dropped."""

        return {"severity": self.severity.value, "source": self.source, "arguments": len(self.arguments)}


__all__ = ["PendingCall"]
