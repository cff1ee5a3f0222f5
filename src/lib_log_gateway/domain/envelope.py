"""Envelope value object carried on the bound channel.

Purpose
-------
Provide an immutable representation of one log call in transit between the
formatting side of the gateway and the printing side.

Contents
--------
* :class:`Envelope` dataclass with wire (de)serialisation helpers.

System Role
-----------
Sits in the domain layer so the bus adapter, the emitter, and the printer all
agree on a single wire shape:
``{severity, source, quiet: true, request: "debug", msg}``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .codec import decode_arguments, encode_arguments
from .severity import Severity

REQUEST_KIND = "debug"
"""Value of the ``request`` field on every envelope."""


@dataclass(slots=True, frozen=True)
class Envelope:
    """Immutable wire record for a single log call.

    Attributes
    ----------
    severity:
        :class:`Severity` of the call; selects the provider method.
    source:
        Named-logger tag or ``None`` for the gateway's own entry points.
    msg:
        JSON-encoded canonical argument list.
    quiet / request:
        Fixed protocol markers (``True`` / ``"debug"``).
    """

    severity: Severity
    source: str | None
    msg: str
    quiet: bool = True
    request: str = REQUEST_KIND

    def __post_init__(self) -> None:
        if not isinstance(self.msg, str):
            raise ValueError("msg must be a string")
        if self.source is not None and not isinstance(self.source, str):
            raise ValueError("source must be a string or None")

    @classmethod
    def build(cls, severity: Severity, source: str | None, arguments: Sequence[Any]) -> "Envelope":
        """Create an envelope by encoding ``arguments`` with the codec."""

        return cls(severity=severity, source=source, msg=encode_arguments(arguments))

    def arguments(self) -> list[Any]:
        """Return the decoded argument list."""

        return decode_arguments(self.msg)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire mapping published on the bus."""

        return {
            "severity": self.severity.value,
            "source": self.source,
            "quiet": self.quiet,
            "request": self.request,
            "msg": self.msg,
        }

    def to_json(self) -> str:
        """Serialize the wire mapping with sorted keys."""

        return json.dumps(self.to_dict(), sort_keys=True)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Envelope":
        """Rebuild an envelope from :meth:`to_dict` output.

        Raises
        ------
        ValueError
            When the severity is unknown or ``msg`` is missing.
        """

        try:
            severity = Severity.coerce(payload["severity"])
            msg = payload["msg"]
        except (AttributeError, KeyError, TypeError) as exc:
            raise ValueError(f"Malformed envelope: {payload!r}") from exc
        return cls(
            severity=severity,
            source=payload.get("source"),
            msg=msg,
            quiet=bool(payload.get("quiet", True)),
            request=payload.get("request", REQUEST_KIND),
        )


__all__ = ["Envelope", "REQUEST_KIND"]
