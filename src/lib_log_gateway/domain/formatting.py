"""Normalisation of raw log-call payloads into canonical argument lists."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any


def canonicalize(payload: str | Iterable[Any], source: str | None) -> list[Any]:
    """Return the canonical ordered argument list for ``payload``.

    Named loggers may forward a single string that is itself a serialized
    array; when a ``source`` is present such strings are unpacked. Other
    strings become one-element lists, collections are copied in order and
    anything that is not iterable yields an empty list.

    Examples
    --------
    >>> canonicalize("[1,2,3]", "worker")
    [1, 2, 3]
    >>> canonicalize("[1,2,3]", None)
    ['[1,2,3]']
    >>> canonicalize('{"a": 1}', "worker")
    ['{"a": 1}']
    >>> canonicalize(("hello", 42), None)
    ['hello', 42]
    >>> canonicalize(5, None)
    []
    """

    if isinstance(payload, str) and source:
        try:
            parsed = json.loads(payload)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return parsed

    if isinstance(payload, str):
        return [payload]
    if not isinstance(payload, Iterable):
        return []
    return [item for item in payload]


__all__ = ["canonicalize"]
