"""Envelope codec for canonical argument sequences.

Purpose
-------
Turn the canonical argument list of a log call into the transportable ``msg``
string of an envelope, and turn it back into a list on the receiving side.

Contents
--------
* :func:`encode_arguments` - compact JSON encoding that never raises.
* :func:`decode_arguments` - tolerant decoding of ``msg`` payloads.

System Role
-----------
Used by the formatter when emitting envelopes and by the print path when
replaying them to the provider.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any


def _fallback(value: Any) -> str:
    """Encode values JSON does not understand by their ``repr``."""
    return repr(value)


def _encode_one(value: Any) -> str:
    try:
        return json.dumps(value, separators=(",", ":"), default=_fallback)
    except (TypeError, ValueError):
        return json.dumps(repr(value))


def encode_arguments(arguments: Sequence[Any]) -> str:
    """Serialize ``arguments`` as a compact JSON array.

    Arguments that cannot be encoded as a whole (non-string mapping keys,
    circular containers) are replaced by their ``repr`` one by one, so the
    result is always a valid array of the same length.

    Examples
    --------
    >>> encode_arguments(["hello", 42])
    '["hello",42]'
    >>> encode_arguments([{1}])
    '["{1}"]'
    >>> decode_arguments(encode_arguments(["ok", {(1, 2): "x"}]))
    ['ok', "{(1, 2): 'x'}"]
    """

    items = list(arguments)
    try:
        return json.dumps(items, separators=(",", ":"), default=_fallback)
    except (TypeError, ValueError):
        return "[" + ",".join(_encode_one(item) for item in items) + "]"


def decode_arguments(msg: str) -> list[Any]:
    """Decode an envelope ``msg`` back into an ordered argument list.

    A bare JSON string becomes a one-element list. Arrays are copied as-is.
    Objects are read by consecutive index keys (``"0"``, ``"1"``, ...) until
    the first missing slot. Anything else yields an empty list, and text that
    is not JSON at all is passed through as a single argument.

    Examples
    --------
    >>> decode_arguments('["hello",42]')
    ['hello', 42]
    >>> decode_arguments('"plain"')
    ['plain']
    >>> decode_arguments('{"0": "a", "1": "b", "3": "d"}')
    ['a', 'b']
    >>> decode_arguments('7')
    []
    """

    try:
        decoded = json.loads(msg)
    except (TypeError, ValueError):
        return [msg]

    if isinstance(decoded, str):
        return [decoded]
    if isinstance(decoded, list):
        return list(decoded)
    if isinstance(decoded, Mapping):
        collected: list[Any] = []
        index = 0
        while str(index) in decoded:
            collected.append(decoded[str(index)])
            index += 1
        return collected
    return []


__all__ = ["decode_arguments", "encode_arguments"]
