"""Diagnostic hook type and guarded invocation helper."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Optional

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]

LOGGER = logging.getLogger(__name__)


def emit_diagnostic(hook: DiagnosticHook, name: str, payload: dict[str, Any]) -> None:
    """Invoke ``hook`` while guarding against callback failures."""

    if hook is None:
        return
    try:
        hook(name, payload)
    except Exception as exc:  # noqa: BLE001
        LOGGER.error("Diagnostic hook raised while reporting %s", name, exc_info=exc)


__all__ = ["DiagnosticHook", "emit_diagnostic"]
