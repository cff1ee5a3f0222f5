"""Top-level helpers backing the CLI: metadata banner and gateway demo.

Purpose
-------
Keep the CLI thin: :func:`summary_info` renders package metadata and
:func:`gatewaydemo` walks a gateway through its lifecycle (buffer, bind,
replay, direct error mirror) using the default Rich collaborators.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console

from .config import GatewaySettings, build_settings
from .runtime import build_local_gateway, console_target

DEMO_CHANNEL = "gateway-demo"


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point and docs.

    Examples
    --------
    >>> summary_info().splitlines()[0]
    'Info for lib_log_gateway:'
    """

    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def gatewaydemo(
    *,
    channel: str = DEMO_CHANNEL,
    settings: GatewaySettings | None = None,
    console: Console | None = None,
) -> dict[str, Any]:
    """Demonstrate buffering before bind and replay after it.

    Parameters
    ----------
    channel:
        Channel name delivered in the control message.
    settings:
        Optional pre-resolved settings; defaults to :func:`build_settings`.
    console:
        Optional Rich console receiving all rendered output (tests pass a
        recording console).

    Returns
    -------
    dict[str, Any]
        ``buffered`` (calls pending before the bind), ``emitted`` (envelopes
        published), ``channel`` and the ordered ``diagnostics`` names.

    Examples
    --------
    >>> from io import StringIO
    >>> recorder = Console(file=StringIO(), record=True, width=120)
    >>> result = gatewaydemo(console=recorder)
    >>> result["buffered"], result["emitted"]
    (4, 5)
    >>> "[demo.worker] starting" in recorder.export_text()
    True
    """

    resolved = settings if settings is not None else build_settings()
    diagnostics: list[str] = []
    console_kwargs: dict[str, Any] = {} if console is None else {"console": console}

    gateway, bus = build_local_gateway(
        resolved,
        diagnostic=lambda name, _payload: diagnostics.append(name),
        **console_kwargs,
    )
    worker = gateway.get_logger("demo.worker")

    gateway.log("gateway created; channel not bound yet")
    worker.info("starting", {"jobs": 3})
    worker.debug("queue depth", 0)
    worker.warn("retrying", 1, "of", 3)
    buffered = gateway.pending

    target = console_target(resolved, **console_kwargs)
    gateway.on_message(resolved.trusted_source, {"channel": channel, "config": {"global": {"console": target}}})
    gateway.error("replayed calls were delivered in order")

    return {
        "buffered": buffered,
        "emitted": len(bus.published),
        "channel": gateway.channel,
        "diagnostics": diagnostics,
    }


__all__ = ["DEMO_CHANNEL", "gatewaydemo", "summary_info"]
