"""Distribution metadata shared by the CLI banner and packaging checks."""

from __future__ import annotations

import sys
from collections.abc import Callable

name = "lib_log_gateway"
title = "Deferred-dispatch logging gateway with readiness-gated replay"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_gateway"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_gateway"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner, one ``label = value`` line per field."""

    emit = writer if writer is not None else sys.stdout.write
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n\n")
    for label, value in fields:
        emit(f"    {label.ljust(pad)} = {value}\n")
