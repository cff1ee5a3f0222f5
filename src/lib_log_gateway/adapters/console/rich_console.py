"""Rich-powered provider and console target.

Purpose
-------
Supply concrete collaborators for the two console-facing ports: a logging
provider that renders decoded envelopes and a variadic console target used
by the direct error side channel.

Contents
--------
* :class:`RichConsoleProvider` - implements :class:`LoggerProviderPort`.
* :class:`RichConsoleTarget` - implements :class:`ConsoleTargetPort`.

System Role
-----------
Default rendering for the CLI demo and for hosts that do not bring their own
provider. Styles follow :attr:`Severity.style` and accept per-severity
overrides the same way for both classes.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from rich.console import Console

from lib_log_gateway.application.ports.console import ConsoleTargetPort
from lib_log_gateway.application.ports.provider import Completion, LoggerProviderPort
from lib_log_gateway.domain.severity import Severity


def _merge_styles(styles: Mapping[Severity | str, str] | None) -> dict[Severity, str]:
    """Merge ``styles`` overrides over the default severity styles."""
    merged = {severity: severity.style for severity in Severity}
    if styles:
        for key, value in styles.items():
            merged[Severity.coerce(key)] = value
    return merged


def _render(arguments: Sequence[Any]) -> str:
    return " ".join(argument if isinstance(argument, str) else repr(argument) for argument in arguments)


class _RichBase:
    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[Severity | str, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color
        self._style_map = _merge_styles(styles)

    def _print(self, severity: Severity, line: str) -> None:
        style = "" if self._no_color else self._style_map.get(severity, "")
        self._console.print(line, style=style, highlight=False, markup=False)


class RichConsoleProvider(_RichBase, LoggerProviderPort):
    """Render ``(source, arguments)`` pairs as one console line per call.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=120)
    >>> provider = RichConsoleProvider(console=console)
    >>> provider.warn("worker", ["disk", 93], lambda: None)
    >>> console.export_text().strip()
    'WARN  [worker] disk 93'
    """

    def log(self, source: str | None, arguments: Sequence[Any], done: Completion) -> None:
        self._emit(Severity.LOG, source, arguments, done)

    def info(self, source: str | None, arguments: Sequence[Any], done: Completion) -> None:
        self._emit(Severity.INFO, source, arguments, done)

    def debug(self, source: str | None, arguments: Sequence[Any], done: Completion) -> None:
        self._emit(Severity.DEBUG, source, arguments, done)

    def warn(self, source: str | None, arguments: Sequence[Any], done: Completion) -> None:
        self._emit(Severity.WARN, source, arguments, done)

    def error(self, source: str | None, arguments: Sequence[Any], done: Completion) -> None:
        self._emit(Severity.ERROR, source, arguments, done)

    def _emit(self, severity: Severity, source: str | None, arguments: Sequence[Any], done: Completion) -> None:
        self._print(severity, self._format_line(severity, source, arguments))
        done()

    @staticmethod
    def _format_line(severity: Severity, source: str | None, arguments: Sequence[Any]) -> str:
        """Return ``SEVERITY [source] args`` with the source tag omitted when unset.

        Examples
        --------
        >>> RichConsoleProvider._format_line(Severity.LOG, None, ["hello", 42])
        'LOG   hello 42'
        """
        prefix = f"{severity.value.upper():<5} "
        if source:
            prefix += f"[{source}] "
        return prefix + _render(arguments)


class RichConsoleTarget(_RichBase, ConsoleTargetPort):
    """Console-shaped object printing variadic arguments directly."""

    def log(self, *args: Any) -> None:
        self._print(Severity.LOG, _render(args))

    def info(self, *args: Any) -> None:
        self._print(Severity.INFO, _render(args))

    def debug(self, *args: Any) -> None:
        self._print(Severity.DEBUG, _render(args))

    def warn(self, *args: Any) -> None:
        self._print(Severity.WARN, _render(args))

    def error(self, *args: Any) -> None:
        self._print(Severity.ERROR, _render(args))


__all__ = ["RichConsoleProvider", "RichConsoleTarget"]
