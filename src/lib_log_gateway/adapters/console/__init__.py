"""Console-facing adapters."""

from __future__ import annotations

from .rich_console import RichConsoleProvider, RichConsoleTarget

__all__ = ["RichConsoleProvider", "RichConsoleTarget"]
