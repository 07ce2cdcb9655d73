"""Terminal-facing console clients."""

from __future__ import annotations

from .rich_console import RichConsoleClient

__all__ = ["RichConsoleClient"]
