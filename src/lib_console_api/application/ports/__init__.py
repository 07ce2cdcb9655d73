"""Protocols the console core requires of its host and sinks."""

from __future__ import annotations

from .call_stack import CallStackPort
from .client import ConsoleClient, PrinterPayload
from .values import ValuePort

__all__ = ["CallStackPort", "ConsoleClient", "PrinterPayload", "ValuePort"]
