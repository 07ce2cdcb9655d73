"""Concrete clients and host adapters for the console core."""

from __future__ import annotations

from .call_stack import PythonCallStack, ScriptedCallStack
from .console import RichConsoleClient
from .logging_bridge import LoggingConsoleClient
from .memory import ConsoleRecord, MemoryConsoleClient

__all__ = [
    "ConsoleRecord",
    "LoggingConsoleClient",
    "MemoryConsoleClient",
    "PythonCallStack",
    "RichConsoleClient",
    "ScriptedCallStack",
]
