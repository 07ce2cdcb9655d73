"""Public package surface of the console dispatch core.

``import lib_console_api`` exposes the console, the client base class, the
bundled clients, and the façade helpers that wire them with defaults.
"""

from __future__ import annotations

from .adapters import (
    ConsoleRecord,
    LoggingConsoleClient,
    MemoryConsoleClient,
    PythonCallStack,
    RichConsoleClient,
    ScriptedCallStack,
)
from .application import BaseConsoleClient, Console, PythonValues
from .config import ConsoleSettings
from .domain import CounterTable, LogLevel, Trace
from .lib_console_api import create_console, create_memory_client, create_rich_client, run_demo, summary_info

__all__ = [
    "BaseConsoleClient",
    "Console",
    "ConsoleRecord",
    "ConsoleSettings",
    "CounterTable",
    "LogLevel",
    "LoggingConsoleClient",
    "MemoryConsoleClient",
    "PythonCallStack",
    "PythonValues",
    "RichConsoleClient",
    "ScriptedCallStack",
    "Trace",
    "create_console",
    "create_memory_client",
    "create_rich_client",
    "run_demo",
    "summary_info",
]
