from __future__ import annotations

from io import StringIO
from typing import Any, Iterator

import pytest
from rich.console import Console

from lib_console_api import config as console_config
from lib_console_api.adapters.call_stack import ScriptedCallStack
from lib_console_api.adapters.memory import MemoryConsoleClient
from lib_console_api.application.client import BaseConsoleClient
from lib_console_api.application.console import Console as ConsoleDispatcher
from lib_console_api.application.ports.client import PrinterPayload
from lib_console_api.domain.levels import LogLevel


class RecordingClient(BaseConsoleClient):
    """Client remembering every port call in order."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, Any]] = []
        self.printer_result: Any = None

    def logger(self, level: LogLevel, args: list[Any]) -> Any:
        self.calls.append(("logger", (level, list(args))))
        return super().logger(level, args)

    def formatter(self, args: list[Any]) -> list[Any]:
        self.calls.append(("formatter", list(args)))
        return super().formatter(args)

    def printer(self, level: LogLevel, payload: PrinterPayload) -> Any:
        self.calls.append(("printer", (level, payload)))
        return self.printer_result

    def clear(self) -> None:
        self.calls.append(("clear", None))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def logged(self) -> list[tuple[LogLevel, list[Any]]]:
        return [payload for name, payload in self.calls if name == "logger"]


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def recording_client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def memory_client() -> MemoryConsoleClient:
    return MemoryConsoleClient(max_records=50)


@pytest.fixture
def call_stack() -> ScriptedCallStack:
    return ScriptedCallStack(["", "main"])


@pytest.fixture
def console(recording_client: RecordingClient, call_stack: ScriptedCallStack) -> ConsoleDispatcher:
    return ConsoleDispatcher(recording_client, call_stack=call_stack)


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> Iterator[None]:
    console_config._reset_dotenv_state_for_testing()
    yield
    console_config._reset_dotenv_state_for_testing()
