from __future__ import annotations

import pytest

from lib_console_api.adapters.console.rich_console import RichConsoleClient
from lib_console_api.domain.levels import LogLevel
from lib_console_api.domain.trace import Trace


def test_rich_client_renders_flat_record(record_console) -> None:
    client = RichConsoleClient(console=record_console)

    client.logger(LogLevel.INFO, ["hello", 42])

    output = record_console.export_text()
    assert "INFO" in output
    assert "hello 42" in output


def test_rich_client_does_not_interpret_markup(record_console) -> None:
    client = RichConsoleClient(console=record_console)

    client.printer(LogLevel.LOG, ["[bold]literal[/bold]"])

    assert "[bold]literal[/bold]" in record_console.export_text()


def test_rich_client_renders_trace_on_several_lines(record_console) -> None:
    client = RichConsoleClient(console=record_console)

    client.printer(LogLevel.TRACE, Trace(label="here", stack=("inner", "<anonymous>")))

    lines = [line.strip() for line in record_console.export_text().splitlines() if line.strip()]
    assert lines[0].endswith("TRACE Trace: here")
    assert lines[1:] == ["inner", "<anonymous>"]


def test_rich_client_style_overrides_accept_level_names(record_console) -> None:
    client = RichConsoleClient(console=record_console, styles={"countReset": "blue", LogLevel.WARN: "bold"})

    assert client.styles[LogLevel.COUNT_RESET] == "blue"
    assert client.styles[LogLevel.WARN] == "bold"
    assert client.styles[LogLevel.ERROR] == "red"


def test_rich_client_rejects_unknown_style_key(record_console) -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        RichConsoleClient(console=record_console, styles={"verbose": "blue"})


@pytest.mark.parametrize("no_color", [True, False])
def test_rich_client_output_text_independent_of_colour(record_console, no_color: bool) -> None:
    client = RichConsoleClient(console=record_console, no_color=no_color)

    client.printer(LogLevel.ERROR, ["boom"])

    assert "boom" in record_console.export_text()


def test_rich_client_clear_delegates_to_console(record_console, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr(record_console, "clear", lambda *args, **kwargs: calls.append("clear"))
    client = RichConsoleClient(console=record_console)

    client.clear()

    assert calls == ["clear"]
