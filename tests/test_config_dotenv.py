from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_console_api import cli as cli_module
from lib_console_api import config as console_config
from lib_console_api.config import ConsoleSettings, resolve_styles


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values into the environment."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("CONSOLE_THEME=neon\n")
    monkeypatch.delenv("CONSOLE_THEME", raising=False)

    loaded = console_config.enable_dotenv(search_from=nested)

    assert loaded == env_file.resolve()
    assert os.environ["CONSOLE_THEME"] == "neon"

    os.environ.pop("CONSOLE_THEME", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    (tmp_path / ".env").write_text("CONSOLE_THEME=neon\n")
    monkeypatch.setenv("CONSOLE_THEME", "dark")

    result = console_config.enable_dotenv(search_from=tmp_path)

    assert result is not None
    assert os.environ["CONSOLE_THEME"] == "dark"


def test_enable_dotenv_returns_none_without_file(tmp_path: Path) -> None:
    isolated = tmp_path / "a" / "b"
    isolated.mkdir(parents=True)

    if any((directory / ".env").is_file() for directory in (isolated, *isolated.parents)):
        pytest.skip("a .env exists above the temporary directory")
    assert console_config.enable_dotenv(search_from=isolated) is None


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (None, None, False),
        (None, "1", True),
        (None, "no", False),
        (True, None, True),
        (False, "yes", False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert console_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()
    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(console_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(console_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["info"], env={console_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env={console_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert calls == []


def test_settings_from_env_reads_console_variables() -> None:
    settings = ConsoleSettings.from_env(
        {
            "CONSOLE_THEME": "Pastel",
            "CONSOLE_FORCE_COLOR": "true",
            "CONSOLE_BUFFER_SIZE": "25",
            "CONSOLE_STYLES": "WARN=bold, countReset=blue",
        }
    )

    assert settings.theme == "pastel"
    assert settings.force_color is True
    assert settings.no_color is False
    assert settings.buffer_size == 25
    assert settings.resolved_styles()["WARN"] == "bold"
    assert settings.resolved_styles()["COUNT_RESET"] == "blue"


def test_settings_keyword_overrides_win() -> None:
    settings = ConsoleSettings.from_env({"CONSOLE_THEME": "dark"}, theme="neon", buffer_size=None)

    assert settings.theme == "neon"
    assert settings.buffer_size == 1000


@pytest.mark.parametrize(
    "environ, message",
    [
        ({"CONSOLE_THEME": "sepia"}, "Unknown console theme"),
        ({"CONSOLE_BUFFER_SIZE": "many"}, "CONSOLE_BUFFER_SIZE must be an integer"),
        ({"CONSOLE_BUFFER_SIZE": "0"}, "buffer_size must be positive"),
    ],
)
def test_settings_reject_invalid_values(environ: dict[str, str], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        ConsoleSettings.from_env(environ)


def test_resolve_styles_rejects_unknown_theme() -> None:
    with pytest.raises(ValueError, match="Unknown console theme"):
        resolve_styles("sepia")
