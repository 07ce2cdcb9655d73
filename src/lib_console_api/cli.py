"""Click command group exposing the console demo and metadata banner.

Contents
--------
* :func:`cli` – root group with ``--traceback`` and ``--use-dotenv`` switches.
* ``info`` / ``demo`` subcommands.
* :func:`main` – runs the group through :func:`lib_cli_exit_tools.run_cli`.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as console_config
from .domain.palettes import CONSOLE_STYLE_THEMES
from .lib_console_api import run_demo, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load a nearby .env before reading settings (default: ${console_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags; prints the banner without a subcommand."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    env_toggle = os.getenv(console_config.DOTENV_ENV_VAR)
    if console_config.should_use_dotenv(explicit=explicit, env_value=env_toggle):
        console_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--theme",
    type=click.Choice(sorted(CONSOLE_STYLE_THEMES), case_sensitive=False),
    default=None,
    help="Palette used for the demo (default: $CONSOLE_THEME or classic).",
)
def cli_demo(theme: str | None) -> None:
    """Run a scripted console session through the Rich client."""

    try:
        result = run_demo(theme=theme)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    counters = ", ".join(f"{label}={value}" for label, value in sorted(result["counters"].items()))
    click.echo(f"=== Theme: {result['theme']} === counters: {counters}")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code, restoring traceback preferences."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
