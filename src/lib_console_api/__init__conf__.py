"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_console_api"
title = "Console API dispatch core with pluggable Rich, logging and in-memory clients"
version = "0.1.0"
author = "lib_console_api maintainers"
shell_command = "lib_console_api"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer`` (stdout by default)."""

    write = writer if writer is not None else sys.stdout.write

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    write(f"Info for {name}:\n")
    write("\n")
    for label, value in fields:
        write(f"    {label:<{pad}} = {value}\n")


__all__ = ["author", "name", "print_info", "shell_command", "title", "version"]
