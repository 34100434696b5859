"""Static package metadata surfaced by the CLI ``info`` command.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Callable

name = "lib_console_sync"
title = "Console message synchronization and formatting engine"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_console_sync"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib-console-sync"


def print_info(writer: Callable[[str], None] = print) -> None:
    """Emit the metadata banner through ``writer`` one line at a time.

    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_console_sync:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n")
    writer("\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")


def summary_info() -> str:
    """Return the banner printed by ``lib-console-sync info``."""

    lines: list[str] = []
    print_info(writer=lines.append)
    return "".join(lines)


__all__ = ["print_info", "summary_info", "version", "shell_command"]
