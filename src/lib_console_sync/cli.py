"""Command line interface for evaluating input through a console session.

Purpose
-------
Offer a terminal front end to the engine: one-shot evaluation with optional
dumps, an interactive prompt, and the metadata banner.

Contents
--------
* :func:`cli` - Click group with global flags.
* ``info`` / ``eval`` / ``repl`` subcommands.
* :func:`main` - entry point running the group through ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

import click
import lib_cli_exit_tools
from rich.console import Console
from rich.logging import RichHandler

from . import __init__conf__, config
from .adapters.sinks import DEFAULT_LOGGER_NAME
from .domain import DumpFormat
from .runtime import ConsoleSession, open_session

PROMPT = ">> "
EXIT_COMMAND = "exit"

_DUMP_CHOICES = [member.value for member in DumpFormat]


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show full Python tracebacks for CLI failures.",
)
@click.option("--debug-log", is_flag=True, help="Mirror console output to stderr through logging.")
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool, traceback: bool, debug_log: bool) -> None:
    """Evaluate Python input through a synchronized console session."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config.should_use_dotenv(explicit=explicit, env_value=os.getenv(config.DOTENV_ENV_VAR)):
        config.enable_dotenv()

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    if debug_log:
        _install_debug_handler()

    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info")
def info_command() -> None:
    """Print package metadata."""

    click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("eval")
@click.argument("sources", nargs=-1, required=True)
@click.option("--dump", "dump_format", type=click.Choice(_DUMP_CHOICES), default=None, help="Print a dump of the log instead of live output.")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write the dump to this file.")
@click.option("--max-batch", type=click.IntRange(min=1), default=None, help="Cap the entries fetched per sync request.")
def eval_command(sources: tuple[str, ...], dump_format: str | None, output: Path | None, max_batch: int | None) -> None:
    """Evaluate each SOURCE in order within one session."""

    if output is not None and dump_format is None:
        raise click.UsageError("--output requires --dump")
    with open_session(terminal=dump_format is None, max_batch=max_batch) as session:
        for source in sources:
            session.evaluate(source)
        if dump_format is not None:
            payload = session.dump(dump_format, output)
            if output is None:
                click.echo(payload)


@cli.command("repl")
def repl_command() -> None:
    """Read lines from stdin and evaluate them until EOF or ``exit``."""

    with open_session(terminal=True) as session:
        _run_repl(session)


def _run_repl(session: ConsoleSession) -> None:
    stdin = click.get_text_stream("stdin")
    while True:
        click.echo(PROMPT, nl=False)
        raw = stdin.readline()
        if raw == "":
            click.echo()
            return
        line = raw.strip()
        if not line:
            continue
        if line == EXIT_COMMAND:
            return
        session.evaluate(line)


def _install_debug_handler() -> None:
    debug_logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if any(isinstance(handler, RichHandler) for handler in debug_logger.handlers):
        return
    debug_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    debug_logger.setLevel(logging.DEBUG)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
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
