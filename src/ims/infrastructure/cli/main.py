from __future__ import annotations

import sys

import click

from ims.infrastructure.bootstrap import Settings, build_manager
from ims.infrastructure.cli.shell import prompt_lines, run_session
from ims.infrastructure.logging_config import configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    envvar="IMS_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level for messages written to stderr.",
)
@click.option(
    "--history-limit",
    envvar="IMS_HISTORY_LIMIT",
    default=None,
    type=click.IntRange(min=1),
    help="Keep at most this many undoable changes (default: unlimited).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, history_limit: int | None) -> None:
    """IMS — Inventory Management System"""
    settings = Settings(history_limit=history_limit, log_level=log_level.upper())
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.command("shell")
@click.option(
    "--script",
    type=click.File("r"),
    default=None,
    help="Read commands from this file instead of the terminal.",
)
@click.pass_context
def shell(ctx: click.Context, script) -> None:
    """Start a session. State lasts until the session ends."""
    manager = build_manager(ctx.obj)

    if script is not None:
        lines = script
    elif sys.stdin.isatty():
        click.echo("Type 'help' for commands, 'exit' to leave.")
        lines = prompt_lines()
    else:
        lines = sys.stdin

    failures = run_session(manager, lines)
    if script is not None and failures:
        ctx.exit(1)
