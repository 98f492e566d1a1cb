"""Interactive session loop.

Reads one command per line, splits it like a shell would, and runs it
against the session command group. A failing command prints its error
and the loop goes on; only ``exit``, ``quit`` or end of input stop it.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Iterable, Iterator

import click

from ims.domain.service.inventory_manager import InventoryManager
from ims.infrastructure.cli.session import session

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"exit", "quit"})


def prompt_lines() -> Iterator[str]:
    """Yield lines typed at the ``ims>`` prompt until EOF / Ctrl-C."""
    while True:
        try:
            yield click.prompt("ims", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            return


def run_session(manager: InventoryManager, lines: Iterable[str]) -> int:
    """Run every command in *lines* against *manager*.

    Returns the number of commands that failed.
    """
    failures = 0
    logger.info("Session started")

    for raw in lines:
        try:
            args = shlex.split(raw, comments=True)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            failures += 1
            continue

        if not args:
            continue
        if args[0] in EXIT_COMMANDS:
            break
        if args[0] == "help":
            args = ["--help"]

        if not _dispatch(manager, args):
            failures += 1

    logger.info("Session ended (%d failed commands)", failures)
    return failures


def _dispatch(manager: InventoryManager, args: list[str]) -> bool:
    try:
        session.main(args=args, prog_name="ims", obj=manager, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return False
    except click.Abort:
        click.echo("Aborted.", err=True)
        return False
    return True
