"""metaschema-py CLI - Install and drive the metaschema-cli validation tool.

Entry point for the ``metaschema-py`` command-line tool. ``build_cli``
constructs the command group and registers every subcommand on it.

Commands:
    use       - Install or switch metaschema-cli versions.
    versions  - List published metaschema-cli versions.
    detect    - Classify Metaschema documents by kind and format.
    report    - Validate a document and show SARIF results.
    <other>   - Forwarded to metaschema-cli unchanged.

Every command except ``use``, ``versions`` and ``detect`` first makes sure
metaschema-cli is installed, installing the latest release if it is not.

Usage::

    metaschema-py use                      # Pick a version interactively
    metaschema-py use 1.1.0
    metaschema-py detect ./module.yaml
    metaschema-py report ./module.xml
    metaschema-py validate ./module.xml    # Runs metaschema-cli validate
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import click
from rich.logging import RichHandler

from metaschemapy import __version__
from metaschemapy.cli.context import AppContext
from metaschemapy.cli.detect_cmd import detect_command
from metaschemapy.cli.forward import forward_command
from metaschemapy.cli.output import error_console, print_error
from metaschemapy.cli.report_cmd import report_command
from metaschemapy.cli.use_cmd import use_command
from metaschemapy.cli.versions_cmd import versions_command
from metaschemapy.exceptions import MetaschemaError

# Commands that work without metaschema-cli installed.
NO_INSTALL_COMMANDS: frozenset[str] = frozenset({"use", "versions", "detect"})

COMMANDS: tuple[click.Command, ...] = (
    use_command,
    versions_command,
    detect_command,
    report_command,
)


class ToolGroup(click.Group):
    """Click group that forwards unknown sub-commands to metaschema-cli.

    Also turns any ``MetaschemaError`` into an ``Error: ...`` message on
    stderr and the error's exit code.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            return args[0], forward_command, list(args)
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except MetaschemaError as exc:
            print_error(str(exc))
            ctx.exit(exc.exit_code)


def configure_logging(verbosity: int) -> None:
    """Route ``metaschemapy`` logs to stderr through Rich.

    0 shows warnings, 1 (``-v``) adds progress, 2 (``-vv``) adds debug.
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    pkg_logger = logging.getLogger("metaschemapy")
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(
            RichHandler(console=error_console, show_path=False, show_time=False)
        )
    pkg_logger.setLevel(level)


def build_cli() -> click.Group:
    """Build the ``metaschema-py`` command group with all subcommands."""

    @click.group(cls=ToolGroup)
    @click.version_option(version=__version__)
    @click.option("-v", "--verbose", count=True, help="Log progress (-v) or debug output (-vv).")
    @click.option("--progress/--no-progress", default=False, help="Show a spinner while metaschema-cli runs.")
    @click.pass_context
    def cli(ctx: click.Context, verbose: int, progress: bool) -> None:
        """metaschema-py: install, manage and run metaschema-cli.

        Unrecognised commands are passed to metaschema-cli along with all
        of their arguments.
        """
        configure_logging(verbose)
        app = ctx.ensure_object(AppContext)
        app.show_progress = progress
        if ctx.invoked_subcommand not in NO_INSTALL_COMMANDS:
            app.ensure_installed()

    for command in COMMANDS:
        cli.add_command(command)
    return cli


def main(argv: Sequence[str] | None = None) -> None:
    """Console-script entry point."""
    cli = build_cli()
    cli.main(args=list(argv) if argv is not None else None, prog_name="metaschema-py", obj=AppContext())
