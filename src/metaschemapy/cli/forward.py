"""Forward unrecognised sub-commands to metaschema-cli.

``metaschema-py validate module.xml`` runs ``metaschema-cli validate
module.xml``. Arguments reach the tool untouched, options and ``--``
included. The tool's stdout and stderr are echoed back whatever its exit
code, and a non-zero exit becomes this process's exit code.
"""

from __future__ import annotations

import sys

import click

from metaschemapy.cli.context import AppContext

FORWARD_COMMAND_NAME = "forward"


class ForwardCommand(click.Command):
    """A command whose arguments never go through click's parser."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if not args:
            raise click.UsageError("Missing metaschema-cli command.", ctx=ctx)
        ctx.params["tool_args"] = tuple(args)
        return []


@click.command(
    FORWARD_COMMAND_NAME,
    cls=ForwardCommand,
    context_settings={"help_option_names": []},
    hidden=True,
)
@click.pass_obj
def forward_command(app: AppContext, tool_args: tuple[str, ...]) -> None:
    """Run a metaschema-cli sub-command."""
    command, *rest = tool_args
    result = app.runner.run_result(command, rest, show_progress=app.show_progress)
    if result.stdout:
        click.echo(result.stdout, nl=False)
    if result.stderr:
        click.echo(result.stderr, nl=False, err=True)
    if not result.ok:
        sys.exit(result.exit_code)
