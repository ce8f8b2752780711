"""``metaschema-py use [VERSION]`` - Install or switch metaschema-cli versions.

Without VERSION, prompts for one (``latest`` first, then newest to oldest).
An unknown VERSION prints the valid choices and exits 0 without installing.
"""

from __future__ import annotations

import click

from metaschemapy.cli.context import AppContext, run_async
from metaschemapy.cli.output import error_console, print_installation, print_unknown_version
from metaschemapy.installer import LATEST
from metaschemapy.runner import is_java_installed


@click.command("use")
@click.argument("version", required=False)
@click.pass_obj
def use_command(app: AppContext, version: str | None) -> None:
    """Install or switch to a specific metaschema-cli VERSION."""
    index = run_async(app.installer.list_versions())

    if not version:
        version = click.prompt(
            "Select the metaschema-cli version to install",
            type=click.Choice([LATEST, *index.newest_first()]),
            default=LATEST,
        )

    if version != LATEST and version not in index:
        print_unknown_version(version, index)
        return

    installation = run_async(app.installer.install(version, index))
    if installation is None:
        return
    print_installation(installation)

    if not is_java_installed():
        error_console.print(
            "[yellow]Warning: java was not found on PATH; "
            "metaschema-cli needs a Java runtime to run.[/yellow]"
        )
