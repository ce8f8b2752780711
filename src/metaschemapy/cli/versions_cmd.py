"""``metaschema-py versions`` - List metaschema-cli versions on Maven Central."""

from __future__ import annotations

import json

import click

from metaschemapy.cli.context import AppContext, run_async
from metaschemapy.cli.output import print_versions


@click.command("versions")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def versions_command(app: AppContext, output_format: str) -> None:
    """List the published metaschema-cli versions."""
    index = run_async(app.installer.list_versions())
    if output_format == "json":
        click.echo(json.dumps({
            "latest": index.latest,
            "versions": list(index.versions),
        }, indent=2))
    else:
        print_versions(index)
