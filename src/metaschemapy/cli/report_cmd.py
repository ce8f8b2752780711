"""``metaschema-py report DOCUMENT`` - Validate a document and show SARIF results.

Sniffs DOCUMENT to pick the ``--as`` format, runs ``metaschema-cli validate``
with a SARIF log, and renders the findings. Extra TOOL_ARGS are passed to
``validate`` ahead of the document.

Exit Codes:
    0 - No result has level ``error``.
    1 - At least one error-level result, or the document could not be read.
    N - The tool failed without writing a log; N is its own exit code.
"""

from __future__ import annotations

import json
import sys

import click

from metaschemapy.cli.context import AppContext
from metaschemapy.cli.output import print_sarif_log
from metaschemapy.documents import detect_document
from metaschemapy.runner import validate_with_log


def validate_args(document_path: str, format_name: str, extra: tuple[str, ...]) -> list[str]:
    return [*extra, "--as", format_name, document_path]


@click.command("report", context_settings={"ignore_unknown_options": True})
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.argument("tool_args", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def report_command(
    app: AppContext,
    document: str,
    tool_args: tuple[str, ...],
    output_format: str,
) -> None:
    """Validate DOCUMENT and report the SARIF results."""
    doc = detect_document(document)
    args = validate_args(str(doc.path), doc.format.value, tool_args)
    log = validate_with_log(
        app.runner, args, show_progress=app.show_progress and output_format == "text"
    )

    if output_format == "json":
        click.echo(json.dumps({
            "document": doc.as_dict(),
            "has_errors": log.has_errors,
            "sarif": log.to_dict(),
        }, indent=2))
    else:
        print_sarif_log(log)

    sys.exit(1 if log.has_errors else 0)
