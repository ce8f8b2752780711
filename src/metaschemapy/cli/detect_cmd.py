"""``metaschema-py detect FILE...`` - Classify Metaschema documents.

Reports each file's kind (Metaschema module or meta-constraints) and
serialization format without running metaschema-cli.

Exit Codes:
    0 - Every file was classified.
    2 - At least one file could not be classified.
"""

from __future__ import annotations

import json
import sys

import click

from metaschemapy.cli.output import print_documents
from metaschemapy.documents import Document, detect_document
from metaschemapy.exceptions import MetaschemaError


@click.command("detect")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def detect_command(files: tuple[str, ...], output_format: str) -> None:
    """Detect the document kind and format of each FILE."""
    documents: list[Document] = []
    failures: dict[str, str] = {}
    for path in files:
        try:
            documents.append(detect_document(path))
        except MetaschemaError as exc:
            failures[path] = str(exc)

    if output_format == "json":
        payload = [doc.as_dict() for doc in documents]
        payload.extend({"path": path, "error": msg} for path, msg in failures.items())
        click.echo(json.dumps(payload, indent=2))
    else:
        print_documents(documents, failures)

    sys.exit(2 if failures else 0)
