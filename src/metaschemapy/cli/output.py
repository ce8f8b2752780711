"""Rich output formatting helpers for the metaschema-py CLI.

SARIF level color mapping:
    error = bold red, warning = yellow, note = cyan, none/pass = green
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from metaschemapy.documents import Document
from metaschemapy.installer import Installation, VersionIndex
from metaschemapy.runner import SarifLog

_LEVEL_STYLES: dict[str, str] = {
    "error": "bold red",
    "warning": "yellow",
    "note": "cyan",
    "none": "green",
}

console = Console()
error_console = Console(stderr=True)


def level_style(level: str) -> str:
    """Return the Rich style string for a SARIF result level."""
    return _LEVEL_STYLES.get(level, "white")


def print_error(message: str) -> None:
    error_console.print(Text.assemble(("Error: ", "bold red"), message))


def print_versions(index: VersionIndex) -> None:
    """Print published versions, newest first, marking the release."""
    table = Table(title="metaschema-cli Versions", show_header=True, header_style="bold")
    table.add_column("Version", style="bold")
    table.add_column("Release", justify="center")
    for version in index.newest_first():
        marker = Text("latest", style="green") if version == index.latest else Text("")
        table.add_row(version, marker)
    console.print(table)


def print_unknown_version(version: str, index: VersionIndex) -> None:
    error_console.print(f"[red]Unknown version: {version}[/red]")
    error_console.print("[yellow]Available versions:[/yellow]")
    for v in index.newest_first():
        error_console.print(f"[blue]- {v}[/blue]")
    error_console.print("[blue]- latest[/blue]")


def print_installation(installation: Installation) -> None:
    header = Text.assemble(
        ("Version: ", "bold"), (installation.version, "blue"),
    )
    console.print(Panel(header, title="metaschema-cli installed"))
    console.print(f"  Installed to: {installation.install_dir}")
    console.print(f"  Alias:        {installation.alias_path}")


def print_documents(documents: list[Document], failures: dict[str, str]) -> None:
    """Print a table of classified documents, then any failures."""
    if documents:
        table = Table(title="Document Types", show_header=True, header_style="bold")
        table.add_column("File", style="bold")
        table.add_column("Kind")
        table.add_column("Format", style="dim")
        for doc in documents:
            table.add_row(str(doc.path), doc.kind.value, doc.format.value)
        console.print(table)
    for path, message in failures.items():
        console.print(f"[red]{path}: {message}[/red]")


def print_sarif_log(log: SarifLog) -> None:
    """Print the results of a SARIF log as a table with a summary line."""
    results = list(log.results())
    if not results:
        console.print("[dim]No results reported.[/dim]")
        return

    table = Table(title="Validation Results", show_header=True, header_style="bold")
    table.add_column("Level", justify="center")
    table.add_column("Rule")
    table.add_column("Message")
    table.add_column("Location", style="dim")
    for r in results:
        table.add_row(
            Text(r.level, style=level_style(r.level)), r.rule_id, r.message, r.location,
        )
    console.print(table)

    errors = sum(1 for r in results if r.level == "error")
    parts = [f"[bold]{len(results)}[/bold] results"]
    if errors:
        parts.append(f"[red]{errors} errors[/red]")
    else:
        parts.append("[green]valid[/green]")
    console.print(" | ".join(parts))
