"""Run ``validate`` with a SARIF log and read the log back.

The tool writes its findings as SARIF 2.1.0 JSON to a path given with
``-o``. ``validate_with_log`` picks a unique file name in the working
directory, runs the validation, parses whatever log was written and always
removes the file before returning, on success, failure or parse error.

If validation fails and no log was written, the ``ProcessError`` is
re-raised; its ``stderr`` is the tool's own error output.
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from metaschemapy.exceptions import LogParseError, ProcessError
from metaschemapy.runner.command import CommandRunner

logger = logging.getLogger(__name__)

LOG_PREFIX = "metaschema-cli-sarif-log-"

SARIF_FLAGS: tuple[str, ...] = ("--sarif-include-pass", "--show-stack-trace")


@dataclass(frozen=True)
class SarifResult:
    """One flattened ``runs[].results[]`` entry.

    Attributes:
        rule_id: The ``ruleId`` (constraint id), or empty.
        level: SARIF level: ``error``, ``warning``, ``note`` or ``none``.
        kind: SARIF kind, e.g. ``fail`` or ``pass``.
        message: The ``message.text``.
        location: First physical location URI, or empty.
    """

    rule_id: str
    level: str
    kind: str
    message: str
    location: str = ""


@dataclass
class SarifLog:
    """A parsed SARIF log. ``data`` is the document exactly as read."""

    data: dict[str, Any] = field(default_factory=dict)

    @property
    def version(self) -> str:
        return str(self.data.get("version", ""))

    @property
    def schema(self) -> str:
        return str(self.data.get("$schema", ""))

    @property
    def runs(self) -> list[dict[str, Any]]:
        runs = self.data.get("runs") or []
        return [r for r in runs if isinstance(r, dict)]

    def results(self) -> Iterator[SarifResult]:
        for run in self.runs:
            for raw in run.get("results") or []:
                if isinstance(raw, dict):
                    yield _to_result(raw)

    @property
    def has_errors(self) -> bool:
        return any(r.level == "error" for r in self.results())

    def to_dict(self) -> dict[str, Any]:
        return self.data

    @classmethod
    def from_json(cls, text: str) -> SarifLog:
        """Parse SARIF JSON text.

        Raises:
            LogParseError: If the text is not a JSON object.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise LogParseError(f"Failed to parse SARIF output: {exc}") from exc
        if not isinstance(data, dict):
            raise LogParseError("Failed to parse SARIF output: not a JSON object")
        return cls(data=data)


def _to_result(raw: dict[str, Any]) -> SarifResult:
    message = raw.get("message") or {}
    location = ""
    for loc in raw.get("locations") or []:
        uri = (
            (loc.get("physicalLocation") or {}).get("artifactLocation") or {}
        ).get("uri")
        if uri:
            location = str(uri)
            break
    return SarifResult(
        rule_id=str(raw.get("ruleId", "")),
        level=str(raw.get("level", "warning")),
        kind=str(raw.get("kind", "fail")),
        message=str(message.get("text", "")) if isinstance(message, dict) else "",
        location=location,
    )


def log_path(workdir: Path | None = None) -> Path:
    """Return a fresh, unique SARIF log path in ``workdir`` (default: cwd)."""
    return (workdir or Path.cwd()) / f"{LOG_PREFIX}{uuid.uuid4()}.json"


def validate_with_log(
    runner: CommandRunner,
    args: Sequence[str],
    *,
    workdir: Path | None = None,
    show_progress: bool = False,
) -> SarifLog:
    """Run ``validate`` and return the SARIF log it wrote.

    Args:
        runner: Runner used to invoke the tool.
        args: Caller's validate arguments (document path, options).
        workdir: Directory for the temporary log file.
        show_progress: Show a spinner while the tool runs.

    Returns:
        The parsed SARIF log, even when the tool exited non-zero.

    Raises:
        ProcessError: The tool failed and wrote no log.
        LogParseError: The log file is not valid SARIF JSON.
        ToolNotFoundError, SpawnError: The tool could not be run.
    """
    temp = log_path(workdir)
    sarif_args = [*args, "-o", str(temp), *SARIF_FLAGS]
    try:
        try:
            stdout, stderr = runner.run("validate", sarif_args, show_progress=show_progress)
            logger.debug("validate stdout:\n%s", stdout)
            if stderr:
                logger.debug("validate stderr:\n%s", stderr)
        except ProcessError as exc:
            if not temp.exists():
                raise
            logger.warning("validate exited with code %d; reading partial log", exc.exit_code)

        try:
            text = temp.read_text(encoding="utf-8")
        except OSError as exc:
            raise LogParseError(f"Failed to read SARIF output: {exc}") from exc
        return SarifLog.from_json(text)
    finally:
        temp.unlink(missing_ok=True)
