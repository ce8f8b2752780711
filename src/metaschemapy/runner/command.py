"""Locate and run the installed metaschema-cli.

``CommandRunner.run`` is synchronous: it blocks until the child exits and
returns the complete stdout and stderr. Output is drained through pipes as
it arrives, so long-running validations do not stall on full buffers.
There is no timeout; a hung tool hangs the caller.
"""

from __future__ import annotations

import contextlib
import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from metaschemapy.config import ToolConfig
from metaschemapy.exceptions import ProcessError, SpawnError, ToolNotFoundError
from metaschemapy.runner.spawner import ProcessSpawner, select_spawner

logger = logging.getLogger(__name__)

# Spinner frame every 100 ms: rich's "dots" frames are 80 ms apart at speed 1.0.
_SPINNER = "dots"
_SPINNER_SPEED = 0.8
_SPINNER_REFRESH = 10.0


@dataclass(frozen=True)
class InvocationResult:
    """Captured output of a single tool run.

    ``stderr`` may be non-empty even when ``exit_code`` is 0.
    """

    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CommandRunner:
    """Runs ``metaschema-cli <command> [args...]`` as a child process.

    Usage::

        runner = CommandRunner(ToolConfig.from_env())
        out, err = runner.run("validate", ["module.xml"])
    """

    def __init__(
        self,
        config: ToolConfig | None = None,
        spawner: ProcessSpawner | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config or ToolConfig()
        self.spawner = spawner or select_spawner(self.config.windows)
        self.console = console or Console(stderr=True)

    def locate(self) -> str:
        """Return the first ``metaschema-cli`` on the search path.

        Raises:
            ToolNotFoundError: If the tool is not on ``PATH``.
        """
        found = shutil.which(self.config.tool_name)
        if not found:
            raise ToolNotFoundError(f"{self.config.tool_name} not found on PATH")
        return found

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        *,
        show_progress: bool = False,
    ) -> tuple[str, str]:
        """Run a tool sub-command and return ``(stdout, stderr)``.

        Raises:
            ToolNotFoundError: If the tool cannot be located.
            SpawnError: If the process cannot be started.
            ProcessError: If the tool exits non-zero.
        """
        result = self.run_result(command, args, show_progress=show_progress)
        if not result.ok:
            raise ProcessError(result.exit_code, result.stderr)
        return result.stdout, result.stderr

    def run_result(
        self,
        command: str,
        args: Sequence[str] = (),
        *,
        show_progress: bool = False,
    ) -> InvocationResult:
        """Run a tool sub-command and return the result whatever the exit code."""
        executable = self.locate()
        full_args = [command, *args]
        logger.info("%s %s", self.config.tool_name, " ".join(full_args))

        try:
            process = self.spawner.spawn(executable, full_args)
        except OSError as exc:
            raise SpawnError(
                f"Failed to start {self.config.tool_name} process: {exc}"
            ) from exc

        with self._progress(show_progress):
            stdout, stderr = process.communicate()

        logger.debug("%s exited with code %d", self.config.tool_name, process.returncode)
        return InvocationResult(
            stdout=stdout or "", stderr=stderr or "", exit_code=process.returncode
        )

    def _progress(self, enabled: bool) -> contextlib.AbstractContextManager[object]:
        if not enabled:
            return contextlib.nullcontext()
        # Drawn on the stderr console and transient, so nothing is left behind.
        return self.console.status(
            "", spinner=_SPINNER, speed=_SPINNER_SPEED, refresh_per_second=_SPINNER_REFRESH
        )

    def is_installed(self, workdir: Path | None = None) -> bool:
        """True if the tool is on ``PATH`` or present in the working directory."""
        try:
            self.locate()
            return True
        except ToolNotFoundError:
            local = (workdir or Path.cwd()) / self.config.tool_name
            return local.exists()


def is_java_installed() -> bool:
    """metaschema-cli is a Java program and needs ``java`` on the search path."""
    return shutil.which("java") is not None
