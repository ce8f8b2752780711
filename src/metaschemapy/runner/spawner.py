"""Platform-specific process spawning.

On Windows the tool alias is a batch shim, which ``CreateProcess`` cannot
execute directly, so the command is routed through ``cmd.exe /c`` with the
arguments passed verbatim. Elsewhere the executable is spawned directly.
The variant is chosen once, by ``select_spawner``, rather than at every call
site.
"""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence


class ProcessSpawner(ABC):
    """Starts the tool as a child process with piped output streams."""

    @abstractmethod
    def command_line(self, executable: str, args: Sequence[str]) -> str | list[str]:
        """Build the ``args`` value handed to ``subprocess.Popen``."""

    def spawn(self, executable: str, args: Sequence[str]) -> subprocess.Popen[str]:
        """Start the process.

        Raises:
            OSError: If the process cannot be started.
        """
        return subprocess.Popen(
            self.command_line(executable, args),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )


class PosixSpawner(ProcessSpawner):
    """Spawns the executable directly."""

    def command_line(self, executable: str, args: Sequence[str]) -> list[str]:
        return [executable, *args]


class WindowsSpawner(ProcessSpawner):
    """Spawns through ``cmd.exe /c`` so batch shims run."""

    def command_line(self, executable: str, args: Sequence[str]) -> str:
        # A string is passed to CreateProcess untouched, i.e. verbatim.
        return " ".join(["cmd.exe", "/c", executable, *args])


def select_spawner(windows: bool) -> ProcessSpawner:
    return WindowsSpawner() if windows else PosixSpawner()
