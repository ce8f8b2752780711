"""Filesystem layout of an installed metaschema-cli.

The install root lives under the Python environment's data prefix, the
counterpart of a package manager's configured prefix, and the alias goes in
the environment's scripts directory, which is on ``PATH`` whenever the
environment is active.
"""

from __future__ import annotations

import sysconfig
from dataclasses import dataclass
from pathlib import Path

from metaschemapy.config import ToolConfig


@dataclass(frozen=True)
class InstallLayout:
    """Resolved install locations.

    Attributes:
        install_dir: Directory the release archive is extracted into.
        entry_point: The tool's launcher script inside the archive.
        bin_dir: Search-path directory that receives the alias.
        alias_path: Symlink (POSIX) or batch shim (Windows) in ``bin_dir``.
        windows: Whether the layout targets Windows.
    """

    install_dir: Path
    entry_point: Path
    bin_dir: Path
    alias_path: Path
    windows: bool

    @property
    def alias_target(self) -> Path:
        """The file the alias forwards to; Windows uses the ``.bat`` launcher."""
        if self.windows:
            return self.entry_point.with_name(self.entry_point.name + ".bat")
        return self.entry_point

    @classmethod
    def from_config(cls, config: ToolConfig) -> InstallLayout:
        if config.prefix is not None:
            prefix = Path(config.prefix)
            bin_dir = prefix / ("Scripts" if config.windows else "bin")
        else:
            prefix = Path(sysconfig.get_path("data"))
            bin_dir = Path(sysconfig.get_path("scripts"))

        install_dir = prefix / "lib" / config.tool_name
        alias_name = config.tool_name + (".bat" if config.windows else "")
        return cls(
            install_dir=install_dir,
            entry_point=install_dir / "bin" / config.tool_name,
            bin_dir=bin_dir,
            alias_path=bin_dir / alias_name,
            windows=config.windows,
        )
