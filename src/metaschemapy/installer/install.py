"""Download, extract and alias a metaschema-cli release.

Install Algorithm:
    1. Fetch the version index (unless the caller already has one) and
       resolve the selector ("latest" or an
       explicit version). Unknown versions are a soft no-op.
    2. Create the install root (idempotent).
    3. Download the release zip and extract it over the install root.
    4. On POSIX, mark the launcher executable (0o755).
    5. Replace the alias in the scripts directory: a symlink on POSIX,
       a batch shim forwarding ``%*`` on Windows.

Any failure in these steps is raised as ``InstallError`` chained to the
original cause. Nothing is rolled back; re-running the install overwrites
the extracted files and the alias.
"""

from __future__ import annotations

import io
import logging
import os
import zipfile
from dataclasses import dataclass
from pathlib import Path

from metaschemapy.config import ToolConfig
from metaschemapy.exceptions import InstallError, MetaschemaError
from metaschemapy.installer.layout import InstallLayout
from metaschemapy.installer.maven import LATEST, MavenIndex, VersionIndex

logger = logging.getLogger(__name__)

_EXECUTABLE_MODE = 0o755


@dataclass(frozen=True)
class Installation:
    """A completed install.

    Attributes:
        version: The concrete version that was installed.
        install_dir: Directory holding the extracted release.
        entry_point: The launcher the alias points at.
        alias_path: The search-path entry used to invoke the tool.
    """

    version: str
    install_dir: Path
    entry_point: Path
    alias_path: Path


def resolve_version(selector: str, index: VersionIndex) -> str | None:
    """Resolve a version selector against the index.

    Args:
        selector: ``"latest"`` or an explicit version string.
        index: The published versions.

    Returns:
        The concrete version, or None if ``selector`` is not published.
        Unknown versions are logged together with the valid choices.
    """
    if selector == LATEST:
        return index.latest
    if selector in index:
        return selector
    logger.warning("Unknown metaschema-cli version: %s", selector)
    logger.warning("Available versions: %s", ", ".join(index.versions))
    return None


def batch_shim(target: Path) -> str:
    """Return the Windows batch shim that forwards all arguments to ``target``."""
    return f'@echo off\n"{target}" %*'


class Installer:
    """Installs metaschema-cli releases into the current environment.

    Usage::

        installer = Installer(ToolConfig.from_env())
        installation = asyncio.run(installer.install("latest"))
        if installation is None:
            ...  # unknown version, nothing installed
    """

    def __init__(
        self,
        config: ToolConfig | None = None,
        index: MavenIndex | None = None,
    ) -> None:
        self.config = config or ToolConfig()
        self.index = index or MavenIndex(self.config)
        self.layout = InstallLayout.from_config(self.config)

    async def list_versions(self) -> VersionIndex:
        return await self.index.list_versions()

    async def install(
        self, selector: str = LATEST, versions: VersionIndex | None = None
    ) -> Installation | None:
        """Install the selected version.

        Args:
            selector: ``"latest"`` or an explicit version string.
            versions: An already-fetched index; fetched when omitted.

        Returns:
            The Installation, or None if the version is not published.

        Raises:
            InstallError: If any step fails. Partial state is left in place.
        """
        try:
            if versions is None:
                versions = await self.index.list_versions()
            version = resolve_version(selector, versions)
            if version is None:
                return None
            logger.info("Installing version: %s", version)
            self.layout.install_dir.mkdir(parents=True, exist_ok=True)
            archive = await self.index.download_archive(version)
            return self._install_archive(version, archive)
        except (MetaschemaError, OSError, zipfile.BadZipFile) as exc:
            raise InstallError(f"Failed to install {self.config.tool_name}: {exc}") from exc

    def _install_archive(self, version: str, archive: bytes) -> Installation:
        layout = self.layout
        logger.info("Extracting %s to %s", self.config.tool_name, layout.install_dir)
        with zipfile.ZipFile(io.BytesIO(archive)) as zf:
            zf.extractall(layout.install_dir)

        if not layout.windows:
            logger.info("Setting executable permissions for %s", layout.entry_point)
            os.chmod(layout.entry_point, _EXECUTABLE_MODE)

        self._write_alias()
        logger.info("%s installed to %s", self.config.tool_name, layout.install_dir)
        logger.info("Alias created at %s", layout.alias_path)
        return Installation(
            version=version,
            install_dir=layout.install_dir,
            entry_point=layout.entry_point,
            alias_path=layout.alias_path,
        )

    def _write_alias(self) -> None:
        layout = self.layout
        alias = layout.alias_path
        target = layout.alias_target
        logger.info("Creating alias: %s => %s", alias, target)

        layout.bin_dir.mkdir(parents=True, exist_ok=True)
        # is_symlink() catches dangling links that exists() misses.
        if alias.exists() or alias.is_symlink():
            alias.unlink()

        if layout.windows:
            alias.write_text(batch_shim(target), encoding="utf-8")
        else:
            os.symlink(target, alias)
