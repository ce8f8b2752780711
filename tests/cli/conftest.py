"""Shared fixtures for CLI tests.

Provides in-memory stand-ins for the installer and runner so commands can
be exercised without network access or a real metaschema-cli.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner

from metaschemapy.cli.context import AppContext
from metaschemapy.config import ToolConfig
from metaschemapy.exceptions import ProcessError
from metaschemapy.installer import Installation, VersionIndex, resolve_version
from metaschemapy.runner import InvocationResult

INDEX = VersionIndex(versions=("1.0.0", "1.1.0"), latest="1.1.0")


class FakeInstaller:
    """Records install requests; resolves versions like the real one."""

    def __init__(self, index: VersionIndex = INDEX, error: Exception | None = None) -> None:
        self.index = index
        self.error = error
        self.installs: list[str] = []
        self.listings = 0
        self.prefetched: list[VersionIndex | None] = []

    async def list_versions(self) -> VersionIndex:
        self.listings += 1
        return self.index

    async def install(
        self, selector: str = "latest", versions: VersionIndex | None = None
    ) -> Installation | None:
        self.installs.append(selector)
        self.prefetched.append(versions)
        if self.error is not None:
            raise self.error
        if versions is None:
            versions = await self.list_versions()
        version = resolve_version(selector, versions)
        if version is None:
            return None
        root = Path("/env/lib/metaschema-cli")
        return Installation(
            version=version,
            install_dir=root,
            entry_point=root / "bin" / "metaschema-cli",
            alias_path=Path("/env/bin/metaschema-cli"),
        )


class FakeRunner:
    """Records tool invocations and replays canned output."""

    def __init__(self) -> None:
        self.installed = True
        self.stdout = ""
        self.stderr = ""
        self.exit_code = 0
        self.error: Exception | None = None
        self.log_text: str | None = None
        self.calls: list[tuple[str, list[str]]] = []

    def is_installed(self, workdir: Path | None = None) -> bool:
        return self.installed

    def run_result(
        self, command: str, args: Sequence[str] = (), *, show_progress: bool = False
    ) -> InvocationResult:
        args = list(args)
        self.calls.append((command, args))
        if self.log_text is not None and "-o" in args:
            Path(args[args.index("-o") + 1]).write_text(self.log_text, encoding="utf-8")
        if self.error is not None:
            raise self.error
        return InvocationResult(self.stdout, self.stderr, self.exit_code)

    def run(
        self, command: str, args: Sequence[str] = (), *, show_progress: bool = False
    ) -> tuple[str, str]:
        result = self.run_result(command, args, show_progress=show_progress)
        if not result.ok:
            raise ProcessError(result.exit_code, result.stderr)
        return result.stdout, result.stderr


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def fake_installer() -> FakeInstaller:
    return FakeInstaller()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def app(tmp_path: Path, fake_installer: FakeInstaller, fake_runner: FakeRunner) -> AppContext:
    return AppContext(
        config=ToolConfig(prefix=tmp_path / "prefix", windows=False),
        installer=fake_installer,  # type: ignore[arg-type]
        runner=fake_runner,  # type: ignore[arg-type]
    )
