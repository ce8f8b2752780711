"""Tests for InstallLayout path derivation."""

from __future__ import annotations

import sysconfig
from pathlib import Path

from metaschemapy.config import ToolConfig
from metaschemapy.installer import InstallLayout


class TestInstallLayout:
    def test_posix_prefix(self, tmp_path: Path) -> None:
        layout = InstallLayout.from_config(ToolConfig(prefix=tmp_path, windows=False))
        assert layout.install_dir == tmp_path / "lib" / "metaschema-cli"
        assert layout.entry_point == tmp_path / "lib" / "metaschema-cli" / "bin" / "metaschema-cli"
        assert layout.bin_dir == tmp_path / "bin"
        assert layout.alias_path == tmp_path / "bin" / "metaschema-cli"
        assert layout.alias_target == layout.entry_point

    def test_windows_prefix(self, tmp_path: Path) -> None:
        layout = InstallLayout.from_config(ToolConfig(prefix=tmp_path, windows=True))
        assert layout.bin_dir == tmp_path / "Scripts"
        assert layout.alias_path == tmp_path / "Scripts" / "metaschema-cli.bat"
        assert layout.alias_target.name == "metaschema-cli.bat"
        assert layout.alias_target.parent == layout.entry_point.parent

    def test_default_uses_interpreter_paths(self) -> None:
        layout = InstallLayout.from_config(ToolConfig(windows=False))
        assert layout.bin_dir == Path(sysconfig.get_path("scripts"))
        assert layout.install_dir == Path(sysconfig.get_path("data")) / "lib" / "metaschema-cli"


class TestToolConfigFromEnv:
    def test_prefix_override(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("METASCHEMA_PY_PREFIX", str(tmp_path))
        monkeypatch.setenv("METASCHEMA_PY_MAVEN_BASE", "https://mirror.example/m2/")
        config = ToolConfig.from_env()
        assert config.prefix == tmp_path
        assert config.maven_base == "https://mirror.example/m2"
        assert config.metadata_url == "https://mirror.example/m2/maven-metadata.xml"

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("METASCHEMA_PY_PREFIX", raising=False)
        monkeypatch.delenv("METASCHEMA_PY_MAVEN_BASE", raising=False)
        config = ToolConfig.from_env()
        assert config.prefix is None
        assert config.tool_name == "metaschema-cli"
