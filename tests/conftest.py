"""Shared fixtures for metaschema-py tests."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from metaschemapy.config import ToolConfig
from tests.helpers import fake_tool_source


@pytest.fixture
def prefix_config(tmp_path: Path) -> ToolConfig:
    """A POSIX config rooted at a temporary prefix."""
    return ToolConfig(prefix=tmp_path / "prefix", windows=False)


@pytest.fixture
def fake_tool(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Put an executable fake ``metaschema-cli`` first on PATH."""
    bin_dir = tmp_path / "fake-bin"
    bin_dir.mkdir()
    tool = bin_dir / "metaschema-cli"
    tool.write_text(fake_tool_source(), encoding="utf-8")
    tool.chmod(tool.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return tool


@pytest.fixture
def empty_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point PATH at an empty directory so nothing can be found."""
    empty = tmp_path / "empty-bin"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    return empty
