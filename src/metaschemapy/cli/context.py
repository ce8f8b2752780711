"""Shared state handed to every command through ``ctx.obj``."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from dataclasses import dataclass, field
from typing import Any, TypeVar

from metaschemapy.config import ToolConfig
from metaschemapy.installer import Installation, Installer
from metaschemapy.runner import CommandRunner

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine in a synchronous context."""
    return asyncio.run(coro)


@dataclass
class AppContext:
    """Config plus the installer and runner built from it.

    Attributes:
        config: Effective tool configuration.
        installer: Installs releases into the environment.
        runner: Runs the installed tool.
        show_progress: Show a spinner while the tool runs.
    """

    config: ToolConfig = field(default_factory=ToolConfig.from_env)
    installer: Installer | None = None
    runner: CommandRunner | None = None
    show_progress: bool = False

    def __post_init__(self) -> None:
        if self.installer is None:
            self.installer = Installer(self.config)
        if self.runner is None:
            self.runner = CommandRunner(self.config)

    def ensure_installed(self) -> Installation | None:
        """Install the latest release if the tool is not already available."""
        if self.runner.is_installed():
            return None
        logger.warning("%s is not installed; installing latest", self.config.tool_name)
        return run_async(self.installer.install())
