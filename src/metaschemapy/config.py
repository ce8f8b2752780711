"""Runtime configuration defaults."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from pathlib import Path

TOOL_NAME = "metaschema-cli"

MAVEN_BASE_URL = "https://repo1.maven.org/maven2/dev/metaschema/java/metaschema-cli"

PREFIX_ENV = "METASCHEMA_PY_PREFIX"
MAVEN_BASE_ENV = "METASCHEMA_PY_MAVEN_BASE"


def _is_windows() -> bool:
    return platform.system() == "Windows"


@dataclass(slots=True)
class ToolConfig:
    tool_name: str = TOOL_NAME
    maven_base: str = MAVEN_BASE_URL
    prefix: Path | None = None
    windows: bool = field(default_factory=_is_windows)
    http_timeout: float = 60.0

    @property
    def metadata_url(self) -> str:
        return f"{self.maven_base}/maven-metadata.xml"

    @classmethod
    def from_env(cls) -> ToolConfig:
        """Build a config, honouring the ``METASCHEMA_PY_*`` overrides."""
        config = cls()
        prefix = os.environ.get(PREFIX_ENV)
        if prefix:
            config.prefix = Path(prefix).expanduser()
        base = os.environ.get(MAVEN_BASE_ENV)
        if base:
            config.maven_base = base.rstrip("/")
        return config
