"""metaschema-py: install, manage and drive the metaschema-cli validation tool."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
