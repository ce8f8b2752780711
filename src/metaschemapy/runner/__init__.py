"""Command runner for metaschema-cli and SARIF result-log reading."""

from metaschemapy.runner.command import CommandRunner, InvocationResult, is_java_installed
from metaschemapy.runner.sarif import SarifLog, SarifResult, validate_with_log
from metaschemapy.runner.spawner import (
    PosixSpawner,
    ProcessSpawner,
    WindowsSpawner,
    select_spawner,
)

__all__ = [
    "CommandRunner",
    "InvocationResult",
    "PosixSpawner",
    "ProcessSpawner",
    "SarifLog",
    "SarifResult",
    "WindowsSpawner",
    "is_java_installed",
    "select_spawner",
    "validate_with_log",
]
