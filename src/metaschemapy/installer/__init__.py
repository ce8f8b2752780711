"""Installer for versioned metaschema-cli releases from Maven Central."""

from metaschemapy.installer.install import Installation, Installer, resolve_version
from metaschemapy.installer.layout import InstallLayout
from metaschemapy.installer.maven import LATEST, MavenIndex, VersionIndex

__all__ = [
    "LATEST",
    "InstallLayout",
    "Installation",
    "Installer",
    "MavenIndex",
    "VersionIndex",
    "resolve_version",
]
