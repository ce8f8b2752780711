"""Maven Central index for metaschema-cli releases.

The tool is published as ``dev.metaschema.java:metaschema-cli``. Its
``maven-metadata.xml`` lists every published version and names the current
release::

    <metadata>
      <versioning>
        <release>1.1.0</release>
        <versions>
          <version>1.0.0</version>
          <version>1.1.0</version>
        </versions>
      </versioning>
    </metadata>

Each release ships a platform-independent zip at
``{base}/{version}/metaschema-cli-{version}-metaschema-cli.zip``.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from metaschemapy.config import ToolConfig
from metaschemapy.exceptions import IndexParseError
from metaschemapy.installer.http_client import fetch_bytes, fetch_text

logger = logging.getLogger(__name__)

ARCHIVE_CLASSIFIER = "metaschema-cli"

LATEST = "latest"


@dataclass(frozen=True)
class VersionIndex:
    """Versions published to the index.

    Attributes:
        versions: All versions, in the order the index lists them.
        latest: The version the index designates as the release.
    """

    versions: tuple[str, ...]
    latest: str

    def __contains__(self, version: object) -> bool:
        return version in self.versions

    def newest_first(self) -> list[str]:
        return list(reversed(self.versions))


def parse_metadata(xml_text: str) -> VersionIndex:
    """Parse a ``maven-metadata.xml`` document into a VersionIndex.

    Raises:
        IndexParseError: If the XML is malformed or lacks versioning data.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise IndexParseError(f"Failed to parse Maven metadata: {exc}") from exc

    versioning = root.find("versioning")
    if versioning is None:
        raise IndexParseError("Maven metadata has no <versioning> element")

    versions = tuple(
        (v.text or "").strip()
        for v in versioning.findall("versions/version")
        if (v.text or "").strip()
    )
    release = (versioning.findtext("release") or "").strip()
    if not versions or not release:
        raise IndexParseError("Maven metadata lists no versions or no release")
    return VersionIndex(versions=versions, latest=release)


class MavenIndex:
    """Client for the metaschema-cli artifact on a Maven repository."""

    def __init__(self, config: ToolConfig | None = None) -> None:
        self.config = config or ToolConfig()

    def archive_url(self, version: str) -> str:
        artifact = self.config.tool_name
        return (
            f"{self.config.maven_base}/{version}/"
            f"{artifact}-{version}-{ARCHIVE_CLASSIFIER}.zip"
        )

    async def list_versions(self) -> VersionIndex:
        """Fetch and parse the version index.

        Raises:
            NetworkError: If the metadata cannot be fetched.
            IndexParseError: If the metadata is malformed.
        """
        xml_text = await fetch_text(
            self.config.metadata_url, timeout=self.config.http_timeout
        )
        index = parse_metadata(xml_text)
        logger.debug("Index lists %d versions, latest %s", len(index.versions), index.latest)
        return index

    async def download_archive(self, version: str) -> bytes:
        url = self.archive_url(version)
        logger.info("Downloading version %s from %s", version, url)
        data = await fetch_bytes(url, timeout=self.config.http_timeout)
        logger.info("Successfully downloaded version %s", version)
        return data
