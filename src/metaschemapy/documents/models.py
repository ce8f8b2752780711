"""Data models for sniffed documents: DocumentKind, DocumentFormat, Document.

Kept free of parsing code so the CLI formatters can import them without
pulling in the XML/YAML parsers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DocumentKind(str, Enum):
    """The two document kinds distinguished by root element name.

    METASCHEMA is a Metaschema module definition (the primary kind).
    META_CONSTRAINTS is an external constraint set applied to modules.
    """

    METASCHEMA = "Metaschema"
    META_CONSTRAINTS = "MetaConstraints"


class DocumentFormat(str, Enum):
    """Serialization format, chosen from the file extension."""

    XML = "xml"
    JSON = "json"
    YAML = "yaml"


@dataclass(frozen=True)
class Document:
    """A classified document.

    Attributes:
        path: Location of the file that was read.
        kind: Document kind derived from ``root_name``.
        format: Serialization format derived from the extension.
        root_name: Root element (XML) or first top-level key (JSON/YAML).
    """

    path: Path
    kind: DocumentKind
    format: DocumentFormat
    root_name: str

    def as_dict(self) -> dict[str, str]:
        return {
            "path": str(self.path),
            "kind": self.kind.value,
            "format": self.format.value,
            "root": self.root_name,
        }
