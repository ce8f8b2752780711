"""Detect the format and kind of a Metaschema document.

The format comes from the file extension alone. The kind comes from the
root: the root element of an XML document, or the first top-level key of a
JSON or YAML mapping. A document with no root key (an empty mapping,
a sequence, a JSON scalar) has an empty root name. Only ``metaschema-meta-constraints`` is recognised as
a constraint set; every other root, including ``METASCHEMA``, falls back to
the Metaschema kind.
"""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

import yaml

from metaschemapy.documents.models import Document, DocumentFormat, DocumentKind
from metaschemapy.exceptions import (
    DocumentParseError,
    DocumentReadError,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)

_EXTENSION_FORMATS: dict[str, DocumentFormat] = {
    ".xml": DocumentFormat.XML,
    ".json": DocumentFormat.JSON,
    ".yaml": DocumentFormat.YAML,
    ".yml": DocumentFormat.YAML,
}

_ROOT_KINDS: dict[str, DocumentKind] = {
    "metaschema-meta-constraints": DocumentKind.META_CONSTRAINTS,
    "METASCHEMA": DocumentKind.METASCHEMA,
}


def is_supported_file(path: str | Path) -> bool:
    """Return True if the file extension is one the sniffer understands."""
    return Path(path).suffix.lower() in _EXTENSION_FORMATS


def kind_for_root(root_name: str) -> DocumentKind:
    """Map a root element name to a document kind (Metaschema by default)."""
    return _ROOT_KINDS.get(root_name, DocumentKind.METASCHEMA)


def classify(path: str | Path) -> tuple[DocumentKind, DocumentFormat]:
    """Classify a document as ``(kind, format)``.

    Args:
        path: Path to an ``.xml``, ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        Tuple of the inferred DocumentKind and DocumentFormat.

    Raises:
        UnsupportedFormatError: For any other extension. The file is not read.
        DocumentReadError: If the file cannot be read as UTF-8 text.
        DocumentParseError: If the content is malformed for its format.
    """
    document = detect_document(path)
    return document.kind, document.format


def detect_document(path: str | Path) -> Document:
    """Classify a document and return the full ``Document`` record."""
    target = Path(path)
    fmt = _EXTENSION_FORMATS.get(target.suffix.lower())
    if fmt is None:
        raise UnsupportedFormatError(
            f"Unsupported file format '{target.suffix}'. "
            "Only XML, YAML and JSON are supported."
        )

    try:
        content = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(f"Cannot read {target}: {exc}") from exc

    root_name = _root_name(content, fmt)
    kind = kind_for_root(root_name)
    logger.debug("Classified %s: root=%s kind=%s", target, root_name, kind.value)
    return Document(path=target, kind=kind, format=fmt, root_name=root_name)


def _root_name(content: str, fmt: DocumentFormat) -> str:
    if fmt is DocumentFormat.XML:
        return _xml_root(content)
    if fmt is DocumentFormat.JSON:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise DocumentParseError(f"Failed to parse JSON: {exc}") from exc
    else:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise DocumentParseError(f"Failed to parse YAML: {exc}") from exc
    return _first_key(data, fmt)


def _xml_root(content: str) -> str:
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise DocumentParseError(f"Failed to parse XML: {exc}") from exc
    tag = root.tag
    # Clark notation: {namespace}local-name
    if tag.startswith("{"):
        tag = tag.split("}", 1)[1]
    return tag


def _first_key(data: Any, fmt: DocumentFormat) -> str:
    # Only null (and, for YAML, scalars) are rejected. Sequences, empty
    # mappings and JSON scalars have no root key and take the default kind.
    if data is None:
        if fmt is DocumentFormat.JSON:
            raise DocumentParseError("Failed to parse JSON: document is null")
        raise DocumentParseError(f"Invalid {fmt.value.upper()} structure")
    if fmt is DocumentFormat.YAML and not isinstance(data, (dict, list)):
        raise DocumentParseError("Invalid YAML structure")
    if isinstance(data, dict) and data:
        return str(next(iter(data)))
    return ""
