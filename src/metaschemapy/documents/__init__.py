"""Metaschema document sniffing: format and root-element classification."""

from metaschemapy.documents.models import Document, DocumentFormat, DocumentKind
from metaschemapy.documents.sniffer import classify, detect_document, is_supported_file

__all__ = [
    "Document",
    "DocumentFormat",
    "DocumentKind",
    "classify",
    "detect_document",
    "is_supported_file",
]
