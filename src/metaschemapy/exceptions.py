"""metaschema-py exception hierarchy.

All public exceptions inherit from MetaschemaError, giving callers a single
base class to catch when they want to handle any metaschema-py failure
without swallowing unrelated errors. The CLI uses ``exit_code`` to pick the
process exit status.
"""

from __future__ import annotations


class MetaschemaError(Exception):
    """Base exception for all metaschema-py errors."""

    exit_code: int = 1


class UnsupportedFormatError(MetaschemaError):
    """Raised when a document's extension is not XML, JSON or YAML."""


class ParseError(MetaschemaError):
    """Raised when content cannot be parsed.

    Subclasses distinguish which kind of content was being read.
    """


class DocumentParseError(ParseError):
    """Raised when a Metaschema document is malformed for its format."""


class IndexParseError(ParseError):
    """Raised when the remote version index cannot be parsed."""


class LogParseError(ParseError):
    """Raised when a SARIF log written by the tool cannot be parsed."""


class DocumentReadError(MetaschemaError):
    """Raised when a document cannot be read from disk."""


class NetworkError(MetaschemaError):
    """Raised on HTTP errors or transport failures.

    Attributes:
        url: The URL that was requested.
        status_code: HTTP status when the server answered, else None.
    """

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class InstallError(MetaschemaError):
    """Raised when installing metaschema-cli fails at any step.

    The install root may be left partially populated; re-running the
    install overwrites it.
    """


class ToolNotFoundError(MetaschemaError):
    """Raised when metaschema-cli cannot be found on the search path."""


class SpawnError(MetaschemaError):
    """Raised when the tool process cannot be started at all."""


class ProcessError(MetaschemaError):
    """Raised when the tool exits with a non-zero status.

    Attributes:
        exit_code: The child's exit status.
        stderr: Everything the child wrote to standard error.
    """

    def __init__(self, exit_code: int, stderr: str) -> None:
        super().__init__(f"metaschema-cli exited with code {exit_code}:\n{stderr}")
        self.exit_code = exit_code
        self.stderr = stderr
