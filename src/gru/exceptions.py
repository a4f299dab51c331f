"""gru custom exceptions."""

from __future__ import annotations


class GruError(Exception):
    """Base exception for gru.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str) -> None:
        """Initialize GruError.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


class AttributeParseError(GruError):
    """Exception raised when an attribute document cannot be parsed.

    The raw document is kept so the offending content can be shown when the
    library fails to load.
    """

    def __init__(
        self,
        source: str,
        raw: str,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize AttributeParseError.

        Args:
            source: Name of the document that failed to parse.
            raw: Raw content of the document.
            original_error: The underlying parse or validation error.
        """
        detail = f": {original_error}" if original_error else ""
        super().__init__(f"could not parse attribute document {source}{detail}")
        self.source = source
        self.raw = raw
        self.original_error = original_error

    def __str__(self) -> str:
        """Return the error message followed by the raw document."""
        return f"{self.message}\n{self.raw}"


class AttributeExistsError(GruError):
    """Exception raised when registering an attribute name that is already known."""

    def __init__(self, name: str) -> None:
        """Initialize AttributeExistsError.

        Args:
            name: The attribute name that is already registered.
        """
        super().__init__(f"{name} already exists")
        self.name = name


class AttributeSourceNotFoundError(GruError):
    """Exception raised when a BIOS attribute corpus or directory is missing."""

    def __init__(self, message: str, location: str) -> None:
        """Initialize AttributeSourceNotFoundError.

        Args:
            message: Human-readable error message.
            location: The generation or directory that was not found.
        """
        super().__init__(message)
        self.location = location


class NoHostsError(GruError):
    """Exception raised when no hosts were given on the command line or stdin."""

    def __init__(self, message: str = "no hosts given") -> None:
        super().__init__(message)


class RenderError(GruError):
    """Exception raised when results cannot be rendered.

    Result records are expected to be JSON-serializable by construction, so
    this signals a programming error upstream and is never handled.
    """

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.original_error = original_error
