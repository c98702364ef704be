"""Exceptions raised while loading option documentation."""

from pathlib import Path


class DocumentationError(Exception):
    """Base class for recoverable documentation loading failures."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialise error with a message and the offending file.

        Args:
            message: Human-readable description of the failure.
            path: Path of the options file, when known.
        """
        super().__init__(message)
        self.path = path


class DocumentationReadError(DocumentationError):
    """The options file could not be read."""


class DocumentationParseError(DocumentationError):
    """The options JSON is malformed or does not match the expected shape."""


class ConfigurationError(RuntimeError):
    """A required configuration value is missing.

    Not part of the recoverable taxonomy: the surrounding tool must make sure
    the value is set before asking a source to refresh.
    """
