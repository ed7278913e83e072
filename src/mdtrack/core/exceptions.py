"""Custom exceptions for mdtrack."""


class MdTrackError(Exception):
    """Base exception for all mdtrack errors."""

    pass


class ConfigError(MdTrackError):
    """Tracker block text is structurally invalid.

    Raised for user-authored configuration problems (missing required field,
    conflicting modes, malformed source). Retrying reproduces the same error,
    so callers surface it to the user instead.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        example: str | None = None,
    ):
        """Initialize exception with an optional remediation hint.

        Args:
            message: What is wrong with the block.
            hint: Short suggestion on how to fix it.
            example: Example snippet showing a valid configuration.
        """
        self.message = message
        self.hint = hint
        self.example = example
        super().__init__(message)


class SourceError(MdTrackError):
    """Document store operation failed."""

    pass


class DocumentNotFoundError(SourceError):
    """Document does not exist in the store."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Document not found: {path}")


class FolderNotFoundError(SourceError):
    """Folder does not exist in the store."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Folder not found: {path}")


class DocumentReadError(SourceError):
    """Document exists but could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class PatternError(MdTrackError):
    """Regular expression pattern is invalid."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regex pattern {pattern!r}: {reason}")
