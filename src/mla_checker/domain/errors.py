"""Domain errors: custom exceptions for the MLA checker.

These exceptions are raised by domain services and caught by application
or presentation layers. They carry no infrastructure dependencies.
"""


class MLACheckerError(Exception):
    """Base exception for all MLA checker errors."""


class ParseError(MLACheckerError):
    """Raised when a document package cannot be turned into a model.

    Covers an unreadable archive and a missing or malformed main document
    part. The underlying cause is chained as ``__cause__``.
    """


class UnsupportedFormatError(MLACheckerError):
    """Raised when a file is not a .docx package."""


class ConfigurationError(MLACheckerError):
    """Raised when configuration is invalid or missing."""
