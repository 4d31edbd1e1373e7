"""Custom exceptions for the PDF stamp frontend.

This module defines a hierarchy of exceptions for better error handling
and more informative error messages.

Exception Hierarchy:
    StamperError (base)
    ├── ConfigValidationError
    ├── FileValidationError
    └── SubmissionError
        ├── TransportError
        └── ServiceError
"""

from typing import List, Optional


class StamperError(Exception):
    """Base exception for the stamp frontend.

    All custom exceptions in this application should inherit from this class.
    This allows catching all application-specific errors with a single except clause.

    Example:
        >>> try:
        ...     build_config(form)
        ... except StamperError as e:
        ...     show_error(e.message)
    """

    def __init__(self, message: str = "An error occurred while stamping"):
        self.message = message
        super().__init__(self.message)


class ConfigValidationError(StamperError):
    """Raised when a structurally required configuration field is missing.

    Raised locally by the configuration builder, before any network call.

    Attributes:
        errors: One message per missing or invalid field

    Example:
        >>> raise ConfigValidationError(["Publisher ID is required"])
    """

    def __init__(self, errors: List[str], message: str = None):
        self.errors = list(errors)
        super().__init__(message or "; ".join(self.errors) or "Invalid stamp configuration")


class FileValidationError(StamperError):
    """Raised when an attachment fails validation.

    This can occur for various reasons:
    - No source PDF was selected
    - File is empty
    - File is not a PDF / not a supported image
    - File is too large

    Attributes:
        filename: Name of the file that failed validation (optional)

    Example:
        >>> raise FileValidationError("PDF file is empty", filename="paper.pdf")
    """

    def __init__(self, message: str = "File validation failed", filename: str = None):
        self.filename = filename
        super().__init__(message)


class SubmissionError(StamperError):
    """Base class for errors raised while talking to the stamping service."""

    def __init__(self, message: str = "Stamp submission failed"):
        super().__init__(message)


class TransportError(SubmissionError):
    """Raised when the request cannot be completed (connectivity, DNS, etc.).

    Attributes:
        url: The URL that could not be reached (optional)
    """

    def __init__(self, message: str = "Could not reach stamping service", url: str = None):
        self.url = url
        super().__init__(message)


class ServiceError(SubmissionError):
    """Raised when the stamping service answers with a non-success status.

    The message is the response body verbatim, or the status text when the
    body is empty.

    Attributes:
        status_code: HTTP status code returned by the service

    Example:
        >>> raise ServiceError("bad request", status_code=400)
    """

    def __init__(self, message: str = "Stamping service error", status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
