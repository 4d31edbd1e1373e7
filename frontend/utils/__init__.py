"""Utilities for the PDF stamp frontend."""
from frontend.utils.session_state import SessionState
from frontend.utils.exceptions import (
    StamperError,
    ConfigValidationError,
    FileValidationError,
    SubmissionError,
    TransportError,
    ServiceError,
)
from frontend.utils.validators import (
    ValidationResult,
    FileValidator,
)

__all__ = [
    # Session state
    "SessionState",
    # Exceptions
    "StamperError",
    "ConfigValidationError",
    "FileValidationError",
    "SubmissionError",
    "TransportError",
    "ServiceError",
    # Validators
    "ValidationResult",
    "FileValidator",
]
