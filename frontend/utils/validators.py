"""Input validation utilities.

This module provides validation for the files attached to a stamp request:
- Source PDF documents
- Logo images

All validators return ValidationResult objects for consistent error handling.
"""

import re
import logging
from dataclasses import dataclass, field
from typing import List
from pathlib import Path

from frontend.config.settings import config

logger = logging.getLogger(__name__)

PDF_MAGIC = b'%PDF-'


@dataclass
class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        errors: List of error messages (empty if valid)
        warnings: List of warning messages (non-fatal issues)

    Example:
        >>> result = ValidationResult(is_valid=True)
        >>> if result.is_valid:
        ...     submit()
    """
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        """Allow using result in boolean context."""
        return self.is_valid

    def add_error(self, error: str) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)


class FileValidator:
    """Validates stamp request attachments.

    Attachments are duck-typed: anything with ``filename`` and ``content``
    (bytes) attributes.
    """

    @classmethod
    def validate_source_pdf(cls, attachment) -> ValidationResult:
        """Validate the source document.

        Checks:
        1. A file was selected
        2. File is not empty
        3. File size is within limits
        4. Content starts with the PDF header

        Args:
            attachment: Source file attachment

        Returns:
            ValidationResult with is_valid flag and any errors
        """
        result = ValidationResult(is_valid=True)

        if attachment is None:
            result.add_error("No source PDF selected")
            return result

        content = attachment.content or b''
        if not content:
            result.add_error("PDF file is empty")
            return result

        if len(content) > config.MAX_PDF_SIZE_BYTES:
            result.add_error(
                f"PDF too large ({len(content) / 1024 / 1024:.1f}MB). "
                f"Maximum: {config.MAX_PDF_SIZE_MB}MB"
            )

        if not content.startswith(PDF_MAGIC):
            result.add_error(f"'{attachment.filename}' is not a PDF document")

        if Path(attachment.filename or '').suffix.lower() != '.pdf':
            result.add_warning("Source file does not have a .pdf extension")

        return result

    @classmethod
    def validate_image(cls, attachment) -> ValidationResult:
        """Validate a logo image.

        Args:
            attachment: Image attachment

        Returns:
            ValidationResult with is_valid flag and any errors
        """
        result = ValidationResult(is_valid=True)

        if attachment is None:
            result.add_error("No logo image selected")
            return result

        ext = Path(attachment.filename or '').suffix.lower()
        if ext not in config.ALLOWED_IMAGE_EXTENSIONS:
            result.add_error(
                f"Invalid image type '{ext}'. "
                f"Allowed: {', '.join(sorted(config.ALLOWED_IMAGE_EXTENSIONS))}"
            )

        content = attachment.content or b''
        if not content:
            result.add_error("Logo image is empty")
        elif len(content) > config.MAX_IMAGE_SIZE_BYTES:
            result.add_error(
                f"Image too large ({len(content) / 1024 / 1024:.1f}MB). "
                f"Maximum: {config.MAX_IMAGE_SIZE_MB}MB"
            )

        return result

    @classmethod
    def sanitize_filename(cls, filename: str) -> str:
        """Sanitize a filename to prevent path traversal.

        Args:
            filename: Original filename

        Returns:
            Sanitized filename safe for use

        Example:
            >>> FileValidator.sanitize_filename('J 100/v2.pdf')
            'J_100_v2.pdf'
        """
        if not filename:
            return "unnamed"

        # Remove path separators and traversal attempts
        filename = filename.replace('..', '')
        filename = filename.replace('/', '_')
        filename = filename.replace('\\', '_')

        # Keep only safe characters
        filename = re.sub(r'[^a-zA-Z0-9_.-]', '_', filename)

        # Limit length
        if len(filename) > 255:
            name, ext = (
                filename.rsplit('.', 1) if '.' in filename
                else (filename, '')
            )
            filename = name[:250] + ('.' + ext if ext else '')

        return filename or "unnamed"
