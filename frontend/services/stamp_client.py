"""
Stamping service client for the PDF stamp frontend.

Submits a ConfigPayload plus its attachments to the dynamic stamp endpoint
and turns the answer into a SubmittedResult: the stamped PDF bytes with a
download filename, or an error message. Each call is one request, never
retried.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from frontend.config.settings import config
from frontend.models.stamp_config import ConfigPayload
from frontend.services.transport import (
    Attachment,
    HttpTransport,
    StampRequestBuilder,
    StampTransport,
)
from frontend.utils.exceptions import (
    FileValidationError,
    ServiceError,
    StamperError,
    TransportError,
)
from frontend.utils.validators import FileValidator

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


ERROR_VALIDATION = "validation"
ERROR_TRANSPORT = "transport"
ERROR_SERVICE = "service"


@dataclass(frozen=True)
class SubmittedResult:
    """Outcome of one submission."""
    success: bool
    filename: Optional[str] = None
    content: Optional[bytes] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def failed(cls, exc: StamperError) -> "SubmittedResult":
        if isinstance(exc, ServiceError):
            error_type = ERROR_SERVICE
        elif isinstance(exc, TransportError):
            error_type = ERROR_TRANSPORT
        else:
            error_type = ERROR_VALIDATION
        return cls(
            success=False,
            error=exc.message,
            error_type=error_type,
            status_code=getattr(exc, 'status_code', None),
        )


def output_filename(jcode: Optional[str]) -> str:
    """Name of the downloaded file: ``<jcode>.pdf`` or the default name."""
    stem = jcode.strip() if jcode and jcode.strip() else config.DEFAULT_OUTPUT_NAME
    return f"{stem}{config.OUTPUT_EXTENSION}"


StateListener = Callable[[SubmissionState], None]


class StampClient:
    """Client for the dynamic stamp endpoint.

    Holds no per-submission state, so one instance can serve every session.
    Each call to ``submit`` reports its own state transitions to the
    listener passed with it.
    """

    def __init__(
        self,
        transport: StampTransport = None,
        request_builder: StampRequestBuilder = None
    ):
        """Initialize the client.

        Args:
            transport: Transport used to send requests (default HttpTransport)
            request_builder: Multipart request builder (default targets config.STAMP_URL)
        """
        self.transport = transport or HttpTransport()
        self.request_builder = request_builder or StampRequestBuilder()

    def _validate_attachments(
        self,
        payload: ConfigPayload,
        source_file: Optional[Attachment],
        image_file: Optional[Attachment]
    ) -> None:
        result = FileValidator.validate_source_pdf(source_file)
        if payload.add_logo and image_file is not None:
            image_result = FileValidator.validate_image(image_file)
            result.errors.extend(image_result.errors)
            result.is_valid = result.is_valid and image_result.is_valid
        if not result.is_valid:
            filename = source_file.filename if source_file is not None else None
            raise FileValidationError("; ".join(result.errors), filename=filename)

    def _send(
        self,
        payload: ConfigPayload,
        source_file: Attachment,
        image_file: Optional[Attachment]
    ) -> SubmittedResult:
        request = self.request_builder.build(payload, source_file, image_file)

        logger.info(f"Sending stamp request to {request.url}: {payload.to_json()}")
        response = self.transport.send(request)

        if not response.ok:
            message = response.text or response.reason or f"HTTP {response.status_code}"
            logger.error(f"Stamping service returned {response.status_code}: {message[:200]}")
            raise ServiceError(message, status_code=response.status_code)

        filename = output_filename(payload.jcode)
        logger.info(f"Received stamped document {filename} ({len(response.content)} bytes)")
        return SubmittedResult(
            success=True,
            filename=filename,
            content=response.content,
            status_code=response.status_code,
        )

    def submit(
        self,
        payload: ConfigPayload,
        source_file: Optional[Attachment],
        image_file: Optional[Attachment] = None,
        state_listener: Optional[StateListener] = None
    ) -> SubmittedResult:
        """Submit one stamping request.

        State runs IDLE → SUBMITTING → SUCCESS/FAILED → IDLE for this call
        only; the listener sees SUBMITTING before the request is sent and
        IDLE last, whatever the outcome.

        Args:
            payload: Built stamp configuration
            source_file: Source PDF attachment
            image_file: Logo image, sent only when the logo toggle is on
            state_listener: Optional callable notified on every state change

        Returns:
            SubmittedResult with the stamped PDF on success, or the error
            message on failure. Never raises for validation, transport or
            service errors.
        """
        def set_state(state: SubmissionState) -> None:
            if state_listener is not None:
                state_listener(state)

        set_state(SubmissionState.SUBMITTING)
        outcome = SubmissionState.FAILED
        try:
            self._validate_attachments(payload, source_file, image_file)
            result = self._send(payload, source_file, image_file)
            outcome = SubmissionState.SUCCESS
            return result
        except StamperError as e:
            logger.error(f"Error stamping PDF: {e.message}")
            return SubmittedResult.failed(e)
        finally:
            set_state(outcome)
            set_state(SubmissionState.IDLE)


def save_result(result: SubmittedResult, directory=None) -> Path:
    """Write a successful result into a directory.

    Args:
        result: Successful SubmittedResult
        directory: Target directory (default config.DOWNLOAD_DIR), created if missing

    Returns:
        Path of the written file

    Raises:
        ValueError: If the result is not a success
    """
    if not result.success or result.content is None:
        raise ValueError("Only successful results can be saved")

    target_dir = Path(directory or config.DOWNLOAD_DIR)
    target_dir.mkdir(parents=True, exist_ok=True)

    path = target_dir / FileValidator.sanitize_filename(result.filename)
    path.write_bytes(result.content)
    logger.info(f"Saved stamped document to {path}")
    return path


# Singleton pattern with thread-safe initialization
_stamp_client: Optional[StampClient] = None
_stamp_client_lock = threading.Lock()


def get_stamp_client() -> StampClient:
    """Get singleton stamp client instance (thread-safe)."""
    global _stamp_client
    if _stamp_client is None:
        with _stamp_client_lock:
            if _stamp_client is None:
                _stamp_client = StampClient()
    return _stamp_client
