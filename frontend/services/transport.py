"""
Request building and transport for the stamping service.

StampRequestBuilder assembles a MultipartRequest from a ConfigPayload and its
attachments; a StampTransport sends it. HttpTransport is the requests-based
implementation. Swapping the transport (e.g. for a fake service in tests)
does not touch configuration building.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from frontend.config.settings import config
from frontend.models.stamp_config import ConfigPayload
from frontend.utils.exceptions import TransportError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
JSON_CONTENT_TYPE = "application/json"

IMAGE_CONTENT_TYPES = {
    '.png': 'image/png',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
}


@dataclass(frozen=True)
class Attachment:
    """A named binary payload sent as one multipart part."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path, content_type: Optional[str] = None) -> "Attachment":
        """Read an attachment from disk.

        The content type defaults to one guessed from the file extension.
        """
        path = Path(path)
        return cls(
            filename=path.name,
            content=path.read_bytes(),
            content_type=content_type or guess_content_type(path.name),
        )

    @classmethod
    def from_upload(cls, uploaded_file) -> Optional["Attachment"]:
        """Wrap a Streamlit UploadedFile. Returns None when nothing was uploaded."""
        if uploaded_file is None:
            return None
        return cls(
            filename=uploaded_file.name,
            content=uploaded_file.getvalue(),
            content_type=uploaded_file.type or guess_content_type(uploaded_file.name),
        )


def guess_content_type(filename: str) -> str:
    ext = Path(filename or '').suffix.lower()
    if ext == '.pdf':
        return PDF_CONTENT_TYPE
    return IMAGE_CONTENT_TYPES.get(ext, "application/octet-stream")


# (part name, (filename or None, content, content type))
MultipartPart = Tuple[str, Tuple[Optional[str], bytes, str]]


@dataclass(frozen=True)
class MultipartRequest:
    """A fully assembled POST request."""
    url: str
    parts: List[MultipartPart] = field(default_factory=list)

    @property
    def part_names(self) -> List[str]:
        return [name for name, _ in self.parts]

    def part(self, name: str) -> Optional[Tuple[Optional[str], bytes, str]]:
        for part_name, value in self.parts:
            if part_name == name:
                return value
        return None


@dataclass(frozen=True)
class TransportResponse:
    """The parts of an HTTP response the client cares about."""
    status_code: int
    content: bytes = b''
    reason: str = ''
    headers: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode('utf-8', errors='replace')


class StampRequestBuilder:
    """Assembles the multipart body for the dynamic stamp endpoint."""

    def __init__(self, url: str = None):
        self.url = url or config.STAMP_URL

    def build(
        self,
        payload: ConfigPayload,
        source_file: Attachment,
        image_file: Optional[Attachment] = None
    ) -> MultipartRequest:
        """Build the request parts.

        ``file`` and ``config`` are always present. ``imageFile`` is added
        only when the payload has the logo toggle on and an image was given.
        """
        parts: List[MultipartPart] = [
            ('file', (source_file.filename, source_file.content, source_file.content_type)),
            ('config', (None, payload.to_json().encode('utf-8'), JSON_CONTENT_TYPE)),
        ]
        if payload.add_logo and image_file is not None:
            parts.append(
                ('imageFile', (image_file.filename, image_file.content, image_file.content_type))
            )
        return MultipartRequest(url=self.url, parts=parts)


class StampTransport:
    """Sends a MultipartRequest and returns the response.

    Implementations raise TransportError when no response could be obtained.
    """

    def send(self, request: MultipartRequest) -> TransportResponse:
        raise NotImplementedError


class HttpTransport(StampTransport):
    """Transport over a requests Session. One attempt per request, no retries."""

    def __init__(self, timeout: Optional[float] = None, session: requests.Session = None):
        """Initialize transport.

        Args:
            timeout: Request timeout in seconds (default from config; None
                leaves the requests default of no timeout)
            session: Pre-configured session (mainly for tests)
        """
        self.timeout = timeout if timeout is not None else config.API_TIMEOUT_SECONDS

        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def send(self, request: MultipartRequest) -> TransportResponse:
        try:
            response = self.session.request(
                'POST',
                request.url,
                files=request.parts,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: POST {request.url} - {e}")
            raise TransportError(str(e), url=request.url) from e

        try:
            return TransportResponse(
                status_code=response.status_code,
                content=response.content,
                reason=response.reason or '',
                headers=dict(response.headers),
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed reading response from {request.url} - {e}")
            raise TransportError(str(e), url=request.url) from e
        finally:
            response.close()
