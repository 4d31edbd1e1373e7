"""
Unit tests for request building and the HTTP transport.
"""
import json
from unittest.mock import MagicMock

import pytest
import requests

from frontend.models.stamp_config import ABSENT, ConfigPayload, Present, SectionConfiguration
from frontend.services.transport import (
    Attachment,
    HttpTransport,
    MultipartRequest,
    StampRequestBuilder,
    TransportResponse,
    guess_content_type,
)
from frontend.utils.exceptions import TransportError


def _payload(logo: bool = False) -> ConfigPayload:
    section = SectionConfiguration(
        position="CENTER",
        logo=Present("logo.png") if logo else ABSENT,
    )
    return ConfigPayload("pub1", "J100", "new_page", section)


class TestStampRequestBuilder:
    """Tests for multipart assembly."""

    def test_default_url_from_config(self):
        builder = StampRequestBuilder()
        assert builder.url.endswith("/api/v1/stamp/dynamic")

    def test_file_and_config_parts_always_present(self, pdf_attachment):
        request = StampRequestBuilder("http://svc/api/v1/stamp/dynamic").build(_payload(), pdf_attachment)

        assert request.url == "http://svc/api/v1/stamp/dynamic"
        assert request.part_names == ["file", "config"]

    def test_file_part_carries_source_bytes(self, pdf_attachment):
        request = StampRequestBuilder().build(_payload(), pdf_attachment)

        filename, content, content_type = request.part("file")
        assert filename == "paper.pdf"
        assert content == pdf_attachment.content
        assert content_type == "application/pdf"

    def test_config_part_is_json(self, pdf_attachment):
        request = StampRequestBuilder().build(_payload(), pdf_attachment)

        filename, content, content_type = request.part("config")
        assert filename is None
        assert content_type == "application/json"
        assert json.loads(content.decode("utf-8"))["publisherId"] == "pub1"

    def test_image_part_added_when_logo_on(self, pdf_attachment, image_attachment):
        request = StampRequestBuilder().build(_payload(logo=True), pdf_attachment, image_attachment)

        assert request.part_names == ["file", "config", "imageFile"]
        assert request.part("imageFile")[1] == image_attachment.content

    def test_image_part_omitted_when_logo_off(self, pdf_attachment, image_attachment):
        request = StampRequestBuilder().build(_payload(logo=False), pdf_attachment, image_attachment)

        assert "imageFile" not in request.part_names

    def test_image_part_omitted_when_no_image_selected(self, pdf_attachment):
        request = StampRequestBuilder().build(_payload(logo=True), pdf_attachment, None)

        assert "imageFile" not in request.part_names


class TestAttachment:
    """Tests for Attachment helpers."""

    def test_from_path(self, tmp_path):
        path = tmp_path / "logo.jpg"
        path.write_bytes(b"jpeg-bytes")

        attachment = Attachment.from_path(path)

        assert attachment.filename == "logo.jpg"
        assert attachment.content == b"jpeg-bytes"
        assert attachment.content_type == "image/jpeg"

    def test_from_upload(self):
        upload = MagicMock()
        upload.name = "paper.pdf"
        upload.getvalue.return_value = b"%PDF-1.4"
        upload.type = "application/pdf"

        attachment = Attachment.from_upload(upload)

        assert attachment.filename == "paper.pdf"
        assert attachment.content == b"%PDF-1.4"

    def test_from_upload_none(self):
        assert Attachment.from_upload(None) is None

    @pytest.mark.parametrize("filename,expected", [
        ("a.pdf", "application/pdf"),
        ("a.PNG", "image/png"),
        ("a.jpeg", "image/jpeg"),
        ("a.bin", "application/octet-stream"),
    ])
    def test_guess_content_type(self, filename, expected):
        assert guess_content_type(filename) == expected


class TestTransportResponse:
    """Tests for TransportResponse."""

    @pytest.mark.parametrize("status,ok", [(200, True), (201, True), (299, True), (304, False), (400, False), (500, False)])
    def test_ok_is_2xx(self, status, ok):
        assert TransportResponse(status_code=status).ok is ok

    def test_text_decodes_body(self):
        assert TransportResponse(status_code=400, content=b"bad request").text == "bad request"


class TestHttpTransport:
    """Tests for HttpTransport over a mocked requests session."""

    def _session(self, status_code=200, content=b"%PDF-stamped", reason="OK"):
        session = MagicMock()
        response = MagicMock()
        response.status_code = status_code
        response.content = content
        response.reason = reason
        response.headers = {"Content-Type": "application/pdf"}
        session.request.return_value = response
        return session, response

    def test_posts_multipart_parts(self):
        session, _ = self._session()
        transport = HttpTransport(session=session)
        request = MultipartRequest(url="http://svc/x", parts=[("file", ("a.pdf", b"%PDF", "application/pdf"))])

        transport.send(request)

        args, kwargs = session.request.call_args
        assert args == ("POST", "http://svc/x")
        assert kwargs["files"] == request.parts

    def test_single_request_per_send(self):
        session, _ = self._session(status_code=503, content=b"", reason="Service Unavailable")
        transport = HttpTransport(session=session)

        response = transport.send(MultipartRequest(url="http://svc/x"))

        assert session.request.call_count == 1
        assert response.status_code == 503
        assert response.reason == "Service Unavailable"

    def test_no_timeout_by_default(self):
        session, _ = self._session()
        HttpTransport(session=session).send(MultipartRequest(url="http://svc/x"))

        assert session.request.call_args.kwargs["timeout"] is None

    def test_explicit_timeout(self):
        session, _ = self._session()
        HttpTransport(timeout=12.5, session=session).send(MultipartRequest(url="http://svc/x"))

        assert session.request.call_args.kwargs["timeout"] == 12.5

    def test_response_closed(self):
        session, response = self._session()
        HttpTransport(session=session).send(MultipartRequest(url="http://svc/x"))

        response.close.assert_called_once()

    def test_connection_error_becomes_transport_error(self):
        session = MagicMock()
        session.request.side_effect = requests.exceptions.ConnectionError("Name or service not known")
        transport = HttpTransport(session=session)

        with pytest.raises(TransportError) as exc_info:
            transport.send(MultipartRequest(url="http://svc/x"))

        assert "Name or service not known" in exc_info.value.message
        assert exc_info.value.url == "http://svc/x"

    def test_default_session_mounts_adapters(self):
        transport = HttpTransport()

        assert "http://" in transport.session.adapters
        assert transport.session.get_adapter("http://svc/").max_retries.total == 0
