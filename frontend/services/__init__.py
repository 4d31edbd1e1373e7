"""Services for the PDF stamp frontend."""
from frontend.services.config_builder import (
    ConfigurationBuilder,
    build_config,
)
from frontend.services.transport import (
    Attachment,
    MultipartRequest,
    TransportResponse,
    StampRequestBuilder,
    StampTransport,
    HttpTransport,
)
from frontend.services.stamp_client import (
    StampClient,
    SubmissionState,
    SubmittedResult,
    get_stamp_client,
    output_filename,
    save_result,
)

__all__ = [
    # Configuration builder
    "ConfigurationBuilder",
    "build_config",
    # Transport
    "Attachment",
    "MultipartRequest",
    "TransportResponse",
    "StampRequestBuilder",
    "StampTransport",
    "HttpTransport",
    # Stamp client
    "StampClient",
    "SubmissionState",
    "SubmittedResult",
    "get_stamp_client",
    "output_filename",
    "save_result",
]
