"""Stamp configuration models."""
from frontend.models.stamp_config import (
    Strategy,
    StampPosition,
    Alignment,
    Absent,
    Present,
    ABSENT,
    ContentBlock,
    content_block,
    SectionConfiguration,
    ConfigPayload,
)
from frontend.models.schemas import StampFormInput

__all__ = [
    "Strategy",
    "StampPosition",
    "Alignment",
    "Absent",
    "Present",
    "ABSENT",
    "ContentBlock",
    "content_block",
    "SectionConfiguration",
    "ConfigPayload",
    "StampFormInput",
]
