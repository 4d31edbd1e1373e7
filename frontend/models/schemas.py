"""
Pydantic schema for raw stamp form input.

Mirrors the form controls one to one. Blank text controls are normalized to
None; everything else is passed through verbatim. Presence rules live in the
configuration builder, not here.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from frontend.models.stamp_config import Strategy, StampPosition


class StampFormInput(BaseModel):
    """Raw state of the stamp form controls."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=False)

    publisher_id: Optional[str] = None
    jcode: Optional[str] = None
    strategy: Optional[Strategy] = None
    position: Optional[StampPosition] = None

    add_logo: bool = False
    image_filename: Optional[str] = Field(
        None,
        description="Name of the selected logo image, used as the imageFile reference"
    )
    add_text: bool = False
    text_content: Optional[str] = None
    add_html: bool = False
    html_content: Optional[str] = None
    add_doi: bool = False
    doi_value: Optional[str] = None
    add_date: bool = False
    is_ad: bool = False
    ad_link: Optional[str] = None
    optional_text: Optional[str] = None

    @field_validator(
        'publisher_id', 'jcode', 'image_filename', 'text_content', 'html_content',
        'doi_value', 'ad_link', 'optional_text',
        mode='before'
    )
    @classmethod
    def blank_to_none(cls, v):
        """Treat blank controls as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('strategy', mode='before')
    @classmethod
    def normalize_strategy(cls, v):
        """Accept 'new_page' as well as 'NEW_PAGE'."""
        if isinstance(v, str):
            v = v.strip()
            return v.lower() if v else None
        return v

    @field_validator('position', mode='before')
    @classmethod
    def normalize_position(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v.upper() if v else None
        return v
