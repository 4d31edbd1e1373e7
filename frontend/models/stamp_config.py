"""
Stamp configuration model.

A stamp is described by a SectionConfiguration (what goes into the stamp and
where) wrapped in a ConfigPayload (who it is for and how it is applied).
Both are immutable and built fresh for every submission.

Each strict content toggle (logo, text, HTML, DOI) is held as a tagged
block, either ``ABSENT`` or ``Present(value)``, so a toggle that is on
always carries a non-empty value.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class Strategy(str, Enum):
    """How the stamp is applied to the source document."""
    NEW_PAGE = "new_page"
    UPDATE_EXISTING = "update_existing"


class StampPosition(str, Enum):
    """Placement names understood by the stamping service."""
    TOP_LEFT = "TOP_LEFT"
    TOP_RIGHT = "TOP_RIGHT"
    BOTTOM_LEFT = "BOTTOM_LEFT"
    BOTTOM_RIGHT = "BOTTOM_RIGHT"
    CENTER = "CENTER"
    HEADER = "HEADER"
    FOOTER = "FOOTER"
    LEFT_MARGIN = "LEFT_MARGIN"
    RIGHT_MARGIN = "RIGHT_MARGIN"


class Alignment(str, Enum):
    CENTER = "CENTER"


@dataclass(frozen=True)
class Absent:
    """Content block whose toggle is off."""

    @property
    def enabled(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None


@dataclass(frozen=True)
class Present:
    """Content block whose toggle is on, with its non-empty value."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Present content requires a non-empty string value")

    @property
    def enabled(self) -> bool:
        return True


ABSENT = Absent()

ContentBlock = Union[Absent, Present]


def content_block(enabled: bool, value: Optional[str]) -> ContentBlock:
    """Build a content block from a toggle and its raw control value.

    The toggle decides: when it is off the raw value is discarded.

    Raises:
        ValueError: If the toggle is on but the value is empty
    """
    if not enabled:
        return ABSENT
    return Present(value)


@dataclass(frozen=True)
class SectionConfiguration:
    """Visual/content description of one stamp."""
    position: StampPosition
    logo: ContentBlock = ABSENT
    text: ContentBlock = ABSENT
    html: ContentBlock = ABSENT
    doi: ContentBlock = ABSENT
    add_date: bool = False
    is_ad: bool = False
    ad_link: Optional[str] = None
    optional_text: Optional[str] = None

    def __post_init__(self):
        # Closed enumeration: unknown placements fail here
        object.__setattr__(self, 'position', StampPosition(self.position))
        # Relaxed fields: empty means absent
        object.__setattr__(self, 'ad_link', (self.ad_link or None) if self.is_ad else None)
        object.__setattr__(self, 'optional_text', self.optional_text or None)

    @property
    def alignment(self) -> Alignment:
        return Alignment.CENTER

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the service's ``configuration`` JSON object."""
        return {
            "position": self.position.value,
            "alignment": self.alignment.value,
            "addLogo": self.logo.enabled,
            "imageFile": self.logo.value,
            "addText": self.text.enabled,
            "textContent": self.text.value,
            "addHtml": self.html.enabled,
            "htmlContent": self.html.value,
            "addDoi": self.doi.enabled,
            "doiValue": self.doi.value,
            "addDate": self.add_date,
            "isAd": self.is_ad,
            "adLink": self.ad_link,
            "optionalText": self.optional_text,
        }


@dataclass(frozen=True)
class ConfigPayload:
    """Wire-level wrapper: publisher, jcode and strategy plus the section."""
    publisher_id: str
    jcode: str
    strategy: Strategy
    configuration: SectionConfiguration

    def __post_init__(self):
        object.__setattr__(self, 'strategy', Strategy(self.strategy))

    @property
    def add_logo(self) -> bool:
        return self.configuration.logo.enabled

    def to_dict(self) -> Dict[str, Any]:
        return {
            "publisherId": self.publisher_id,
            "jcode": self.jcode,
            "strategy": self.strategy.value,
            "configuration": self.configuration.to_dict(),
        }

    def to_json(self) -> str:
        """Serialize to the UTF-8 JSON string sent as the ``config`` part."""
        return json.dumps(self.to_dict(), ensure_ascii=False)
