"""
Configuration builder for stamp requests.

Turns the raw state of the stamp form into a ConfigPayload. The builder,
not the form control, decides whether a toggle's value is present: a value
left behind in a hidden control never reaches the payload.
"""

import logging
from typing import Any, List, Mapping, Union

from pydantic import ValidationError

from frontend.models.schemas import StampFormInput
from frontend.models.stamp_config import (
    ConfigPayload,
    SectionConfiguration,
    content_block,
)
from frontend.utils.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

# (toggle field, value field, message when the toggle is on but empty)
STRICT_TOGGLES = (
    ('add_logo', 'image_filename', "Logo image is required when 'Add logo' is checked"),
    ('add_text', 'text_content', "Text content is required when 'Add text' is checked"),
    ('add_html', 'html_content', "HTML content is required when 'Add HTML' is checked"),
    ('add_doi', 'doi_value', "DOI is required when 'Add DOI' is checked"),
)

REQUIRED_FIELDS = (
    ('publisher_id', "Publisher ID is required"),
    ('jcode', "Jcode is required"),
    ('strategy', "Strategy is required"),
    ('position', "Position is required"),
)


def _format_pydantic_errors(exc: ValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get('loc', ()))
        messages.append(f"{loc}: {error.get('msg', 'invalid value')}" if loc else error.get('msg'))
    return messages


class ConfigurationBuilder:
    """Builds a ConfigPayload from stamp form state.

    Several content toggles may be on at the same time; resolving how they
    combine is left to the stamping service.
    """

    def parse(self, form_state: Union[StampFormInput, Mapping[str, Any]]) -> StampFormInput:
        """Coerce raw form state into a StampFormInput.

        Raises:
            ConfigValidationError: If a control holds a value of the wrong kind
                (e.g. an unknown strategy)
        """
        if isinstance(form_state, StampFormInput):
            return form_state
        try:
            return StampFormInput.model_validate(dict(form_state))
        except ValidationError as e:
            raise ConfigValidationError(_format_pydantic_errors(e)) from e

    def missing_fields(self, form: StampFormInput) -> List[str]:
        """List every structurally required value that is missing."""
        errors = [
            message for name, message in REQUIRED_FIELDS
            if getattr(form, name) is None
        ]
        errors.extend(
            message for toggle, value, message in STRICT_TOGGLES
            if getattr(form, toggle) and getattr(form, value) is None
        )
        return errors

    def build(self, form_state: Union[StampFormInput, Mapping[str, Any]]) -> ConfigPayload:
        """Build the payload for one submission.

        Args:
            form_state: StampFormInput or a mapping of control name to value

        Returns:
            ConfigPayload ready to be serialized

        Raises:
            ConfigValidationError: If a required field or a toggled-on
                content value is missing
        """
        form = self.parse(form_state)

        errors = self.missing_fields(form)
        if errors:
            logger.info(f"Stamp configuration rejected: {errors}")
            raise ConfigValidationError(errors)

        section = SectionConfiguration(
            position=form.position,
            logo=content_block(form.add_logo, form.image_filename),
            text=content_block(form.add_text, form.text_content),
            html=content_block(form.add_html, form.html_content),
            doi=content_block(form.add_doi, form.doi_value),
            add_date=form.add_date,
            is_ad=form.is_ad,
            ad_link=form.ad_link,
            optional_text=form.optional_text,
        )

        return ConfigPayload(
            publisher_id=form.publisher_id,
            jcode=form.jcode,
            strategy=form.strategy,
            configuration=section,
        )


def build_config(form_state: Union[StampFormInput, Mapping[str, Any]]) -> ConfigPayload:
    """Build a ConfigPayload with a default ConfigurationBuilder."""
    return ConfigurationBuilder().build(form_state)
