"""Stamp configuration form component.

Renders the stamp form, shows each toggle's input only while the toggle is
checked, and submits the built configuration to the stamping service.
"""

import logging
from typing import Any, Dict, Optional

import streamlit as st

from frontend.config.settings import config, POSITION_LABELS, STRATEGY_LABELS
from frontend.services import (
    Attachment,
    SubmissionState,
    SubmittedResult,
    build_config,
    get_stamp_client,
)
from frontend.utils import SessionState, ConfigValidationError

logger = logging.getLogger(__name__)


def render_stamp_form() -> Optional[SubmittedResult]:
    """Render the stamp form.

    Returns:
        Optional[SubmittedResult]: Result if a submission ran this rerun, None otherwise
    """
    st.subheader("Document")

    col1, col2 = st.columns(2)
    with col1:
        publisher_id = st.text_input("Publisher ID", key="publisher_id")
    with col2:
        jcode = st.text_input("Jcode", key="jcode", help="Also used as the output filename")

    source_pdf = st.file_uploader("Source PDF", type=["pdf"], key="source_pdf")

    strategy = st.radio(
        "Strategy",
        list(STRATEGY_LABELS),
        format_func=STRATEGY_LABELS.get,
        horizontal=True,
        key="strategy",
    )
    position = st.selectbox(
        "Position",
        list(POSITION_LABELS),
        format_func=POSITION_LABELS.get,
        key="position",
    )

    st.subheader("Stamp Content")
    form_state, image_upload = _render_content_toggles()

    st.divider()

    if st.button("Stamp PDF", type="primary", width='stretch'):
        form_state.update(
            publisher_id=publisher_id,
            jcode=jcode,
            strategy=strategy,
            position=position,
        )
        return _submit_stamp(form_state, source_pdf, image_upload)

    return None


def _render_content_toggles():
    """Render content toggles with their conditional inputs.

    Returns:
        Tuple of (form state dict, logo upload or None)
    """
    state: Dict[str, Any] = {}
    image_upload = None

    col1, col2 = st.columns(2)

    with col1:
        state['add_logo'] = st.checkbox("Add logo", key="add_logo")
        if state['add_logo']:
            image_upload = st.file_uploader(
                "Logo image",
                type=sorted(ext.lstrip('.') for ext in config.ALLOWED_IMAGE_EXTENSIONS),
                key="image_upload",
            )
            state['image_filename'] = image_upload.name if image_upload is not None else None

        state['add_text'] = st.checkbox("Add text", key="add_text")
        if state['add_text']:
            state['text_content'] = st.text_area("Text content", key="text_content")

        state['add_html'] = st.checkbox("Add HTML", key="add_html")
        if state['add_html']:
            state['html_content'] = st.text_area("HTML content", key="html_content")

    with col2:
        state['add_doi'] = st.checkbox("Add DOI", key="add_doi")
        if state['add_doi']:
            state['doi_value'] = st.text_input("DOI", placeholder="e.g., 10.1000/xyz123", key="doi_value")

        state['add_date'] = st.checkbox("Add date", key="add_date")

        state['is_ad'] = st.checkbox("Include advertisement", key="is_ad")
        if state['is_ad']:
            state['ad_link'] = st.text_input("Ad link (optional)", key="ad_link")

    state['optional_text'] = st.text_input("Optional text", key="optional_text")

    return state, image_upload


_STATUS_UPDATES = {
    SubmissionState.SUBMITTING: dict(label="Stamping PDF...", state="running"),
    SubmissionState.SUCCESS: dict(label="PDF stamped", state="complete"),
    SubmissionState.FAILED: dict(label="Stamping failed", state="error"),
}


def _status_listener(status):
    """Build a state listener that mirrors one submission in a status box."""
    def on_state(state: SubmissionState) -> None:
        update = _STATUS_UPDATES.get(state)
        if update is not None:
            status.update(**update)
    return on_state


def _submit_stamp(form_state: Dict[str, Any], source_pdf, image_upload) -> Optional[SubmittedResult]:
    """Build the configuration and submit it.

    A submit that fails local validation clears the previous result, so a
    stale download is never offered next to the validation errors.
    """
    try:
        payload = build_config(form_state)
    except ConfigValidationError as e:
        SessionState.reset_submission()
        for error in e.errors:
            st.error(error)
        return None

    with st.status("Stamping PDF...", state="running") as status:
        result = get_stamp_client().submit(
            payload,
            Attachment.from_upload(source_pdf),
            Attachment.from_upload(image_upload) if payload.add_logo else None,
            state_listener=_status_listener(status),
        )

    SessionState.record_result(result)
    return result


def render_result() -> None:
    """Render the download button or the last error."""
    if SessionState.consume_success_toast():
        st.toast("PDF stamped successfully!")

    error = SessionState.get_last_error()
    if error:
        st.error(f"Failed to stamp PDF.\n\n{error}")
        return

    result = SessionState.get_last_result()
    if result is not None:
        st.download_button(
            f"Download {result.filename}",
            data=result.content,
            file_name=result.filename,
            mime="application/pdf",
            width='stretch',
        )
