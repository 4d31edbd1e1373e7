"""Reusable UI components for the PDF stamp frontend."""
from frontend.ui.components.stamp_form import (
    render_stamp_form,
    render_result,
)

__all__ = [
    # Stamp form
    "render_stamp_form",
    "render_result",
]
