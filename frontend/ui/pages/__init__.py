"""Page components for the PDF stamp frontend."""
from frontend.ui.pages.stamp import render_stamp_page

__all__ = [
    "render_stamp_page",
]
