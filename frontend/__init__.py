"""PDF Stamp Frontend Package.

Streamlit client for the PDF stamping service with:
- Frozen dataclass configuration
- Stamp configuration builder with toggle-gated content blocks
- One-shot multipart client for the dynamic stamp endpoint
- Session state management
"""

__version__ = "1.0.0"
