"""
PDF Stamp Frontend Configuration.

Frozen dataclass for immutable configuration with environment overrides.
All magic numbers and configuration values should be defined here.

Environment variables can override defaults (read at module import time):
- API_BASE_URL: Stamping service URL
- API_TIMEOUT_SECONDS: Request timeout (unset means no timeout)
- DOWNLOAD_DIR: Directory where stamped files are saved
- APP_VERSION: Override version string
"""

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Optional


def _get_int_env(name: str, default: int) -> int:
    """Get integer environment variable or return default."""
    val = os.getenv(name)
    if val is not None:
        try:
            return int(val)
        except ValueError:
            pass
    return default


def _get_optional_float_env(name: str) -> Optional[float]:
    """Get float environment variable or None when unset/invalid."""
    val = os.getenv(name)
    if val:
        try:
            return float(val)
        except ValueError:
            pass
    return None


def _get_str_env(name: str, default: str) -> str:
    """Get string environment variable or return default."""
    return os.getenv(name, default)


@dataclass(frozen=True)
class StamperConfig:
    """Immutable stamp frontend configuration.

    frozen=True ensures config values cannot be accidentally modified.
    Environment variables are read at module import time.
    """

    # Application
    APP_NAME: str = "PDF Stamper"
    APP_ICON: str = "🖋️"
    APP_VERSION: str = field(
        default_factory=lambda: _get_str_env('APP_VERSION', "1.0.0")
    )

    # Stamping service
    API_BASE_URL: str = field(
        default_factory=lambda: _get_str_env('API_BASE_URL', 'http://localhost:8080')
    )
    STAMP_ENDPOINT: str = "/api/v1/stamp/dynamic"
    # None leaves the transport default in place
    API_TIMEOUT_SECONDS: Optional[float] = field(
        default_factory=lambda: _get_optional_float_env('API_TIMEOUT_SECONDS')
    )

    # Output
    DEFAULT_OUTPUT_NAME: str = "stamped"
    OUTPUT_EXTENSION: str = ".pdf"
    DOWNLOAD_DIR: str = field(
        default_factory=lambda: _get_str_env('DOWNLOAD_DIR', './downloads')
    )

    # File handling
    MAX_PDF_SIZE_MB: int = field(
        default_factory=lambda: _get_int_env('MAX_PDF_SIZE_MB', 50)
    )
    MAX_IMAGE_SIZE_MB: int = field(
        default_factory=lambda: _get_int_env('MAX_IMAGE_SIZE_MB', 5)
    )
    ALLOWED_IMAGE_EXTENSIONS: FrozenSet[str] = frozenset({'.png', '.jpg', '.jpeg'})

    @property
    def STAMP_URL(self) -> str:
        """Get the full dynamic stamp endpoint URL."""
        return f"{self.API_BASE_URL.rstrip('/')}{self.STAMP_ENDPOINT}"

    @property
    def MAX_PDF_SIZE_BYTES(self) -> int:
        """Get maximum source PDF size in bytes."""
        return self.MAX_PDF_SIZE_MB * 1024 * 1024

    @property
    def MAX_IMAGE_SIZE_BYTES(self) -> int:
        """Get maximum logo image size in bytes."""
        return self.MAX_IMAGE_SIZE_MB * 1024 * 1024


# Global immutable config instance
config = StamperConfig()

# Placement choices offered by the stamp form, in display order
POSITION_LABELS = {
    'HEADER': 'Header',
    'FOOTER': 'Footer',
    'TOP_LEFT': 'Top left',
    'TOP_RIGHT': 'Top right',
    'CENTER': 'Center',
    'BOTTOM_LEFT': 'Bottom left',
    'BOTTOM_RIGHT': 'Bottom right',
    'LEFT_MARGIN': 'Left margin',
    'RIGHT_MARGIN': 'Right margin',
}

STRATEGY_LABELS = {
    'new_page': 'Add as new page',
    'update_existing': 'Stamp existing pages',
}
