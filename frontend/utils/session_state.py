"""Session state management for the PDF stamp frontend.

This module provides centralized session state management for Streamlit,
with features like:
- Default value initialization
- Type-safe access
- Submission result tracking (last result, last error)
- One-time success indicator
"""

import copy
import logging
from typing import Any, Optional, Dict, Callable

logger = logging.getLogger(__name__)


def _default_factory(value: Any) -> Callable[[], Any]:
    """Create a factory function that returns a deep copy of the value.

    This prevents mutable default values from being shared across sessions.
    """
    if isinstance(value, (list, dict, set)):
        return lambda: copy.deepcopy(value)
    return lambda: value


class SessionState:
    """Centralized session state management for the stamp form.

    This class provides a clean interface for managing Streamlit session state.
    It handles initialization, access, and cleanup of session state values.

    Example:
        >>> from frontend.utils import SessionState
        >>> SessionState.init_defaults()
        >>> SessionState.get_last_result() is None
        True
    """

    _DEFAULT_FACTORIES: Dict[str, Callable[[], Any]] = {
        # Result of the most recent submission
        'last_result': _default_factory(None),
        'last_error': _default_factory(None),
        'show_success_toast': _default_factory(False),
    }

    @classmethod
    def _get_session_state(cls):
        """Get Streamlit session state (lazy import for testing)."""
        try:
            import streamlit as st
            return st.session_state
        except ImportError:
            # Fallback for testing without Streamlit
            if not hasattr(cls, '_mock_state'):
                cls._mock_state = {}
            return cls._mock_state

    @classmethod
    def init_defaults(cls) -> None:
        """Initialize default session state values.

        Call this at the start of your Streamlit app to ensure
        all expected keys exist with sensible defaults.
        """
        session_state = cls._get_session_state()

        for key, factory in cls._DEFAULT_FACTORIES.items():
            if key not in session_state:
                session_state[key] = factory()
                logger.debug(f"Initialized session state key: {key}")

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get a value from session state."""
        session_state = cls._get_session_state()
        return session_state.get(key, default)

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        """Set a value in session state."""
        session_state = cls._get_session_state()
        session_state[key] = value
        logger.debug(f"Set session state: {key} = {type(value).__name__}")

    # Submission helpers
    @classmethod
    def record_result(cls, result) -> None:
        """Store the outcome of a submission.

        A failed submission discards any earlier stamped document.
        """
        if result.success:
            cls.set('last_result', result)
            cls.set('last_error', None)
            cls.set('show_success_toast', True)
        else:
            cls.set('last_result', None)
            cls.set('last_error', result.error)
            cls.set('show_success_toast', False)

    @classmethod
    def get_last_result(cls):
        return cls.get('last_result')

    @classmethod
    def get_last_error(cls) -> Optional[str]:
        return cls.get('last_error')

    @classmethod
    def consume_success_toast(cls) -> bool:
        """Return True once after a successful submission."""
        if cls.get('show_success_toast', False):
            cls.set('show_success_toast', False)
            return True
        return False

    @classmethod
    def reset_submission(cls) -> None:
        """Reset all submission-related session state variables."""
        for key, factory in cls._DEFAULT_FACTORIES.items():
            cls.set(key, factory())
