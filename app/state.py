"""Session state management with typed dataclasses."""

from dataclasses import dataclass, field
from typing import Any

import streamlit as st

from app.constants import SessionKeys


@dataclass
class OverlayRequest:
    """Parameters for one overlay run from the UI."""
    deck_bytes: bytes
    filename: str
    accent_color: str | None = None
    font_family: str | None = None
    enabled: dict[str, bool] = field(default_factory=dict)
    log_level: str = "INFO"


# === Session State Wrapper Functions ===

def get_state_value(key: str, default: Any = None) -> Any:
    """Get a value from session state with default."""
    return st.session_state.get(key, default)


def set_state_value(key: str, value: Any) -> None:
    """Set a value in session state."""
    st.session_state[key] = value


def has_state_key(key: str) -> bool:
    """Check if a key exists in session state."""
    return key in st.session_state


def get_base_config() -> dict[str, Any]:
    """Get the base configuration from session state."""
    return get_state_value(SessionKeys.BASE_CONFIG, {})


def get_pptx_bytes() -> bytes | None:
    """Get the processed PPTX bytes from session state."""
    return get_state_value(SessionKeys.PPTX_BYTES)


def set_pptx_bytes(data: bytes | None) -> None:
    """Set the processed PPTX bytes in session state."""
    set_state_value(SessionKeys.PPTX_BYTES, data)


def get_output_filename() -> str | None:
    """Get the output filename from session state."""
    return get_state_value(SessionKeys.OUTPUT_FILENAME)


def set_output_filename(filename: str | None) -> None:
    """Set the output filename in session state."""
    set_state_value(SessionKeys.OUTPUT_FILENAME, filename)


def get_last_result() -> dict[str, int] | None:
    """Operation counts of the last run, by kind."""
    return get_state_value(SessionKeys.LAST_RESULT)


def set_last_result(counts: dict[str, int] | None) -> None:
    set_state_value(SessionKeys.LAST_RESULT, counts)
