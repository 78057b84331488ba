"""Application bootstrap: import path, base config, page chrome."""

import sys
from typing import Any

import streamlit as st

from app.constants import (
    CONFIG_DIR,
    SRC_DIR,
    SessionKeys,
    DEFAULT_PAGE_TITLE,
    DEFAULT_PAGE_LAYOUT,
)
from app.state import set_state_value, has_state_key


def setup_python_path() -> None:
    """Make ``deck_overlays`` importable when the package is not installed."""
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))


def _load_base_config() -> dict[str, Any]:
    from deck_overlays.config import load_yaml_file
    
    return load_yaml_file(CONFIG_DIR / "config.yaml")


def init_session_state() -> None:
    """Seed session state on the first script run of a session."""
    if not has_state_key(SessionKeys.BASE_CONFIG):
        set_state_value(SessionKeys.BASE_CONFIG, _load_base_config())
    
    for key in (SessionKeys.PPTX_BYTES, SessionKeys.OUTPUT_FILENAME, SessionKeys.LAST_RESULT):
        if not has_state_key(key):
            set_state_value(key, None)


def bootstrap_app() -> dict[str, Any]:
    """Prepare the session and draw the page header.
    
    Returns:
        The base configuration dictionary
    """
    setup_python_path()
    init_session_state()
    
    base_config = st.session_state[SessionKeys.BASE_CONFIG]
    page = base_config.get('ui', {}).get('page', {})
    st.set_page_config(
        page_title=page.get('title', DEFAULT_PAGE_TITLE),
        layout=page.get('layout', DEFAULT_PAGE_LAYOUT),
    )
    
    st.title("🧭 Deck Overlays")
    st.markdown(
        "Add progress bars, a title footer link and section navigation to a PowerPoint deck. "
        "Running again replaces the previous overlays."
    )
    st.divider()
    
    return base_config
