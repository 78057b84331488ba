"""Deck upload component."""

from typing import Any

import streamlit as st


def render_deck_source_section() -> Any:
    """Render the deck uploader.
    
    Returns:
        The uploaded file, or None
    """
    st.subheader("📂 Deck")
    return st.file_uploader(
        "Upload a PowerPoint deck",
        type=['pptx'],
        help="Overlays from a previous run are removed and regenerated."
    )
