"""UI components for the Streamlit app."""

from app.components.deck_source import render_deck_source_section
from app.components.overlay_settings import render_overlay_settings_section
from app.components.generate_button import render_generate_section
from app.components.download_section import render_download_section

__all__ = [
    'render_deck_source_section',
    'render_overlay_settings_section',
    'render_generate_section',
    'render_download_section',
]
