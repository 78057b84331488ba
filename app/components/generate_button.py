"""Generate button component."""

from typing import Any

import streamlit as st

from app.components.overlay_settings import OverlaySettings
from app.services.overlay_service import run_overlays
from app.state import OverlayRequest


def render_generate_section(uploaded_deck: Any, settings: OverlaySettings) -> bool:
    """Render the generate button and handle the overlay run.
    
    Args:
        uploaded_deck: Uploaded .pptx file (if any)
        settings: Overlay settings chosen in the UI
        
    Returns:
        True if the run was successful, False otherwise
    """
    clicked = st.button(
        "🚀 Regenerate overlays",
        type="primary",
        use_container_width=True
    )
    
    if not clicked:
        return False
    
    if uploaded_deck is None:
        st.error("❌ Please upload a PowerPoint deck first.")
        return False
    
    request = OverlayRequest(
        deck_bytes=uploaded_deck.getvalue(),
        filename=uploaded_deck.name,
        accent_color=settings.accent_color,
        font_family=settings.font_family,
        enabled=settings.enabled,
        log_level=settings.log_level,
    )
    
    with st.spinner('🔄 Regenerating overlays...'):
        result = run_overlays(request)
    
    if result.success:
        total = sum((result.counts or {}).values())
        st.success(f"✅ Overlays regenerated ({total} operations in one batch)")
        return True
    
    st.error(f"❌ {result.error_message}")
    if result.exception:
        st.exception(result.exception)
    return False
