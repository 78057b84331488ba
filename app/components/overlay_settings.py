"""Overlay settings component."""

from dataclasses import dataclass, field
from typing import Any

import streamlit as st

from app.constants import GENERATOR_LABELS, LOG_LEVELS, DEFAULT_LOG_LEVEL


@dataclass
class OverlaySettings:
    accent_color: str
    font_family: str
    log_level: str
    enabled: dict[str, bool] = field(default_factory=dict)


def render_overlay_settings_section(base_config: dict[str, Any]) -> OverlaySettings:
    """Render generator toggles and style inputs.
    
    Args:
        base_config: Base configuration dictionary (for defaults)
        
    Returns:
        Selected settings
    """
    st.subheader("🎨 Overlays")
    configured = base_config.get('generators', {})
    
    columns = st.columns(len(GENERATOR_LABELS))
    enabled = {}
    for column, (key, label) in zip(columns, GENERATOR_LABELS.items()):
        with column:
            enabled[key] = st.checkbox(label, value=configured.get(key, True), key=f"gen_{key}")
    
    col1, col2 = st.columns(2)
    with col1:
        accent_color = st.color_picker(
            "Accent color",
            value=base_config.get('palette', {}).get('accent', '#3D6869'),
        )
    with col2:
        font_family = st.text_input(
            "Font family",
            value=base_config.get('fonts', {}).get('family', 'Source Sans Pro'),
        )
    
    with st.expander("⚙️ Advanced"):
        log_level = st.selectbox(
            "Log level",
            LOG_LEVELS,
            index=LOG_LEVELS.index(DEFAULT_LOG_LEVEL),
        )
    
    return OverlaySettings(
        accent_color=accent_color,
        font_family=font_family,
        log_level=log_level,
        enabled=enabled,
    )
