"""Streamlit UI for the deck overlay generator."""

import sys
from pathlib import Path

# Allow `streamlit run app/app.py` from the project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.bootstrap import bootstrap_app
from app.components import (
    render_deck_source_section,
    render_overlay_settings_section,
    render_generate_section,
    render_download_section,
)


def main() -> None:
    base_config = bootstrap_app()
    
    uploaded_deck = render_deck_source_section()
    settings = render_overlay_settings_section(base_config)
    
    render_generate_section(uploaded_deck, settings)
    render_download_section()


main()
