"""Constants and configuration paths for the Streamlit app."""

from pathlib import Path

# === Directory Paths ===
APP_DIR = Path(__file__).parent
PROJECT_ROOT = APP_DIR.parent
CONFIG_DIR = PROJECT_ROOT / "configs"
SRC_DIR = PROJECT_ROOT / "src"

# === Session State Keys ===
class SessionKeys:
    """Session state key constants to avoid magic strings."""
    BASE_CONFIG = 'base_config'
    PPTX_BYTES = 'pptx_bytes'
    OUTPUT_FILENAME = 'output_filename'
    LAST_RESULT = 'last_result'


# === UI Configuration Defaults ===
DEFAULT_PAGE_TITLE = 'Deck Overlays'
DEFAULT_PAGE_LAYOUT = 'wide'
DEFAULT_LOG_LEVEL = 'INFO'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

# Generator keys in submission order, with their UI labels
GENERATOR_LABELS = {
    'progress': 'Progress bar',
    'footer': 'Footer link to title slide',
    'sections': 'Section boxes and labels',
    'outline': 'Outline on second slide',
    'page_number': 'Page numbers',
    'tabs': 'Section tabs',
}
