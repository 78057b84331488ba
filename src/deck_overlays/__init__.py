"""Deck overlay generator package."""

from .config import Config
from .snapshot import (
    DocumentSnapshot,
    SlideRef,
    ShapeRef,
)
from .resource_cache import (
    ResourceCache,
    hex_to_rgb,
    DEFAULT_PALETTE,
)
from .element_index import (
    ElementIndex,
    OverlayFamily,
    classify_shape,
    first_text,
)
from .section_index import (
    SectionEntry,
    build_section_index,
)
from .deletion import build_deletions
from .generators import (
    GeneratorContext,
    progress_indicator,
    footer_link,
    section_annotations,
    outline,
    page_number,
    tab_navigation,
)
from .executor import (
    BatchExecutor,
    BatchResult,
    MutationClient,
)
from .pipeline import OverlayPipeline
from .style import OverlayStyle

__all__ = [
    "Config",
    # Snapshot
    "DocumentSnapshot",
    "SlideRef",
    "ShapeRef",
    # Resources
    "ResourceCache",
    "hex_to_rgb",
    "DEFAULT_PALETTE",
    # Classification and indexes
    "ElementIndex",
    "OverlayFamily",
    "classify_shape",
    "first_text",
    "SectionEntry",
    "build_section_index",
    "build_deletions",
    # Generators
    "GeneratorContext",
    "progress_indicator",
    "footer_link",
    "section_annotations",
    "outline",
    "page_number",
    "tab_navigation",
    # Execution
    "BatchExecutor",
    "BatchResult",
    "MutationClient",
    "OverlayPipeline",
    "OverlayStyle",
]
