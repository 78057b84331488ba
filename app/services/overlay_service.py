"""Overlay generation service."""

import copy
import io
import logging
from dataclasses import dataclass
from typing import Any

from app.constants import CONFIG_DIR
from app.state import (
    OverlayRequest,
    get_base_config,
    set_pptx_bytes,
    set_output_filename,
    set_last_result,
)


@dataclass
class OverlayRunResult:
    """Result of an overlay run."""
    success: bool
    pptx_bytes: bytes | None = None
    counts: dict[str, int] | None = None
    error_message: str | None = None
    exception: Exception | None = None


def _build_merged_config(request: OverlayRequest) -> dict[str, Any]:
    """Overlay the UI choices on a copy of the base configuration."""
    merged_config = copy.deepcopy(get_base_config())
    merged_config['backend'] = 'pptx'
    
    if request.accent_color:
        merged_config.setdefault('palette', {})['accent'] = request.accent_color
    if request.font_family:
        merged_config.setdefault('fonts', {})['family'] = request.font_family
    
    generators = merged_config.setdefault('generators', {})
    generators.update(request.enabled)
    
    merged_config.setdefault('settings', {}).setdefault('logging', {})['level'] = request.log_level
    return merged_config


def run_overlays(request: OverlayRequest) -> OverlayRunResult:
    """Regenerate overlays on an uploaded deck, entirely in memory.
    
    Args:
        request: Uploaded deck bytes and UI choices
        
    Returns:
        OverlayRunResult with the processed deck on success
    """
    # Import here to avoid import issues before path setup
    from pptx import Presentation
    from deck_overlays.config import Config
    from deck_overlays.pipeline import OverlayPipeline
    from deck_overlays.pptx_document import PptxDocument, PptxMutationClient
    
    try:
        cfg = Config.from_dict(_build_merged_config(request), CONFIG_DIR)
        document = PptxDocument(Presentation(io.BytesIO(request.deck_bytes)))
        result = OverlayPipeline(cfg).run(document, PptxMutationClient(document))
        
        buffer = io.BytesIO()
        document.prs.save(buffer)
        pptx_bytes = buffer.getvalue()
        
        set_pptx_bytes(pptx_bytes)
        set_output_filename(request.filename)
        set_last_result(result.counts())
        
        return OverlayRunResult(success=True, pptx_bytes=pptx_bytes, counts=result.counts())
    
    except Exception as e:
        logging.exception("Overlay run failed")
        return OverlayRunResult(
            success=False,
            error_message=f"Overlay run failed: {e}",
            exception=e,
        )
