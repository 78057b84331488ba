"""Service modules for business logic."""

from app.services.overlay_service import OverlayRunResult, run_overlays

__all__ = [
    'OverlayRunResult',
    'run_overlays',
]
