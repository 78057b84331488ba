"""Removal of overlays generated by a previous run."""

from __future__ import annotations

import logging
from typing import Optional

from .element_index import ElementIndex
from .mutations import DeleteElement
from .snapshot import DocumentSnapshot

logger = logging.getLogger(__name__)


def build_deletions(
    snapshot: DocumentSnapshot,
    elements: Optional[ElementIndex] = None,
) -> list[DeleteElement]:
    """Queue a delete for every generated overlay on slides 1..N-1.

    Slide 0 is never touched.
    """
    if snapshot.is_empty:
        return []
    if elements is None:
        elements = ElementIndex.build(snapshot)

    deletions = [
        DeleteElement(element.object_id)
        for index in range(1, snapshot.slide_count)
        for element in elements.generated_on(index)
    ]
    logger.debug(f"Queued {len(deletions)} deletion(s)")
    return deletions
