"""Section-marker discovery.

A slide is a section marker when its layout is one of the configured
section-header layouts and it carries some user-authored text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .element_index import ElementIndex
from .snapshot import DocumentSnapshot

logger = logging.getLogger(__name__)

DEFAULT_SECTION_LAYOUTS: tuple[str, ...] = ('SECTION_HEADER', 'Section Header')


@dataclass(frozen=True)
class SectionEntry:
    title: str
    slide_index: int
    slide_id: str


def build_section_index(
    snapshot: DocumentSnapshot,
    elements: Optional[ElementIndex] = None,
    section_layouts: Iterable[str] = DEFAULT_SECTION_LAYOUTS,
) -> list[SectionEntry]:
    """Return section-marker slides in slide order.

    Args:
        snapshot: Captured document state.
        elements: Shared element index; built from the snapshot when omitted.
        section_layouts: Layout names that mark a section header.

    Returns:
        SectionEntry list ordered by slide index. Section-header slides
        without any text are left out.
    """
    if snapshot.is_empty:
        return []
    if elements is None:
        elements = ElementIndex.build(snapshot)

    layouts = frozenset(section_layouts)
    sections: list[SectionEntry] = []
    for slide in snapshot.slides:
        if snapshot.layout_of(slide.index) not in layouts:
            continue
        title = elements.title_of(slide.index)
        if not title:
            logger.debug(f"Section header slide {slide.index} has no text; skipped")
            continue
        sections.append(SectionEntry(title=title, slide_index=slide.index, slide_id=slide.object_id))

    logger.info(f"Found {len(sections)} section(s)")
    return sections
