"""Classified element index shared by every pipeline stage.

Built once per run from the snapshot. For each slide it records which shapes
are overlays generated by an earlier run (and of which family) and the first
non-empty user-authored text, which serves as the slide's title.

Generated overlays are recognized, in order, by:
    1. the family tag stored in the element's alt-text description
    2. the name prefix ``<family>_`` (plus ``obj_`` for footers of older decks)
    3. the reserved alt-text title (PROGRESS, PROGRESS_BG, MAIN_TITLE)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .snapshot import DocumentSnapshot, ShapeRef

logger = logging.getLogger(__name__)

FAMILY_TAG_PREFIX = 'deck-overlays:'


class OverlayFamily(str, Enum):
    PROGRESS = 'progress'
    PROGRESS_BG = 'progress_bg'
    BEFORE = 'before'
    AFTER = 'after'
    LABEL = 'label'
    OUTLINE = 'outline'
    FOOTER = 'footer'
    PAGE_NUMBER = 'page_num'
    TAB = 'tab'
    TAB_BG = 'tab_bg'
    TAB_LINE = 'tab_line'

    @property
    def tag(self) -> str:
        """Family tag written to the element's alt-text description."""
        return f"{FAMILY_TAG_PREFIX}{self.value}"

    def object_id(self, slide_id: str, token: str) -> str:
        return f"{self.value}_{slide_id}_{token}"


# Longest prefix first so progress_bg_ is not read as progress_
_PREFIXES: list[tuple[str, OverlayFamily]] = sorted(
    [(f"{family.value}_", family) for family in OverlayFamily] + [('obj_', OverlayFamily.FOOTER)],
    key=lambda item: len(item[0]),
    reverse=True,
)

RESERVED_LABELS: dict[str, OverlayFamily] = {
    'PROGRESS': OverlayFamily.PROGRESS,
    'PROGRESS_BG': OverlayFamily.PROGRESS_BG,
    'MAIN_TITLE': OverlayFamily.FOOTER,
}

_TAGS: dict[str, OverlayFamily] = {family.tag: family for family in OverlayFamily}


def classify_shape(shape: ShapeRef) -> Optional[OverlayFamily]:
    """Return the overlay family of a generated shape, or None for user content."""
    family = _TAGS.get(shape.description.strip())
    if family is not None:
        return family
    name = shape.name or shape.object_id
    for prefix, family in _PREFIXES:
        if name.startswith(prefix):
            return family
    return RESERVED_LABELS.get(shape.label)


def first_text(shapes) -> str:
    """First non-empty trimmed text, scanning shapes in document order."""
    for shape in shapes:
        text = shape.text.strip()
        if text:
            return text
    return ''


@dataclass(frozen=True)
class GeneratedElement:
    object_id: str
    slide_index: int
    family: OverlayFamily


@dataclass
class SlideElements:
    index: int
    title: str = ''
    generated: list[GeneratedElement] = field(default_factory=list)
    user_shapes: list[ShapeRef] = field(default_factory=list)


class ElementIndex:
    """Per-slide classification of a snapshot's shapes."""

    def __init__(self, slides: list[SlideElements]):
        self._slides = slides

    @classmethod
    def build(cls, snapshot: DocumentSnapshot) -> "ElementIndex":
        slides: list[SlideElements] = []
        generated_total = 0
        for slide in snapshot.slides:
            entry = SlideElements(index=slide.index)
            for shape in slide.shapes:
                family = classify_shape(shape)
                if family is None:
                    entry.user_shapes.append(shape)
                else:
                    entry.generated.append(GeneratedElement(shape.object_id, slide.index, family))
            entry.title = first_text(entry.user_shapes)
            generated_total += len(entry.generated)
            slides.append(entry)

        logger.debug(f"Element index: {generated_total} generated overlays found")
        return cls(slides)

    def __len__(self) -> int:
        return len(self._slides)

    def title_of(self, index: int) -> str:
        """Title of slide ``index``; empty when missing or out of range."""
        if 0 <= index < len(self._slides):
            return self._slides[index].title
        return ''

    def generated_on(self, index: int) -> list[GeneratedElement]:
        if 0 <= index < len(self._slides):
            return list(self._slides[index].generated)
        return []
