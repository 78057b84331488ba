"""One-shot capture of the document state the pipeline needs.

Reading from the live document is the expensive part of a run, so the
snapshot reads every value exactly once and the rest of the pipeline works on
plain immutable data.

Document handles are duck-typed. A handle exposes:

    document.page_width, document.page_height   (points)
    document.slides                             (ordered slide handles)
    slide.object_id, slide.layout_name, slide.shapes
    shape.object_id, shape.name, shape.kind, shape.text, shape.label, shape.description

A shape's ``object_id`` must be unique across the document; ``name`` is the
human-visible name the overlay prefixes are matched against (the Slides API
uses the object id for both).

Both backends (python-pptx and Google Slides) provide these.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Slides whose live handle stays reachable after capture
RETAINED_HANDLES = 2


@dataclass(frozen=True)
class ShapeRef:
    """Read-only view of one page element."""
    object_id: str
    name: str = ''
    kind: str = ''
    text: str = ''
    label: str = ''
    description: str = ''


@dataclass(frozen=True)
class SlideRef:
    object_id: str
    index: int
    layout_name: Optional[str]
    shapes: tuple[ShapeRef, ...] = ()
    handle: Any = None


@dataclass(frozen=True)
class DocumentSnapshot:
    width: float
    height: float
    slides: tuple[SlideRef, ...]

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    @property
    def is_empty(self) -> bool:
        return not self.slides

    def slide(self, index: int) -> Optional[SlideRef]:
        if 0 <= index < len(self.slides):
            return self.slides[index]
        return None

    def layout_of(self, index: int) -> Optional[str]:
        """Layout name of slide ``index``.

        Slide 0's layout is not read during capture; it is read here, through
        the retained handle, only when asked for.
        """
        slide = self.slide(index)
        if slide is None:
            return None
        if slide.layout_name is None and slide.handle is not None:
            return slide.handle.layout_name
        return slide.layout_name

    @classmethod
    def capture(cls, document) -> "DocumentSnapshot":
        """Capture page geometry, slides and shapes from a document handle.

        Args:
            document: Document handle (see module docstring).

        Returns:
            Immutable snapshot; ``is_empty`` is True for a deck with no slides.
        """
        width = float(document.page_width)
        height = float(document.page_height)

        slides: list[SlideRef] = []
        for idx, slide in enumerate(document.slides):
            shapes = tuple(_capture_shape(shape) for shape in slide.shapes)
            slides.append(SlideRef(
                object_id=slide.object_id,
                index=idx,
                # Slide 0 never needs its layout downstream
                layout_name=None if idx == 0 else slide.layout_name,
                shapes=shapes,
                handle=slide if idx < RETAINED_HANDLES else None,
            ))

        snapshot = cls(width=width, height=height, slides=tuple(slides))
        if snapshot.is_empty:
            logger.info("Document has no slides; nothing to generate")
        else:
            logger.debug(
                f"Captured {snapshot.slide_count} slides "
                f"({width:.0f}x{height:.0f}pt)"
            )
        return snapshot


def _capture_shape(shape) -> ShapeRef:
    return ShapeRef(
        object_id=shape.object_id,
        name=shape.name or '',
        kind=shape.kind or '',
        text=shape.text or '',
        label=shape.label or '',
        description=shape.description or '',
    )
