"""python-pptx backend: a .pptx file as document handle and mutation client.

``PptxDocument`` exposes a presentation through the document handle protocol
read by ``DocumentSnapshot.capture``. ``PptxMutationClient`` applies a
mutation batch to the same presentation, operation by operation and in order.

Object ids map onto the presentation like this:
    slide  -> ``slide_<slide_id>``
    shape  -> ``slide_<slide_id>/<shape_id>`` (shape names repeat across slides)
    new    -> the shape name (created shapes are named with their object id)
    label  -> ``cNvPr/@title``    (alt-text title)
    family -> ``cNvPr/@descr``    (alt-text description)

Typical usage:
    >>> document = PptxDocument.open("deck.pptx")
    >>> OverlayPipeline(config).run(document, PptxMutationClient(document))
    >>> document.save("deck.pptx")
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Union

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_SHAPE, MSO_SHAPE_TYPE
from pptx.enum.text import MSO_ANCHOR, MSO_AUTO_SIZE
from pptx.util import Pt

from .mutations import (
    ALIGN_BOTTOM,
    ALIGN_MIDDLE,
    ALIGN_TOP,
    RECTANGLE,
    TEXT_BOX,
    CreateParagraphBullets,
    CreateShape,
    DeleteElement,
    InsertText,
    MutationOperation,
    RgbColor,
    SetElementLabel,
    UpdateParagraphStyle,
    UpdateShapeStyle,
    UpdateTextStyle,
)
from .rich_text import add_bullet, set_alignment

if TYPE_CHECKING:
    from pptx.shapes.base import BaseShape
    from pptx.slide import Slide

logger = logging.getLogger(__name__)

_ANCHORS = {
    ALIGN_TOP: MSO_ANCHOR.TOP,
    ALIGN_MIDDLE: MSO_ANCHOR.MIDDLE,
    ALIGN_BOTTOM: MSO_ANCHOR.BOTTOM,
}


class UnknownObjectError(LookupError):
    """Raised when an operation targets an object id that does not exist."""


def slide_object_id(slide: "Slide") -> str:
    return f"slide_{slide.slide_id}"


def shape_object_id(slide: "Slide", shape: "BaseShape") -> str:
    return f"{slide_object_id(slide)}/{shape.shape_id}"


def _cNvPr(shape: "BaseShape"):
    return shape._element._nvXxPr.cNvPr


def _shape_kind(shape: "BaseShape") -> str:
    try:
        shape_type = shape.shape_type
    except NotImplementedError:
        return ''
    if shape_type == MSO_SHAPE_TYPE.TEXT_BOX:
        return TEXT_BOX
    if shape_type == MSO_SHAPE_TYPE.PLACEHOLDER:
        return 'PLACEHOLDER'
    return shape_type.name if shape_type is not None else ''


def _rgb(color: RgbColor) -> RGBColor:
    return RGBColor(*(max(0, min(255, round(channel * 255))) for channel in
                      (color.red, color.green, color.blue)))


class PptxShape:
    """Document-handle view of one python-pptx shape."""

    def __init__(self, shape: "BaseShape", slide: "Slide"):
        self._shape = shape
        self._slide = slide

    @property
    def object_id(self) -> str:
        return shape_object_id(self._slide, self._shape)

    @property
    def name(self) -> str:
        return self._shape.name

    @property
    def kind(self) -> str:
        return _shape_kind(self._shape)

    @property
    def text(self) -> str:
        if not self._shape.has_text_frame:
            return ''
        return self._shape.text_frame.text

    @property
    def label(self) -> str:
        return _cNvPr(self._shape).get('title') or ''

    @property
    def description(self) -> str:
        return _cNvPr(self._shape).get('descr') or ''


class PptxSlide:
    """Document-handle view of one python-pptx slide."""

    def __init__(self, slide: "Slide"):
        self._slide = slide

    @property
    def object_id(self) -> str:
        return slide_object_id(self._slide)

    @property
    def layout_name(self) -> str:
        return self._slide.slide_layout.name

    @property
    def shapes(self) -> list[PptxShape]:
        return [PptxShape(shape, self._slide) for shape in self._slide.shapes]


class PptxDocument:
    """A python-pptx Presentation exposed as a document handle."""

    def __init__(self, prs, path: Optional[Path] = None):
        self.prs = prs
        self.path = path

    @classmethod
    def open(cls, path: Union[str, Path]) -> "PptxDocument":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Presentation file not found: {path}")
        logger.info(f"Loading presentation: {path}")
        return cls(Presentation(str(path)), path)

    def save(self, path: Union[str, Path, None] = None) -> Path:
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("No output path given and document was not opened from a file")
        target.parent.mkdir(parents=True, exist_ok=True)
        self.prs.save(str(target))
        logger.info(f"Saved presentation to {target}")
        return target

    @property
    def page_width(self) -> float:
        return self.prs.slide_width.pt

    @property
    def page_height(self) -> float:
        return self.prs.slide_height.pt

    @property
    def slides(self) -> list[PptxSlide]:
        return [PptxSlide(slide) for slide in self.prs.slides]

    def layout_names(self) -> list[str]:
        """Sorted, de-duplicated names of the deck's slide layouts."""
        return sorted({layout.name for layout in self.prs.slide_layouts})


class PptxMutationClient:
    """Applies mutation batches to a PptxDocument's presentation."""

    def __init__(self, document: PptxDocument):
        self.document = document
        self._created: dict[str, "BaseShape"] = {}

    def batch_update(self, operations: Sequence[MutationOperation]) -> int:
        """Apply operations in order; returns the number applied.

        Raises:
            UnknownObjectError: If an operation targets a missing slide or shape.
            ValueError: If an operation carries an unsupported value.
        """
        handlers = {
            CreateShape: self._create_shape,
            UpdateShapeStyle: self._update_shape_style,
            SetElementLabel: self._set_label,
            InsertText: self._insert_text,
            UpdateTextStyle: self._update_text_style,
            UpdateParagraphStyle: self._update_paragraph_style,
            CreateParagraphBullets: self._create_bullets,
            DeleteElement: self._delete,
        }
        for op in operations:
            handler = handlers.get(type(op))
            if handler is None:
                raise ValueError(f"Unsupported operation: {op!r}")
            handler(op)
        logger.debug(f"Applied {len(operations)} operations")
        return len(operations)

    # Lookup

    def _slide(self, page_id: str) -> "Slide":
        for slide in self.document.prs.slides:
            if slide_object_id(slide) == page_id:
                return slide
        raise UnknownObjectError(f"No slide with id '{page_id}'")

    def _shape(self, object_id: str) -> "BaseShape":
        shape = self._created.get(object_id)
        if shape is not None:
            return shape
        page_id, _, shape_id = object_id.rpartition('/')
        if page_id and shape_id.isdigit():
            for shape in self._slide(page_id).shapes:
                if shape.shape_id == int(shape_id):
                    return shape
        raise UnknownObjectError(f"No element with id '{object_id}'")

    # Handlers

    def _create_shape(self, op: CreateShape) -> None:
        slide = self._slide(op.page_id)
        width, height = op.size.width, op.size.height
        transform = op.transform

        # The transform maps the box's local frame onto the page; python-pptx
        # positions the unrotated box and rotates it about its center.
        center_x, center_y = transform.apply(width / 2, height / 2)
        rotation = math.degrees(math.atan2(transform.shear_y, transform.scale_x)) % 360
        left, top = center_x - width / 2, center_y - height / 2

        if op.shape_type == RECTANGLE:
            shape = slide.shapes.add_shape(MSO_SHAPE.RECTANGLE, Pt(left), Pt(top), Pt(width), Pt(height))
        elif op.shape_type == TEXT_BOX:
            shape = slide.shapes.add_textbox(Pt(left), Pt(top), Pt(width), Pt(height))
            shape.text_frame.word_wrap = True
            shape.text_frame.auto_size = MSO_AUTO_SIZE.NONE
        else:
            raise ValueError(f"Unsupported shape type: '{op.shape_type}'")

        shape.name = op.object_id
        if rotation:
            shape.rotation = rotation
        self._created[op.object_id] = shape

    def _update_shape_style(self, op: UpdateShapeStyle) -> None:
        shape = self._shape(op.object_id)
        if op.fill is not None:
            shape.fill.solid()
            shape.fill.fore_color.rgb = _rgb(op.fill)
        if op.outline_color is not None:
            shape.line.color.rgb = _rgb(op.outline_color)
        if op.outline_weight is not None:
            shape.line.width = Pt(op.outline_weight)
        if op.content_alignment is not None:
            try:
                shape.text_frame.vertical_anchor = _ANCHORS[op.content_alignment]
            except KeyError:
                raise ValueError(f"Unknown content alignment: '{op.content_alignment}'")

    def _set_label(self, op: SetElementLabel) -> None:
        cNvPr = _cNvPr(self._shape(op.object_id))
        if op.title is not None:
            cNvPr.set('title', op.title)
        if op.description is not None:
            cNvPr.set('descr', op.description)

    def _insert_text(self, op: InsertText) -> None:
        self._shape(op.object_id).text_frame.text = op.text

    def _update_text_style(self, op: UpdateTextStyle) -> None:
        shape = self._shape(op.object_id)
        for paragraph in shape.text_frame.paragraphs:
            for run in paragraph.runs:
                font = run.font
                if op.font_family is not None:
                    font.name = op.font_family
                if op.font_size is not None:
                    font.size = Pt(op.font_size)
                if op.color is not None:
                    font.color.rgb = _rgb(op.color)
                if op.bold is not None:
                    font.bold = op.bold
                if op.underline is not None:
                    font.underline = op.underline
        if op.link_page_id is not None:
            # Runs cannot link to a slide; the whole shape carries the link
            shape.click_action.target_slide = self._slide(op.link_page_id)

    def _update_paragraph_style(self, op: UpdateParagraphStyle) -> None:
        for paragraph in self._shape(op.object_id).text_frame.paragraphs:
            set_alignment(paragraph, op.alignment)

    def _create_bullets(self, op: CreateParagraphBullets) -> None:
        for paragraph in self._shape(op.object_id).text_frame.paragraphs:
            add_bullet(paragraph)

    def _delete(self, op: DeleteElement) -> None:
        shape = self._created.pop(op.object_id, None) or self._shape(op.object_id)
        element = shape._element
        element.getparent().remove(element)
