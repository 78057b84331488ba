"""Mutation operations submitted to the document-mutation interface.

Every operation is an immutable value. ``to_request()`` renders it in the
Google Slides ``batchUpdate`` request format, which is also the vocabulary the
python-pptx backend interprets. All geometry is expressed in points.

Typical usage:
    >>> op = InsertText(object_id="label_p1_ab12cd340", text="Section: 1")
    >>> op.to_request()
    {'insertText': {'objectId': 'label_p1_ab12cd340', 'insertionIndex': 0, 'text': 'Section: 1'}}
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Union

UNIT = 'PT'

# Shape kinds understood by CreateShape
RECTANGLE = 'RECTANGLE'
TEXT_BOX = 'TEXT_BOX'

# Content (vertical) alignments
ALIGN_TOP = 'TOP'
ALIGN_MIDDLE = 'MIDDLE'
ALIGN_BOTTOM = 'BOTTOM'

# Paragraph alignments
PARAGRAPH_START = 'START'
PARAGRAPH_CENTER = 'CENTER'
PARAGRAPH_END = 'END'

BULLET_DISC_CIRCLE_SQUARE = 'BULLET_DISC_CIRCLE_SQUARE'


def _dimension(magnitude: float) -> dict[str, Any]:
    return {'magnitude': magnitude, 'unit': UNIT}


@dataclass(frozen=True)
class RgbColor:
    """An RGB color with channels in [0, 1]."""
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {'red': self.red, 'green': self.green, 'blue': self.blue}


BLACK = RgbColor(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    def to_dict(self) -> dict[str, Any]:
        return {'width': _dimension(self.width), 'height': _dimension(self.height)}


@dataclass(frozen=True)
class AffineTransform:
    """2D affine transform applied to a page element.

    Maps a local point (x, y) to
    (scale_x*x + shear_x*y + translate_x, shear_y*x + scale_y*y + translate_y).
    """
    scale_x: float = 1.0
    scale_y: float = 1.0
    shear_x: float = 0.0
    shear_y: float = 0.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    def moved_to(self, x: float, y: float) -> "AffineTransform":
        """Return a copy of this preset translated to (x, y)."""
        return replace(self, translate_x=x, translate_y=y)

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.scale_x * x + self.shear_x * y + self.translate_x,
            self.shear_y * x + self.scale_y * y + self.translate_y,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'scaleX': self.scale_x,
            'scaleY': self.scale_y,
            'shearX': self.shear_x,
            'shearY': self.shear_y,
            'translateX': self.translate_x,
            'translateY': self.translate_y,
            'unit': UNIT,
        }


def _solid_fill(color: RgbColor) -> dict[str, Any]:
    return {'solidFill': {'color': {'rgbColor': color.to_dict()}}}


@dataclass(frozen=True)
class CreateShape:
    object_id: str
    page_id: str
    shape_type: str
    size: Size
    transform: AffineTransform

    kind = 'create_shape'

    def to_request(self) -> dict[str, Any]:
        return {
            'createShape': {
                'objectId': self.object_id,
                'shapeType': self.shape_type,
                'elementProperties': {
                    'pageObjectId': self.page_id,
                    'size': self.size.to_dict(),
                    'transform': self.transform.to_dict(),
                },
            }
        }


@dataclass(frozen=True)
class UpdateShapeStyle:
    """Fill, border and content alignment of a shape; unset fields are left alone."""
    object_id: str
    fill: Optional[RgbColor] = None
    outline_color: Optional[RgbColor] = None
    outline_weight: Optional[float] = None
    content_alignment: Optional[str] = None

    kind = 'update_shape_style'

    def to_request(self) -> dict[str, Any]:
        properties: dict[str, Any] = {}
        fields: list[str] = []
        if self.content_alignment is not None:
            properties['contentAlignment'] = self.content_alignment
            fields.append('contentAlignment')
        if self.fill is not None:
            properties['shapeBackgroundFill'] = _solid_fill(self.fill)
            fields.append('shapeBackgroundFill.solidFill.color')
        outline: dict[str, Any] = {}
        if self.outline_weight is not None:
            outline['weight'] = _dimension(self.outline_weight)
            fields.append('outline.weight')
        if self.outline_color is not None:
            outline['outlineFill'] = _solid_fill(self.outline_color)
            fields.append('outline.outlineFill.solidFill.color')
        if outline:
            properties['outline'] = outline
        return {
            'updateShapeProperties': {
                'objectId': self.object_id,
                'shapeProperties': properties,
                'fields': ','.join(fields),
            }
        }


@dataclass(frozen=True)
class SetElementLabel:
    """Alt-text title (the semantic label) and description (the family tag)."""
    object_id: str
    title: Optional[str] = None
    description: Optional[str] = None

    kind = 'set_element_label'

    def to_request(self) -> dict[str, Any]:
        body: dict[str, Any] = {'objectId': self.object_id}
        if self.title is not None:
            body['title'] = self.title
        if self.description is not None:
            body['description'] = self.description
        return {'updatePageElementAltText': body}


@dataclass(frozen=True)
class InsertText:
    object_id: str
    text: str

    kind = 'insert_text'

    def to_request(self) -> dict[str, Any]:
        return {'insertText': {'objectId': self.object_id, 'insertionIndex': 0, 'text': self.text}}


@dataclass(frozen=True)
class UpdateTextStyle:
    """Character style over the whole text of an element; unset fields are left alone."""
    object_id: str
    font_family: Optional[str] = None
    font_size: Optional[float] = None
    color: Optional[RgbColor] = None
    bold: Optional[bool] = None
    underline: Optional[bool] = None
    link_page_id: Optional[str] = None

    kind = 'update_text_style'

    def to_request(self) -> dict[str, Any]:
        style: dict[str, Any] = {}
        fields: list[str] = []
        if self.bold is not None:
            style['bold'] = self.bold
            fields.append('bold')
        if self.font_family is not None:
            style['fontFamily'] = self.font_family
            fields.append('fontFamily')
        if self.font_size is not None:
            style['fontSize'] = _dimension(self.font_size)
            fields.append('fontSize')
        if self.color is not None:
            style['foregroundColor'] = {'opaqueColor': {'rgbColor': self.color.to_dict()}}
            fields.append('foregroundColor')
        if self.underline is not None:
            style['underline'] = self.underline
            fields.append('underline')
        if self.link_page_id is not None:
            style['link'] = {'pageObjectId': self.link_page_id}
            fields.append('link')
        return {
            'updateTextStyle': {
                'objectId': self.object_id,
                'textRange': {'type': 'ALL'},
                'style': style,
                'fields': ','.join(fields),
            }
        }


@dataclass(frozen=True)
class UpdateParagraphStyle:
    object_id: str
    alignment: str = PARAGRAPH_CENTER

    kind = 'update_paragraph_style'

    def to_request(self) -> dict[str, Any]:
        return {
            'updateParagraphStyle': {
                'objectId': self.object_id,
                'textRange': {'type': 'ALL'},
                'style': {'alignment': self.alignment},
                'fields': 'alignment',
            }
        }


@dataclass(frozen=True)
class CreateParagraphBullets:
    object_id: str
    preset: str = BULLET_DISC_CIRCLE_SQUARE

    kind = 'create_paragraph_bullets'

    def to_request(self) -> dict[str, Any]:
        return {
            'createParagraphBullets': {
                'objectId': self.object_id,
                'textRange': {'type': 'ALL'},
                'bulletPreset': self.preset,
            }
        }


@dataclass(frozen=True)
class DeleteElement:
    object_id: str

    kind = 'delete_element'

    def to_request(self) -> dict[str, Any]:
        return {'deleteObject': {'objectId': self.object_id}}


MutationOperation = Union[
    CreateShape,
    UpdateShapeStyle,
    SetElementLabel,
    InsertText,
    UpdateTextStyle,
    UpdateParagraphStyle,
    CreateParagraphBullets,
    DeleteElement,
]

# One invocation's ordered operations
MutationBatch = list[MutationOperation]


def to_requests(batch: MutationBatch) -> list[dict[str, Any]]:
    """Render a batch as the request list of a single ``batchUpdate`` body."""
    return [op.to_request() for op in batch]
