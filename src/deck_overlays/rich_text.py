"""Paragraph-level formatting helpers for python-pptx text frames."""

from pptx.enum.text import PP_ALIGN
from pptx.oxml.ns import qn
from pptx.oxml.xmlchemy import OxmlElement
from typing import TYPE_CHECKING

from .mutations import PARAGRAPH_CENTER, PARAGRAPH_END, PARAGRAPH_START

if TYPE_CHECKING:
    from pptx.text.text import _Paragraph

# EMU conversions (914400 EMU = 1 inch)
# Bullet hanging indent: text at 0.5", bullet character at 0"
BULLET_MARGIN_EMU = 457200        # 0.5 inches - where text starts
BULLET_INDENT_EMU = -457200       # -0.5 inches - bullet hangs to the left

# Bullet glyph per nesting level for the disc/circle/square preset
BULLET_CHARS = ('●', '○', '■')

PARAGRAPH_ALIGNMENTS = {
    PARAGRAPH_START: PP_ALIGN.LEFT,
    PARAGRAPH_CENTER: PP_ALIGN.CENTER,
    PARAGRAPH_END: PP_ALIGN.RIGHT,
}


def _set_paragraph_margins(pPr, marL: int, indent: int) -> None:
    """Set paragraph margins via XML attributes.

    Args:
        pPr: Paragraph properties element
        marL: Left margin in EMU
        indent: First line indent in EMU (negative for hanging)
    """
    pPr.set('marL', str(marL))
    pPr.set('indent', str(indent))


def _remove_bullet_elements(pPr) -> None:
    for tag in ('a:buNone', 'a:buChar', 'a:buAutoNum'):
        for existing in pPr.findall(qn(tag)):
            pPr.remove(existing)


def add_bullet(paragraph: '_Paragraph') -> None:
    """Add bullet formatting to a paragraph with a hanging indent.

    The glyph follows the paragraph level: disc, circle, then square.

    Args:
        paragraph: PowerPoint paragraph object
    """
    pPr = paragraph._element.get_or_add_pPr()
    _set_paragraph_margins(pPr, BULLET_MARGIN_EMU * (paragraph.level + 1), BULLET_INDENT_EMU)
    _remove_bullet_elements(pPr)

    buChar = OxmlElement('a:buChar')
    buChar.set('char', BULLET_CHARS[paragraph.level % len(BULLET_CHARS)])
    pPr.insert(0, buChar)


def set_alignment(paragraph: '_Paragraph', alignment: str) -> None:
    """Apply a START/CENTER/END alignment to a paragraph."""
    try:
        paragraph.alignment = PARAGRAPH_ALIGNMENTS[alignment]
    except KeyError:
        raise ValueError(f"Unknown paragraph alignment: '{alignment}'")
