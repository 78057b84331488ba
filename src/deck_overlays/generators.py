"""Overlay generators.

Each generator is a pure function of a GeneratorContext and returns the
mutation operations for its overlays. Generators never read the live
document and never submit anything; the pipeline concatenates their output
into one batch.

Generators:
    progress_indicator  - background track and progress bar on slides 1..N-1
    footer_link         - rotated deck title on the right edge, linking to slide 0
    section_annotations - before/after section lists and a numbered label per section slide
    outline             - bulleted section list on an "Outline" second slide
    page_number         - "i / N" page counter on slides 1..N-1
    tab_navigation      - linked section tabs along the top of non-section slides
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from .element_index import ElementIndex, OverlayFamily
from .mutations import (
    ALIGN_BOTTOM,
    ALIGN_MIDDLE,
    ALIGN_TOP,
    PARAGRAPH_CENTER,
    RECTANGLE,
    TEXT_BOX,
    BULLET_DISC_CIRCLE_SQUARE,
    CreateParagraphBullets,
    CreateShape,
    InsertText,
    MutationOperation,
    SetElementLabel,
    Size,
    UpdateParagraphStyle,
    UpdateShapeStyle,
    UpdateTextStyle,
)
from .resource_cache import ResourceCache
from .section_index import SectionEntry
from .snapshot import DocumentSnapshot
from .style import OverlayStyle

logger = logging.getLogger(__name__)


@dataclass
class GeneratorContext:
    """Everything a generator may read during one run."""
    snapshot: DocumentSnapshot
    cache: ResourceCache
    sections: list[SectionEntry]
    elements: ElementIndex
    style: OverlayStyle = field(default_factory=OverlayStyle)

    def new_id(self, family: OverlayFamily, slide_id: str) -> str:
        return family.object_id(slide_id, self.cache.next_identifier())


def _text_box(
    ctx: GeneratorContext,
    object_id: str,
    slide_id: str,
    size: Size,
    transform_name: str,
    x: float,
    y: float,
) -> CreateShape:
    return CreateShape(
        object_id=object_id,
        page_id=slide_id,
        shape_type=TEXT_BOX,
        size=size,
        transform=ctx.cache.transform(transform_name, x, y),
    )


def _family_tag(object_id: str, family: OverlayFamily, title: str | None = None) -> SetElementLabel:
    return SetElementLabel(object_id=object_id, title=title, description=family.tag)


def progress_indicator(ctx: GeneratorContext) -> list[MutationOperation]:
    """Background track plus a bar of width ``i / (N - 1)`` on every slide but the first."""
    snapshot = ctx.snapshot
    total = snapshot.slide_count
    if total <= 1:
        return []

    style = ctx.style
    max_width = snapshot.width
    y = snapshot.height - style.progress_height
    ops: list[MutationOperation] = []

    for i in range(1, total):
        slide_id = snapshot.slides[i].object_id
        ratio = i / (total - 1)
        bars = (
            (OverlayFamily.PROGRESS_BG, 'PROGRESS_BG', max_width, ctx.cache.color('track')),
            (OverlayFamily.PROGRESS, 'PROGRESS', max_width * ratio, ctx.cache.color('accent')),
        )
        for family, label, width, color in bars:
            object_id = ctx.new_id(family, slide_id)
            ops.append(CreateShape(
                object_id=object_id,
                page_id=slide_id,
                shape_type=RECTANGLE,
                size=Size(width=width, height=style.progress_height),
                transform=ctx.cache.transform('identity', 0.0, y),
            ))
            # Hairline border in the fill color hides the seam
            ops.append(UpdateShapeStyle(
                object_id=object_id,
                fill=color,
                outline_color=color,
                outline_weight=style.outline_weight,
            ))
            ops.append(_family_tag(object_id, family, label))

    logger.debug(f"Progress indicator: {2 * (total - 1)} bars")
    return ops


def footer_link(ctx: GeneratorContext) -> list[MutationOperation]:
    """Rotated title-slide link along the right edge of slides 1..N-1."""
    snapshot = ctx.snapshot
    if snapshot.slide_count < 2:
        return []

    title = ctx.elements.title_of(0)
    if not title:
        logger.info("Title slide has no text; footer link skipped")
        return []

    style = ctx.style
    first_slide_id = snapshot.slides[0].object_id
    size = Size(width=style.footer_width, height=style.footer_height)
    y = (snapshot.height - style.footer_width) / 2
    ops: list[MutationOperation] = []

    for slide in snapshot.slides[1:]:
        object_id = ctx.new_id(OverlayFamily.FOOTER, slide.object_id)
        ops.extend([
            _text_box(ctx, object_id, slide.object_id, size, 'rotation90', snapshot.width, y),
            InsertText(object_id, title),
            UpdateTextStyle(
                object_id,
                font_family=style.font_family,
                font_size=style.footer_pt,
                color=ctx.cache.color('muted'),
                underline=False,
                link_page_id=first_slide_id,
            ),
            UpdateParagraphStyle(object_id, PARAGRAPH_CENTER),
            UpdateShapeStyle(object_id, content_alignment=ALIGN_MIDDLE),
            _family_tag(object_id, OverlayFamily.FOOTER, 'MAIN_TITLE'),
        ])
    return ops


def _title_list_box(
    ctx: GeneratorContext,
    family: OverlayFamily,
    slide_id: str,
    titles: list[str],
    y: float,
    anchor: str,
) -> list[MutationOperation]:
    style = ctx.style
    object_id = ctx.new_id(family, slide_id)
    x = (ctx.snapshot.width - style.section_width) / 2
    size = Size(width=style.section_width, height=style.section_height)
    return [
        _text_box(ctx, object_id, slide_id, size, 'identity', x, y),
        UpdateShapeStyle(object_id, content_alignment=anchor),
        InsertText(object_id, '\n'.join(titles)),
        UpdateTextStyle(
            object_id,
            font_family=style.font_family,
            font_size=style.section_pt,
            color=ctx.cache.color('section_text'),
            bold=False,
        ),
        UpdateParagraphStyle(object_id, PARAGRAPH_CENTER),
        _family_tag(object_id, family),
    ]


def section_annotations(ctx: GeneratorContext) -> list[MutationOperation]:
    """Before/after title lists and a ``Section: n`` label on every section slide."""
    sections = ctx.sections
    if not sections:
        return []

    style = ctx.style
    titles = [section.title for section in sections]
    ops: list[MutationOperation] = []

    for k, section in enumerate(sections):
        # Slide 0 stays in the lists and the numbering but gets no overlays
        if section.slide_index == 0:
            continue
        slide_id = section.slide_id
        before = titles[:k]
        after = titles[k + 1:]

        if before:
            ops.extend(_title_list_box(
                ctx, OverlayFamily.BEFORE, slide_id, before, style.section_before_y, ALIGN_BOTTOM,
            ))
        if after:
            ops.extend(_title_list_box(
                ctx, OverlayFamily.AFTER, slide_id, after, style.section_after_y, ALIGN_TOP,
            ))

        label = style.label
        label_id = ctx.new_id(OverlayFamily.LABEL, slide_id)
        ops.extend([
            _text_box(ctx, label_id, slide_id, Size(label.width, label.height), 'identity', label.x, label.y),
            UpdateShapeStyle(label_id, fill=ctx.cache.color('accent'), content_alignment=ALIGN_MIDDLE),
            InsertText(label_id, f"Section: {k + 1}"),
            UpdateTextStyle(
                label_id,
                font_family=style.font_family,
                font_size=style.label_pt,
                color=ctx.cache.color('white'),
                bold=True,
            ),
            UpdateParagraphStyle(label_id, PARAGRAPH_CENTER),
            _family_tag(label_id, OverlayFamily.LABEL),
        ])

    logger.debug(f"Section annotations for {len(sections)} section(s)")
    return ops


def outline(ctx: GeneratorContext) -> list[MutationOperation]:
    """Bulleted list of every section title on the second slide, when it is titled "Outline"."""
    snapshot = ctx.snapshot
    second = snapshot.slide(1)
    if second is None:
        return []

    style = ctx.style
    if ctx.elements.title_of(1) != style.outline_trigger:
        return []
    if not ctx.sections:
        logger.info("Outline slide found but no sections; outline skipped")
        return []

    geometry = style.outline
    object_id = ctx.new_id(OverlayFamily.OUTLINE, second.object_id)
    return [
        _text_box(
            ctx, object_id, second.object_id,
            Size(geometry.width, geometry.height), 'identity', geometry.x, geometry.y,
        ),
        UpdateShapeStyle(object_id, content_alignment=ALIGN_MIDDLE),
        InsertText(object_id, '\n'.join(section.title for section in ctx.sections)),
        UpdateTextStyle(
            object_id,
            font_family=style.font_family,
            font_size=style.outline_pt,
            color=ctx.cache.color('accent'),
            bold=False,
        ),
        UpdateParagraphStyle(object_id, PARAGRAPH_CENTER),
        CreateParagraphBullets(object_id, BULLET_DISC_CIRCLE_SQUARE),
        _family_tag(object_id, OverlayFamily.OUTLINE),
    ]


def page_number(ctx: GeneratorContext) -> list[MutationOperation]:
    """``i / N`` counter (1-based) on every slide but the first."""
    snapshot = ctx.snapshot
    total = snapshot.slide_count
    if total < 2:
        return []

    style = ctx.style
    box = style.page_number
    ops: list[MutationOperation] = []
    for slide in snapshot.slides[1:]:
        object_id = ctx.new_id(OverlayFamily.PAGE_NUMBER, slide.object_id)
        ops.extend([
            _text_box(ctx, object_id, slide.object_id, Size(box.width, box.height), 'identity', box.x, box.y),
            InsertText(object_id, f"{slide.index + 1} / {total}"),
            UpdateTextStyle(
                object_id,
                font_family=style.font_family,
                font_size=style.page_number_pt,
                color=ctx.cache.color('muted'),
                bold=True,
            ),
            UpdateParagraphStyle(object_id, PARAGRAPH_CENTER),
            _family_tag(object_id, OverlayFamily.PAGE_NUMBER),
        ])
    return ops


def _tab_widths(ctx: GeneratorContext) -> list[float]:
    style = ctx.style
    # Rough glyph width for the tab font
    char_width = style.tab_pt * 0.75
    return [
        max(len(section.title) * char_width, style.tab_min_width) + style.tab_padding
        for section in ctx.sections
    ]


def _flat_bar(
    ctx: GeneratorContext,
    family: OverlayFamily,
    slide_id: str,
    size: Size,
    y: float,
    color_name: str,
) -> list[MutationOperation]:
    object_id = ctx.new_id(family, slide_id)
    color = ctx.cache.color(color_name)
    return [
        CreateShape(
            object_id=object_id,
            page_id=slide_id,
            shape_type=RECTANGLE,
            size=size,
            transform=ctx.cache.transform('identity', 0.0, y),
        ),
        UpdateShapeStyle(
            object_id=object_id,
            fill=color,
            outline_color=color,
            outline_weight=ctx.style.outline_weight,
        ),
        _family_tag(object_id, family),
    ]


def tab_navigation(ctx: GeneratorContext) -> list[MutationOperation]:
    """Row of section tabs linked to their slides, the current section highlighted.

    Section-header slides get no tab row. The current section of a slide is
    the last section starting at or before it; slides before the first
    section highlight nothing.
    """
    snapshot = ctx.snapshot
    sections = ctx.sections
    if snapshot.slide_count < 2 or not sections:
        return []

    style = ctx.style
    layouts = frozenset(style.section_layouts)
    widths = _tab_widths(ctx)
    x_start = max((snapshot.width - sum(widths)) / 2, 0.0)
    ops: list[MutationOperation] = []

    current = -1
    for slide in snapshot.slides[1:]:
        while current + 1 < len(sections) and slide.index >= sections[current + 1].slide_index:
            current += 1
        if snapshot.layout_of(slide.index) in layouts:
            continue

        slide_id = slide.object_id
        ops.extend(_flat_bar(
            ctx, OverlayFamily.TAB_BG, slide_id, Size(snapshot.width, style.tab_height), 0.0, 'white',
        ))

        x = x_start
        for k, (section, width) in enumerate(zip(sections, widths)):
            active = k == current
            tab_id = ctx.new_id(OverlayFamily.TAB, slide_id)
            ops.extend([
                _text_box(ctx, tab_id, slide_id, Size(width, style.tab_height), 'identity', x, 0.0),
                InsertText(tab_id, section.title),
                UpdateShapeStyle(
                    tab_id,
                    fill=ctx.cache.color('accent' if active else 'white'),
                    content_alignment=ALIGN_MIDDLE,
                ),
                UpdateTextStyle(
                    tab_id,
                    font_family=style.font_family,
                    font_size=style.tab_pt,
                    color=ctx.cache.color('white' if active else 'muted'),
                    bold=True,
                    underline=False,
                    link_page_id=section.slide_id,
                ),
                UpdateParagraphStyle(tab_id, PARAGRAPH_CENTER),
                _family_tag(tab_id, OverlayFamily.TAB),
            ])
            x += width

        ops.extend(_flat_bar(
            ctx, OverlayFamily.TAB_LINE, slide_id,
            Size(snapshot.width, style.tab_line_weight), style.tab_height, 'accent',
        ))

    return ops


Generator = Callable[[GeneratorContext], list[MutationOperation]]

# Submission order after the deletions
GENERATORS: tuple[tuple[str, Generator], ...] = (
    ('progress', progress_indicator),
    ('footer', footer_link),
    ('sections', section_annotations),
    ('outline', outline),
    ('page_number', page_number),
    ('tabs', tab_navigation),
)
