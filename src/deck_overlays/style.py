"""Typed overlay style resolved from configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .section_index import DEFAULT_SECTION_LAYOUTS

if TYPE_CHECKING:
    from .config import Config


@dataclass(frozen=True)
class BoxGeometry:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class OverlayStyle:
    """Fonts, sizes and geometry of every generated overlay (points)."""
    font_family: str = 'Source Sans Pro'
    progress_height: float = 5.0
    outline_weight: float = 0.1
    footer_width: float = 360.0
    footer_height: float = 30.0
    footer_pt: float = 10.0
    section_width: float = 600.0
    section_height: float = 150.0
    section_before_y: float = 30.0
    section_after_y: float = 240.0
    section_pt: float = 20.0
    label: BoxGeometry = BoxGeometry(50.0, 50.0, 80.0, 25.0)
    label_pt: float = 14.0
    outline: BoxGeometry = BoxGeometry(280.0, 51.0, 400.0, 300.0)
    outline_pt: float = 28.0
    outline_trigger: str = 'Outline'
    page_number: BoxGeometry = BoxGeometry(650.0, 370.0, 70.0, 30.0)
    page_number_pt: float = 12.0
    tab_height: float = 14.0
    tab_pt: float = 8.0
    tab_min_width: float = 50.0
    tab_padding: float = 5.0
    tab_line_weight: float = 1.0
    section_layouts: tuple[str, ...] = DEFAULT_SECTION_LAYOUTS
    enabled: dict[str, bool] = field(default_factory=dict)

    def is_enabled(self, generator: str) -> bool:
        return self.enabled.get(generator, True)

    @classmethod
    def from_config(cls, config: "Config") -> "OverlayStyle":
        """Build the style from config, keeping defaults for missing keys.

        Font sizes are looked up as ``fonts.<role>_pt``; geometry under
        ``progress_bar``, ``footer``, ``section_boxes``, ``label``, ``outline``,
        ``page_number`` and ``tabs``.
        """
        defaults = cls()

        def number(key: str, default: float) -> float:
            return float(config.get(key, default))

        def box(prefix: str, default: BoxGeometry) -> BoxGeometry:
            return BoxGeometry(
                x=number(f"{prefix}.x", default.x),
                y=number(f"{prefix}.y", default.y),
                width=number(f"{prefix}.width", default.width),
                height=number(f"{prefix}.height", default.height),
            )

        layouts = config.get('layouts.section_header', None)
        if isinstance(layouts, str):
            layouts = [layouts]

        return cls(
            font_family=config.get('fonts.family', defaults.font_family),
            progress_height=number('progress_bar.height_pt', defaults.progress_height),
            outline_weight=number('progress_bar.outline_weight_pt', defaults.outline_weight),
            footer_width=number('footer.width', defaults.footer_width),
            footer_height=number('footer.height', defaults.footer_height),
            footer_pt=number('fonts.footer_pt', defaults.footer_pt),
            section_width=number('section_boxes.width', defaults.section_width),
            section_height=number('section_boxes.height', defaults.section_height),
            section_before_y=number('section_boxes.before_y', defaults.section_before_y),
            section_after_y=number('section_boxes.after_y', defaults.section_after_y),
            section_pt=number('fonts.section_pt', defaults.section_pt),
            label=box('label', defaults.label),
            label_pt=number('fonts.label_pt', defaults.label_pt),
            outline=box('outline', defaults.outline),
            outline_pt=number('fonts.outline_pt', defaults.outline_pt),
            outline_trigger=config.get('outline.trigger_title', defaults.outline_trigger),
            page_number=box('page_number', defaults.page_number),
            page_number_pt=number('fonts.page_number_pt', defaults.page_number_pt),
            tab_height=number('tabs.height', defaults.tab_height),
            tab_pt=number('fonts.tab_pt', defaults.tab_pt),
            tab_min_width=number('tabs.min_width', defaults.tab_min_width),
            tab_padding=number('tabs.padding', defaults.tab_padding),
            tab_line_weight=number('tabs.line_weight_pt', defaults.tab_line_weight),
            section_layouts=tuple(layouts) if layouts else defaults.section_layouts,
            enabled={
                name: bool(value)
                for name, value in (config.get('generators', {}) or {}).items()
            },
        )
