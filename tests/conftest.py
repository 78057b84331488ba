"""Shared fixtures: in-memory document handles and a recording mutation client."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from deck_overlays.resource_cache import ResourceCache


@dataclass
class FakeShape:
    object_id: str
    text: str = ""
    kind: str = "TEXT_BOX"
    label: str = ""
    description: str = ""
    name: str = ""


@dataclass
class FakeSlide:
    object_id: str
    layout: str = "TITLE_AND_BODY"
    shape_list: list[FakeShape] = field(default_factory=list)
    layout_reads: int = 0

    @property
    def layout_name(self) -> str:
        self.layout_reads += 1
        return self.layout

    @property
    def shapes(self) -> list[FakeShape]:
        return list(self.shape_list)


@dataclass
class FakeDocument:
    slide_list: list[FakeSlide] = field(default_factory=list)
    page_width: float = 720.0
    page_height: float = 405.0

    @property
    def slides(self) -> list[FakeSlide]:
        return list(self.slide_list)


class RecordingClient:
    """Mutation client that records each batch and optionally fails."""

    def __init__(self, error: Exception | None = None):
        self.calls: list[list] = []
        self.error = error

    def batch_update(self, operations):
        self.calls.append(list(operations))
        if self.error is not None:
            raise self.error
        return {"replies": [{} for _ in operations]}


def make_deck(*specs) -> FakeDocument:
    """Build a document from (layout, title) pairs; title may be None for no text."""
    slides = []
    for idx, (layout, title) in enumerate(specs):
        shapes = [FakeShape(f"s{idx}_title", text=title)] if title is not None else []
        slides.append(FakeSlide(f"p{idx}", layout=layout, shape_list=shapes))
    return FakeDocument(slides)


@pytest.fixture
def cache() -> ResourceCache:
    return ResourceCache().initialize()


@pytest.fixture
def client() -> RecordingClient:
    return RecordingClient()
