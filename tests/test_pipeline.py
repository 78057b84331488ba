from __future__ import annotations

import pytest

from conftest import FakeDocument, FakeShape, RecordingClient, make_deck

from deck_overlays.config import Config
from deck_overlays.mutations import (
    CreateShape,
    DeleteElement,
    InsertText,
    SetElementLabel,
)
from deck_overlays.pipeline import OverlayPipeline
from deck_overlays.resource_cache import ResourceCache


class ApplyingClient:
    """Applies the structural effect of a batch to a FakeDocument."""

    def __init__(self, document: FakeDocument):
        self.document = document
        self.calls = 0

    def _find(self, object_id: str):
        for slide in self.document.slide_list:
            for shape in slide.shape_list:
                if shape.object_id == object_id:
                    return slide, shape
        raise KeyError(object_id)

    def batch_update(self, operations):
        self.calls += 1
        for op in operations:
            if isinstance(op, DeleteElement):
                slide, shape = self._find(op.object_id)
                slide.shape_list.remove(shape)
            elif isinstance(op, CreateShape):
                slide = next(s for s in self.document.slide_list if s.object_id == op.page_id)
                slide.shape_list.append(FakeShape(op.object_id, kind=op.shape_type))
            elif isinstance(op, InsertText):
                self._find(op.object_id)[1].text = op.text
            elif isinstance(op, SetElementLabel):
                _, shape = self._find(op.object_id)
                shape.label = op.title or ""
                shape.description = op.description or ""


def _structure(document: FakeDocument):
    """Overlay layout ignoring generated identifiers."""
    return [
        sorted(
            (shape.object_id.split("_" + slide.object_id + "_")[0], shape.text, shape.label)
            for shape in slide.shape_list
        )
        for slide in document.slide_list
    ]


def _sample_deck() -> FakeDocument:
    return make_deck(
        ("TITLE", "Quarterly Review"),
        ("TITLE_ONLY", "Outline"),
        ("SECTION_HEADER", "Intro"),
        ("BODY", "Numbers"),
        ("SECTION_HEADER", "Details"),
        ("BODY", "Appendix"),
    )


def test_batch_order_is_deletions_then_generators() -> None:
    document = _sample_deck()
    OverlayPipeline().run(document, ApplyingClient(document))

    client = RecordingClient()
    OverlayPipeline().run(document, client)
    batch = client.calls[0]

    kinds = [op.object_id.split("_")[0] for op in batch if isinstance(op, (DeleteElement, CreateShape))]
    first_create = next(i for i, op in enumerate(batch) if isinstance(op, CreateShape))
    assert all(isinstance(op, DeleteElement) for op in batch[:first_create])
    assert not any(isinstance(op, DeleteElement) for op in batch[first_create:])

    created = [k for k in kinds[first_create:]]
    order = ["progress", "footer", "before", "after", "label", "outline", "page", "tab"]
    first_seen = [order.index(k) for k in dict.fromkeys(created)]
    assert first_seen[:2] == [0, 1]
    assert created.index("outline") < created.index("page") < created.index("tab")
    assert created[-1] == "tab"


def test_rerun_is_idempotent() -> None:
    once = _sample_deck()
    OverlayPipeline().run(once, ApplyingClient(once))

    twice = _sample_deck()
    cache = ResourceCache()
    pipeline = OverlayPipeline(cache=cache)
    pipeline.run(twice, ApplyingClient(twice))
    pipeline.run(twice, ApplyingClient(twice))

    assert _structure(once) == _structure(twice)


def test_rerun_deletes_every_previous_overlay() -> None:
    document = _sample_deck()
    OverlayPipeline().run(document, ApplyingClient(document))
    created_first = {
        shape.object_id
        for slide in document.slide_list[1:]
        for shape in slide.shape_list
        if not shape.object_id.startswith("s")
    }

    client = RecordingClient()
    OverlayPipeline().run(document, client)
    deleted = {op.object_id for op in client.calls[0] if isinstance(op, DeleteElement)}
    assert deleted == created_first


def test_empty_document_makes_no_call() -> None:
    client = RecordingClient()
    result = OverlayPipeline().run(FakeDocument(), client)

    assert client.calls == []
    assert not result.submitted


def test_single_slide_deck_makes_no_call() -> None:
    client = RecordingClient()
    OverlayPipeline().run(make_deck(("TITLE", "Deck")), client)
    assert client.calls == []


def test_failed_submission_propagates() -> None:
    client = RecordingClient(error=RuntimeError("backend down"))
    with pytest.raises(RuntimeError, match="backend down"):
        OverlayPipeline().run(_sample_deck(), client)


def test_disabled_generators_emit_nothing() -> None:
    config = Config.from_dict({"generators": {"progress": False, "footer": False}})
    client = RecordingClient()
    OverlayPipeline(config).run(_sample_deck(), client)

    families = {op.object_id.split("_")[0] for op in client.calls[0] if isinstance(op, CreateShape)}
    assert families == {"before", "after", "label", "outline", "page", "tab"}


def test_palette_from_config_reaches_overlays() -> None:
    config = Config.from_dict({"palette": {"accent": "#FF0000"}})
    client = RecordingClient()
    pipeline = OverlayPipeline(config)
    pipeline.run(_sample_deck(), client)

    assert pipeline.cache.color("accent").red == 1.0


def test_shared_cache_keeps_first_palette_until_cleared() -> None:
    cache = ResourceCache()
    OverlayPipeline(Config.from_dict({"palette": {"accent": "#FF0000"}}), cache).run(_sample_deck(), RecordingClient())
    OverlayPipeline(Config.from_dict({"palette": {"accent": "#00FF00"}}), cache).run(_sample_deck(), RecordingClient())
    assert cache.color("accent").red == 1.0

    cache.clear()
    OverlayPipeline(Config.from_dict({"palette": {"accent": "#00FF00"}}), cache).run(_sample_deck(), RecordingClient())
    assert cache.color("accent").green == 1.0


def test_section_header_title_slide_gets_no_overlays() -> None:
    document = make_deck(
        ("SECTION_HEADER", "Intro"),
        ("BODY", "Numbers"),
        ("SECTION_HEADER", "Details"),
    )
    pipeline = OverlayPipeline(cache=ResourceCache())
    pipeline.run(document, ApplyingClient(document))
    after_first = _structure(document)
    pipeline.run(document, ApplyingClient(document))

    assert [shape.object_id for shape in document.slide_list[0].shape_list] == ["s0_title"]
    assert _structure(document) == after_first

    # Slide 0 still counts: the second section lists it and is numbered 2
    last = document.slide_list[2].shape_list
    assert any(shape.object_id.startswith("before_") and shape.text == "Intro" for shape in last)
    assert any(shape.text == "Section: 2" for shape in last)
