from __future__ import annotations

from deck_overlays.google_slides import GoogleSlidesClient, GoogleSlidesDocument
from deck_overlays.mutations import DeleteElement, InsertText
from deck_overlays.pipeline import OverlayPipeline
from deck_overlays.snapshot import DocumentSnapshot


def _text(content: str) -> dict:
    return {"textElements": [{"paragraphMarker": {}}, {"textRun": {"content": content}}]}


PRESENTATION = {
    "presentationId": "pres-1",
    "pageSize": {
        "width": {"magnitude": 9144000, "unit": "EMU"},
        "height": {"magnitude": 5143500, "unit": "EMU"},
    },
    "layouts": [
        {"objectId": "L_TITLE", "layoutProperties": {"name": "TITLE"}},
        {"objectId": "L_SECTION", "layoutProperties": {"name": "SECTION_HEADER"}},
    ],
    "slides": [
        {
            "objectId": "s0",
            "slideProperties": {"layoutObjectId": "L_TITLE"},
            "pageElements": [{"objectId": "t0", "shape": {"shapeType": "TEXT_BOX", "text": _text("Deck\n")}}],
        },
        {
            "objectId": "s1",
            "slideProperties": {"layoutObjectId": "L_SECTION"},
            "pageElements": [
                {"objectId": "t1", "shape": {"shapeType": "TEXT_BOX", "text": _text("Intro\n")}},
                {"objectId": "image1", "image": {}},
                {"objectId": "old", "title": "PROGRESS", "shape": {"shapeType": "RECTANGLE"}},
            ],
        },
    ],
}


class _Call:
    def __init__(self, result):
        self.result = result

    def execute(self):
        return self.result


class FakePresentations:
    def __init__(self):
        self.batches: list[dict] = []

    def get(self, presentationId):
        assert presentationId == "pres-1"
        return _Call(PRESENTATION)

    def batchUpdate(self, presentationId, body):
        self.batches.append(body)
        return _Call({"presentationId": presentationId, "replies": []})


class FakeService:
    def __init__(self):
        self._presentations = FakePresentations()

    def presentations(self):
        return self._presentations


def test_document_adapts_presentation_json() -> None:
    document = GoogleSlidesDocument.fetch(FakeService(), "pres-1")
    snapshot = DocumentSnapshot.capture(document)

    assert snapshot.width == 720.0
    assert snapshot.height == 405.0
    assert snapshot.slides[1].layout_name == "SECTION_HEADER"
    assert [s.object_id for s in snapshot.slides[1].shapes] == ["t1", "old"]
    assert snapshot.slides[1].shapes[0].text == "Intro\n"
    assert snapshot.slides[1].shapes[1].label == "PROGRESS"


def test_client_sends_single_batch_update() -> None:
    service = FakeService()
    client = GoogleSlidesClient(service, "pres-1")
    client.batch_update([DeleteElement("a"), InsertText("b", "x")])

    assert service.presentations().batches == [{
        "requests": [
            {"deleteObject": {"objectId": "a"}},
            {"insertText": {"objectId": "b", "insertionIndex": 0, "text": "x"}},
        ]
    }]


def test_pipeline_against_google_backend() -> None:
    service = FakeService()
    document = GoogleSlidesDocument.fetch(service, "pres-1")
    OverlayPipeline().run(document, GoogleSlidesClient(service, "pres-1"))

    batches = service.presentations().batches
    assert len(batches) == 1
    requests = batches[0]["requests"]
    assert requests[0] == {"deleteObject": {"objectId": "old"}}
    created = [r["createShape"]["objectId"] for r in requests if "createShape" in r]
    assert sorted(name.split("_")[0] for name in created) == ["footer", "label", "page", "progress", "progress"]
