from __future__ import annotations

import pytest

from conftest import FakeDocument, FakeShape, FakeSlide

from deck_overlays.deletion import build_deletions
from deck_overlays.element_index import OverlayFamily, classify_shape
from deck_overlays.mutations import DeleteElement
from deck_overlays.snapshot import DocumentSnapshot, ShapeRef


def _deck_with_overlays() -> FakeDocument:
    first = FakeSlide("p0", shape_list=[
        FakeShape("t", text="Deck"),
        FakeShape("progress_p0_aaa"),
    ])
    second = FakeSlide("p1", shape_list=[
        FakeShape("title", text="Body"),
        FakeShape("progress_bg_p1_a1"),
        FakeShape("progress_p1_a2"),
        FakeShape("footer_p1_a3", text="Deck"),
        FakeShape("custom", label="MAIN_TITLE"),
        FakeShape("renamed", description="deck-overlays:outline"),
        FakeShape("user_box", text="keep me", label="Diagram"),
    ])
    return FakeDocument([first, second])


def test_deletes_prefixed_labeled_and_tagged_elements() -> None:
    deletions = build_deletions(DocumentSnapshot.capture(_deck_with_overlays()))
    assert deletions == [
        DeleteElement("progress_bg_p1_a1"),
        DeleteElement("progress_p1_a2"),
        DeleteElement("footer_p1_a3"),
        DeleteElement("custom"),
        DeleteElement("renamed"),
    ]


def test_never_deletes_on_first_slide() -> None:
    deletions = build_deletions(DocumentSnapshot.capture(_deck_with_overlays()))
    assert all(not d.object_id.endswith("p0_aaa") for d in deletions)


def test_empty_document_yields_nothing() -> None:
    assert build_deletions(DocumentSnapshot.capture(FakeDocument())) == []


def test_classification_prefers_longest_prefix() -> None:
    assert classify_shape(ShapeRef("progress_bg_x_1")) is OverlayFamily.PROGRESS_BG
    assert classify_shape(ShapeRef("progress_x_1")) is OverlayFamily.PROGRESS


def test_classification_by_label_and_tag() -> None:
    assert classify_shape(ShapeRef("g123", label="PROGRESS_BG")) is OverlayFamily.PROGRESS_BG
    assert classify_shape(ShapeRef("g123", description="deck-overlays:before")) is OverlayFamily.BEFORE
    assert classify_shape(ShapeRef("g123", label="Chart", description="notes")) is None


@pytest.mark.parametrize(
    "name, family",
    [
        ("page_num_p3_k1", OverlayFamily.PAGE_NUMBER),
        ("tab_p3_k1", OverlayFamily.TAB),
        ("tab_bg_p3_k1", OverlayFamily.TAB_BG),
        ("tab_line_p3_k1", OverlayFamily.TAB_LINE),
        ("obj_p3_lx2k_7", OverlayFamily.FOOTER),
    ],
)
def test_classification_of_older_overlay_names(name: str, family: OverlayFamily) -> None:
    assert classify_shape(ShapeRef(name)) is family


def test_classification_reads_name_before_object_id() -> None:
    assert classify_shape(ShapeRef("slide_256/7", name="progress_slide_256_ab")) is OverlayFamily.PROGRESS
    assert classify_shape(ShapeRef("slide_256/7", name="Rectangle 6")) is None
