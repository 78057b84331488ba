from __future__ import annotations

from deck_overlays.mutations import (
    AffineTransform,
    CreateShape,
    RgbColor,
    SetElementLabel,
    Size,
    UpdateShapeStyle,
    UpdateTextStyle,
    to_requests,
    DeleteElement,
)


def test_create_shape_request() -> None:
    op = CreateShape("progress_p1_x", "p1", "RECTANGLE", Size(720, 5), AffineTransform(translate_y=400))
    request = op.to_request()["createShape"]

    assert request["objectId"] == "progress_p1_x"
    assert request["elementProperties"]["pageObjectId"] == "p1"
    assert request["elementProperties"]["size"]["width"] == {"magnitude": 720, "unit": "PT"}
    assert request["elementProperties"]["transform"]["translateY"] == 400
    assert request["elementProperties"]["transform"]["unit"] == "PT"


def test_shape_style_fields_follow_set_values() -> None:
    gray = RgbColor(0.5, 0.5, 0.5)
    request = UpdateShapeStyle("x", fill=gray, outline_color=gray, outline_weight=0.1).to_request()
    assert request["updateShapeProperties"]["fields"] == (
        "shapeBackgroundFill.solidFill.color,outline.weight,outline.outlineFill.solidFill.color"
    )

    anchor_only = UpdateShapeStyle("x", content_alignment="MIDDLE").to_request()
    assert anchor_only["updateShapeProperties"] == {
        "objectId": "x",
        "shapeProperties": {"contentAlignment": "MIDDLE"},
        "fields": "contentAlignment",
    }


def test_text_style_with_link() -> None:
    request = UpdateTextStyle("x", font_size=10, underline=False, link_page_id="p0").to_request()
    body = request["updateTextStyle"]

    assert body["fields"] == "fontSize,underline,link"
    assert body["style"]["link"] == {"pageObjectId": "p0"}
    assert body["style"]["underline"] is False


def test_alt_text_request_omits_unset_title() -> None:
    request = SetElementLabel("x", description="deck-overlays:label").to_request()
    assert request == {"updatePageElementAltText": {"objectId": "x", "description": "deck-overlays:label"}}


def test_to_requests_preserves_order() -> None:
    assert to_requests([DeleteElement("a"), DeleteElement("b")]) == [
        {"deleteObject": {"objectId": "a"}},
        {"deleteObject": {"objectId": "b"}},
    ]
