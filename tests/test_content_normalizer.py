from __future__ import annotations

from amenity_images.content import Derivative, build_content_response, build_media_asset


def _media(media_id=3241, subject_id=81003, **extra):
    media = {
        "mediaId": media_id,
        "subjectId": subject_id,
        "display": "Restaurant",
        "caption": "Dining room",
        "aestheticScore": {"score": 0.87},
        "derivatives": [
            {"size": 16, "name": "3241_t.jpg"},
            {"size": 15, "name": "3241_z.jpg"},
        ],
    }
    media.update(extra)
    return media


def test_build_content_response_maps_property_and_room_media():
    payload = {
        "context": {"requestId": "REQ-1"},
        "propertyContents": [
            {
                "medias": [_media()],
                "roomTypeContents": [
                    {"roomTypeContentId": "201", "medias": [_media(media_id=9, subject_id=81012)]},
                ],
            }
        ],
    }

    response = build_content_response(payload)

    assert response.request_id == "REQ-1"
    [content] = response.property_contents
    [asset] = content.medias
    assert asset.media_id == 3241
    assert asset.subcategory_id == 81003
    assert asset.display == "Restaurant"
    assert asset.aesthetic_score == 0.87
    assert asset.derivatives == (Derivative(16, "3241_t.jpg"), Derivative(15, "3241_z.jpg"))
    assert content.room_medias(201)[0].media_id == 9
    assert content.room_medias(202) == ()
    assert content.room_medias(None) == ()


def test_missing_payload_stays_absent():
    assert build_content_response(None) is None
    assert build_content_response({}).property_contents == ()


def test_media_without_ids_is_skipped():
    assert build_media_asset(_media(media_id=None)) is None
    assert build_media_asset(_media(subject_id="n/a")) is None


def test_nested_media_shape_and_bare_score_are_accepted():
    asset = build_media_asset(
        {
            "subjectId": "81004",
            "aestheticScore": "0.5",
            "media": {"id": 77, "sizes": [{"size": 17, "name": "77.jpg"}, {"size": None, "name": "x"}]},
        }
    )

    assert asset.media_id == 77
    assert asset.subcategory_id == 81004
    assert asset.aesthetic_score == 0.5
    assert asset.derivatives == (Derivative(17, "77.jpg"),)


def test_legacy_room_id_key_is_read():
    response = build_content_response(
        {"propertyContents": [{"roomTypeContents": [{"roomTypeContentIdd": 5, "medias": [_media()]}]}]}
    )

    assert response.property_contents[0].rooms[0].room_id == 5


def test_non_object_nested_media_is_ignored():
    asset = build_media_asset(_media(media="legacy"))

    assert asset.media_id == 3241
    assert len(asset.derivatives) == 2


def test_null_media_id_falls_back_to_nested_id():
    asset = build_media_asset(_media(mediaId=None, media={"id": "88"}))

    assert asset.media_id == 88


def test_malformed_collections_degrade_to_empty():
    response = build_content_response(
        {
            "context": "x",
            "propertyContents": [
                {"medias": "none", "roomTypeContents": {"id": 1}},
                "garbage",
                {"medias": [_media(derivatives="n/a"), 5], "roomTypeContents": [{"medias": None}, 3]},
            ],
        }
    )

    assert response.request_id is None
    first, second = response.property_contents
    assert first.medias == ()
    assert first.rooms == ()
    assert second.medias[0].derivatives == ()
    assert second.rooms[0].room_id is None
    assert second.rooms[0].medias == ()


def test_non_object_payloads_are_treated_as_absent():
    assert build_content_response([]) is None
    assert build_content_response("maintenance") is None
    assert build_content_response({"propertyContents": {"medias": []}}).property_contents == ()
