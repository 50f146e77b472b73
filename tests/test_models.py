"""
Tests for the scan document model: defaults, coercion, ordering, decode errors.
"""

from __future__ import annotations

import json

import pytest

from simplemed.domains.models import (
    Document,
    DocumentDecodeError,
    Safety,
    empty_document,
    parse_document,
    parse_document_text,
)

SCENARIO = {
    "meta": {"version": "2.0"},
    "sections": [
        {
            "category_name": "CT",
            "category_color_hex": "#ABCDEF",
            "scans": [
                {
                    "id": "ct1",
                    "title": "CT Head",
                    "safety": {"radiation_level": "Red", "pregnancy_safe": False},
                }
            ],
        }
    ],
}


def test_parse_scenario_document() -> None:
    """A sparse network payload keeps its values and defaults everything else."""
    doc = parse_document(SCENARIO)
    assert doc.version == "2.0"
    assert doc.contact_email == ""
    assert len(doc.sections) == 1
    section = doc.sections[0]
    assert section.category_name == "CT"
    assert section.color_hex == "#ABCDEF"
    assert len(section.scans) == 1

    scan = section.scans[0]
    assert scan.id == "ct1"
    assert scan.title == "CT Head"
    assert scan.safety.radiation_level == "Red"
    assert scan.safety.pregnancy_safe is False
    assert scan.safety.contrast_risk is False
    assert scan.safety.radiation_note == ""
    assert scan.short_summary == ""
    assert scan.full_description == ""
    assert scan.preparation.fasting_hours == 0
    assert scan.preparation.bladder == "N/A"
    assert scan.preparation.instructions == "No specific instructions."
    assert scan.logistics.duration_minutes == "0"
    assert scan.logistics.noise_level == "Low"
    assert scan.logistics.claustrophobia_risk == "Low"
    assert scan.media.icon_url == ""
    assert scan.media.hero_image_url == ""
    assert scan.media.hero_aspect_ratio == 1.5


@pytest.mark.parametrize("value", [None, [], "text", 42, True, {"sections": None}, {"meta": "x"}])
def test_parse_never_raises_on_wrong_shape(value: object) -> None:
    """Non-object input and wrong-typed roots produce a default Document."""
    doc = parse_document(value)
    assert isinstance(doc, Document)
    assert doc.version == "1.0"
    assert doc.contact_email == ""
    assert doc.sections == ()


def test_section_and_scan_defaults_for_empty_objects() -> None:
    doc = parse_document({"sections": [{"scans": [{}]}]})
    section = doc.sections[0]
    assert section.category_name == "Unknown Category"
    assert section.color_hex == "#005EB8"
    scan = section.scans[0]
    assert scan.id == ""
    assert scan.title == "Unknown Scan"
    assert scan.safety.radiation_level == "Green"
    assert scan.safety.pregnancy_safe is True


def test_wrong_typed_fields_take_defaults() -> None:
    """Fields of the wrong JSON type are replaced, not propagated."""
    raw = {
        "meta": {"version": 3, "contact_email": None},
        "sections": [
            {
                "category_name": ["CT"],
                "category_color_hex": 123,
                "scans": [
                    {
                        "id": 7,
                        "title": None,
                        "preparation": {"fasting_hours": "4", "bladder": False, "instructions": 1},
                        "logistics": {"duration_minutes": None, "noise_level": 2},
                        "safety": {"radiation_level": 1, "contrast_risk": "yes", "pregnancy_safe": "no"},
                        "media": {"icon_url": {}, "hero_aspect_ratio": "wide"},
                    }
                ],
            }
        ],
    }
    doc = parse_document(raw)
    assert doc.version == "1.0"
    assert doc.contact_email == ""
    section = doc.sections[0]
    assert section.category_name == "Unknown Category"
    assert section.color_hex == "#005EB8"
    scan = section.scans[0]
    assert scan.id == ""
    assert scan.title == "Unknown Scan"
    assert scan.preparation.fasting_hours == 0
    assert scan.preparation.bladder == "N/A"
    assert scan.preparation.instructions == "No specific instructions."
    assert scan.logistics.duration_minutes == "0"
    assert scan.logistics.noise_level == "Low"
    assert scan.safety.radiation_level == "Green"
    assert scan.safety.contrast_risk is False
    assert scan.safety.pregnancy_safe is True
    assert scan.media.icon_url == ""
    assert scan.media.hero_aspect_ratio == 1.5


def test_sub_records_that_are_not_objects_default() -> None:
    doc = parse_document({"sections": [{"scans": [{"preparation": [], "safety": "red", "media": 1}]}]})
    scan = doc.sections[0].scans[0]
    assert scan.preparation.fasting_hours == 0
    assert scan.safety.radiation_level == "Green"
    assert scan.media.hero_aspect_ratio == 1.5


def test_duration_accepts_number_or_string() -> None:
    doc = parse_document({"sections": [{"scans": [
        {"logistics": {"duration_minutes": 30}},
        {"logistics": {"duration_minutes": "45"}},
        {"logistics": {"duration_minutes": True}},
    ]}]})
    durations = [s.logistics.duration_minutes for s in doc.sections[0].scans]
    assert durations == ["30", "45", "0"]


def test_aspect_ratio_normalized_to_float() -> None:
    doc = parse_document({"sections": [{"scans": [
        {"media": {"hero_aspect_ratio": 2}},
        {"media": {"hero_aspect_ratio": 1.78}},
        {"media": {"hero_aspect_ratio": 0}},
        {"media": {"hero_aspect_ratio": -1.0}},
    ]}]})
    ratios = [s.media.hero_aspect_ratio for s in doc.sections[0].scans]
    assert ratios == [2.0, 1.78, 1.5, 1.5]
    assert isinstance(ratios[0], float)


@pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
def test_non_finite_numbers_take_defaults(literal: str) -> None:
    """JSON text may carry Infinity/NaN; they never reach the model."""
    text = (
        '{"sections":[{"scans":[{"media":{"hero_aspect_ratio":%s},'
        '"logistics":{"duration_minutes":%s},'
        '"preparation":{"fasting_hours":%s}}]}]}' % (literal, literal, literal)
    )
    scan = parse_document_text(text).sections[0].scans[0]
    assert scan.media.hero_aspect_ratio == 1.5
    assert scan.logistics.duration_minutes == "0"
    assert scan.preparation.fasting_hours == 0


def test_media_presence_flags() -> None:
    doc = parse_document({"sections": [{"scans": [
        {"media": {"icon_url": "https://img.test/ct.png", "hero_image_url": ""}},
        {},
    ]}]})
    with_icon, bare = (s.media for s in doc.sections[0].scans)
    assert with_icon.has_icon is True
    assert with_icon.has_hero_image is False
    assert bare.has_icon is False
    assert bare.has_hero_image is False


def test_fasting_hours_and_requires_fasting() -> None:
    doc = parse_document({"sections": [{"scans": [
        {"preparation": {"fasting_hours": 6}},
        {"preparation": {"fasting_hours": 4.0}},
        {"preparation": {"fasting_hours": -2}},
        {"preparation": {"fasting_hours": 2.5}},
        {"preparation": {}},
    ]}]})
    preps = [s.preparation for s in doc.sections[0].scans]
    assert [p.fasting_hours for p in preps] == [6, 4, 0, 0, 0]
    assert [p.requires_fasting for p in preps] == [True, True, False, False, False]


def test_order_preserved_and_non_objects_skipped() -> None:
    raw = {
        "sections": [
            {"category_name": "B", "scans": [{"id": "b2"}, "junk", {"id": "b1"}]},
            None,
            {"category_name": "A", "scans": [{"id": "a1"}]},
        ]
    }
    doc = parse_document(raw)
    assert [s.category_name for s in doc.sections] == ["B", "A"]
    assert [s.id for s in doc.all_scans()] == ["b2", "b1", "a1"]


def test_find_scan() -> None:
    doc = parse_document(SCENARIO)
    assert doc.find_scan("ct1") is not None
    assert doc.find_scan("missing") is None


@pytest.mark.parametrize(
    "level,expected",
    [("Red", "red"), ("RED", "red"), ("amber", "amber"), ("Orange", "amber"), ("green", "green"), ("purple", "green"), ("", "green")],
)
def test_traffic_light(level: str, expected: str) -> None:
    assert Safety(radiation_level=level).traffic_light == expected


def test_parse_document_text_roundtrip() -> None:
    doc = parse_document_text(json.dumps(SCENARIO))
    assert doc == parse_document(SCENARIO)


@pytest.mark.parametrize("text", ["", "not json", "{", "[]", "null", "3"])
def test_parse_document_text_rejects_bad_payload(text: str) -> None:
    with pytest.raises(DocumentDecodeError):
        parse_document_text(text)


def test_empty_document() -> None:
    doc = empty_document()
    assert doc.version == "0.0"
    assert doc.contact_email == ""
    assert doc.sections == ()


def test_documents_are_immutable() -> None:
    doc = parse_document(SCENARIO)
    with pytest.raises(AttributeError):
        doc.sections[0].scans[0].title = "changed"  # type: ignore[misc]
