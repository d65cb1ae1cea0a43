from __future__ import annotations

from datetime import timezone

from charsearch.utils.datetime import format_created_date, parse_iso_timestamp
from charsearch.utils.messages import SHARE_SIGNATURE, build_share_text, share_title


def test_parse_iso_timestamp_handles_zulu_suffix():
    parsed = parse_iso_timestamp("2017-11-04T18:48:46.250Z")
    assert parsed.tzinfo is not None
    assert parsed.utcoffset() == timezone.utc.utcoffset(None)
    assert parsed.hour == 18


def test_format_created_date():
    assert format_created_date("2017-11-04T18:48:46.250Z") == "November 4, 2017 at 6:48 PM"
    assert format_created_date("2017-12-29T00:05:00Z") == "December 29, 2017 at 12:05 AM"


def test_format_created_date_falls_back_to_input():
    assert format_created_date("yesterday") == "yesterday"
    assert format_created_date("") == ""


def test_build_share_text_includes_type_when_present(make_character):
    character = make_character(7, "Abradolf Lincler", type="Genetic experiment", status="unknown")

    text = build_share_text(character)

    assert text.splitlines() == [
        "Name: Abradolf Lincler",
        "Species: Human",
        "Status: unknown",
        "Origin: Earth (C-137)",
        "Type: Genetic experiment",
        "Created: November 4, 2017 at 6:48 PM",
        "",
        "Image: https://rickandmortyapi.com/api/character/avatar/7.jpeg",
        "",
        SHARE_SIGNATURE,
    ]


def test_build_share_text_skips_empty_type(make_character):
    text = build_share_text(make_character())
    assert "Type:" not in text
    assert share_title(make_character()) == "Character: Rick Sanchez"
