"""Tests for encoding and decoding filter state as URL parameters."""

from __future__ import annotations

import json
from urllib.parse import parse_qsl, urlsplit

import pytest

from trusted_search.errors import FilterDecodeError
from trusted_search.models import DateRange, FilterSet
from trusted_search.search import (
    build_search_url,
    decode_filters,
    encode_filters,
    filters_from_json,
    filters_to_json,
)
from trusted_search.search.codec import (
    DateRangeValue,
    ListValue,
    NumberValue,
    ObjectValue,
    StringValue,
    parse_param,
)

from conftest import day

FULL_FILTERS = FilterSet(
    source_types=("academic", "government"),
    content_types=("paper",),
    topics=("Quantum Physics",),
    date_range=DateRange(start=day(2024, 1, 1), end=day(2024, 1, 31)),
    min_authority_score=9.0,
)


def test_encode_filters_wire_format() -> None:
    assert encode_filters(FULL_FILTERS) == {
        "sourceTypes": '["academic","government"]',
        "contentTypes": '["paper"]',
        "topics": '["Quantum Physics"]',
        "dateRange": '{"start":"2024-01-01T00:00:00Z","end":"2024-01-31T00:00:00Z"}',
        "minAuthorityScore": "9",
    }


def test_encode_filters_omits_absent_and_empty_fields() -> None:
    assert encode_filters(FilterSet()) == {}
    assert encode_filters(FilterSet(topics=(), min_authority_score=8.75)) == {
        "minAuthorityScore": "8.75"
    }


def test_round_trip_restores_filters() -> None:
    assert decode_filters(encode_filters(FULL_FILTERS)) == FULL_FILTERS


def test_round_trip_turns_empty_lists_into_absent_fields() -> None:
    decoded = decode_filters(encode_filters(FilterSet(source_types=(), topics=("AI",))))

    assert decoded.source_types is None
    assert decoded.topics == ("AI",)


@pytest.mark.parametrize(
    ("key", "raw", "expected"),
    [
        ("topics", '["a","b"]', ListValue(["a", "b"])),
        ("minAuthorityScore", "9.5", NumberValue(9.5)),
        ("minAuthorityScore", " 7 ", NumberValue(7.0)),
        ("minAuthorityScore", "Infinity", ObjectValue(float("inf"))),
        ("topics", "plain words", StringValue("plain words")),
        ("topics", '"quoted"', StringValue("quoted")),
        (
            "dateRange",
            '{"start":"2024-01-01","end":"2024-02-01"}',
            DateRangeValue(start="2024-01-01", end="2024-02-01"),
        ),
        ("dateRange", '{"start":"2024-01-01"}', ObjectValue({"start": "2024-01-01"})),
        ("other", '{"start":"a","end":"b"}', ObjectValue({"start": "a", "end": "b"})),
        ("topics", "true", ObjectValue(True)),
    ],
)
def test_parse_param_tags_values(key: str, raw: str, expected: object) -> None:
    assert parse_param(key, raw) == expected


def test_decode_drops_mismatched_values_and_keeps_the_rest(caplog) -> None:
    params = {
        "q": "quantum",
        "page": "2",
        "sourceTypes": "academic",
        "topics": '["Physics"]',
        "contentTypes": '[1, 2]',
        "dateRange": '{"start":"yesterday","end":"today"}',
        "minAuthorityScore": '["9"]',
        "utm_source": "newsletter",
    }

    with caplog.at_level("WARNING", logger="trusted_search.search.codec"):
        filters = decode_filters(params)

    assert filters == FilterSet(topics=("Physics",))
    warned = " ".join(record.getMessage() for record in caplog.records)
    for key in ("sourceTypes", "contentTypes", "dateRange", "minAuthorityScore"):
        assert key in warned
    assert "utm_source" not in warned


def test_decode_accepts_plain_number_for_authority() -> None:
    assert decode_filters({"minAuthorityScore": "8.5"}).min_authority_score == 8.5


def test_decode_normalizes_dates_to_utc() -> None:
    filters = decode_filters(
        {"dateRange": '{"start":"2024-01-01T02:00:00+02:00","end":"2024-01-31"}'}
    )

    assert filters.date_range == DateRange(start=day(2024, 1, 1), end=day(2024, 1, 31))


def test_filters_from_json_round_trip() -> None:
    assert filters_from_json(filters_to_json(FULL_FILTERS)) == FULL_FILTERS


def test_filters_from_json_skips_nulls() -> None:
    assert filters_from_json('{"topics":null,"minAuthorityScore":7}') == FilterSet(
        min_authority_score=7.0
    )


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        '["academic"]',
        '{"sourceTypes":"academic"}',
        '{"dateRange":{"start":"2024-01-01"}}',
        '{"minAuthorityScore":"high"}',
    ],
)
def test_filters_from_json_is_strict(raw: str) -> None:
    with pytest.raises(FilterDecodeError) as excinfo:
        filters_from_json(raw)
    assert excinfo.value.code == "INVALID_FILTERS"


def test_build_search_url_round_trips_through_query_string() -> None:
    url = build_search_url("quantum physics", FULL_FILTERS, page=2, limit=20)

    parts = urlsplit(url)
    params = dict(parse_qsl(parts.query))
    assert parts.path == "/"
    assert params["q"] == "quantum physics"
    assert params["page"] == "2"
    assert params["limit"] == "20"
    assert json.loads(params["sourceTypes"]) == ["academic", "government"]
    assert decode_filters(params) == FULL_FILTERS


def test_build_search_url_without_filters() -> None:
    assert build_search_url("a&b", base_path="/search") == "/search?q=a%26b"
