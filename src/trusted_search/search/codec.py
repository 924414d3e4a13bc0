"""
Filter codec: FilterSet <-> flat string parameters for URLs.

Encoding writes list fields as compact JSON arrays (omitted when empty), the
date range as a JSON object of ISO-8601 strings, and numbers via their string
form. Decoding parses each parameter into one tagged value, then assigns it
to the matching FilterSet field.

An empty list does not survive a round trip: it is omitted on encode and
comes back as ``None``. Both mean "no constraint".
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from ..dates import format_iso_datetime, parse_iso_datetime
from ..errors import FilterDecodeError
from ..models import DateRange, FilterSet

logger = logging.getLogger(__name__)


QUERY_PARAM = "q"
PAGE_PARAM = "page"
LIMIT_PARAM = "limit"
COMBINED_FILTERS_PARAM = "filters"
RESERVED_PARAMS: frozenset[str] = frozenset(
    {QUERY_PARAM, PAGE_PARAM, LIMIT_PARAM, COMBINED_FILTERS_PARAM}
)

SOURCE_TYPES_KEY = "sourceTypes"
CONTENT_TYPES_KEY = "contentTypes"
TOPICS_KEY = "topics"
DATE_RANGE_KEY = "dateRange"
MIN_AUTHORITY_KEY = "minAuthorityScore"

_LIST_FIELDS: dict[str, str] = {
    SOURCE_TYPES_KEY: "source_types",
    CONTENT_TYPES_KEY: "content_types",
    TOPICS_KEY: "topics",
}


@dataclass(frozen=True)
class DateRangeValue:
    start: Any
    end: Any


@dataclass(frozen=True)
class ListValue:
    items: list[Any]


@dataclass(frozen=True)
class NumberValue:
    number: float


@dataclass(frozen=True)
class StringValue:
    text: str


@dataclass(frozen=True)
class ObjectValue:
    """Any other JSON value (object, boolean, null)."""

    data: Any


ParamValue = DateRangeValue | ListValue | NumberValue | StringValue | ObjectValue


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode_filters(filters: FilterSet) -> dict[str, str]:
    """Encode ``filters`` as flat string parameters, omitting absent fields."""
    params: dict[str, str] = {}
    for key, attr in _LIST_FIELDS.items():
        values = getattr(filters, attr)
        if values:
            params[key] = _compact_json(list(values))

    if filters.date_range is not None:
        params[DATE_RANGE_KEY] = _compact_json(_date_range_to_dict(filters.date_range))

    if filters.min_authority_score is not None:
        params[MIN_AUTHORITY_KEY] = _format_number(filters.min_authority_score)

    return params


def filters_to_dict(filters: FilterSet) -> dict[str, Any]:
    """JSON-ready camelCase form of ``filters``, as echoed in search responses."""
    data: dict[str, Any] = {}
    for key, attr in _LIST_FIELDS.items():
        values = getattr(filters, attr)
        if values is not None:
            data[key] = list(values)
    if filters.date_range is not None:
        data[DATE_RANGE_KEY] = _date_range_to_dict(filters.date_range)
    if filters.min_authority_score is not None:
        data[MIN_AUTHORITY_KEY] = filters.min_authority_score
    return data


def filters_to_json(filters: FilterSet) -> str:
    """Serialize ``filters`` for the combined ``filters`` parameter."""
    return _compact_json(filters_to_dict(filters))


def build_search_url(
    query: str,
    filters: FilterSet | None = None,
    *,
    page: int | None = None,
    limit: int | None = None,
    base_path: str = "/",
) -> str:
    """Build a shareable search URL carrying the query and itemized filters."""
    params: dict[str, str] = {QUERY_PARAM: query}
    if page is not None:
        params[PAGE_PARAM] = str(page)
    if limit is not None:
        params[LIMIT_PARAM] = str(limit)
    if filters is not None:
        params.update(encode_filters(filters))
    return f"{base_path}?{urlencode(params)}"


def _date_range_to_dict(date_range: DateRange) -> dict[str, str]:
    return {
        "start": format_iso_datetime(date_range.start),
        "end": format_iso_datetime(date_range.end),
    }


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def parse_param(key: str, raw: str) -> ParamValue:
    """Parse one raw parameter: JSON first, then number, then plain string."""
    try:
        parsed = json.loads(raw)
    except ValueError:
        number = _parse_number(raw)
        if number is not None:
            return NumberValue(number)
        return StringValue(raw)
    return classify_value(key, parsed)


def classify_value(key: str, value: Any) -> ParamValue:
    """Tag an already-parsed JSON value with the shape it represents."""
    if key == DATE_RANGE_KEY and isinstance(value, dict):
        if value.get("start") and value.get("end"):
            return DateRangeValue(start=value["start"], end=value["end"])
    if isinstance(value, list):
        return ListValue(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isfinite(value):
            return NumberValue(float(value))
    if isinstance(value, str):
        return StringValue(value)
    return ObjectValue(value)


def decode_filters(params: Mapping[str, str]) -> FilterSet:
    """
    Decode itemized filter parameters.

    A parameter whose value does not fit its field is dropped with a warning
    and the rest are kept. Reserved and unknown keys are ignored.
    """
    fields: dict[str, Any] = {}
    for key, raw in params.items():
        if key in RESERVED_PARAMS:
            continue
        try:
            _assign(fields, key, parse_param(key, raw))
        except FilterDecodeError as exc:
            logger.warning("Ignoring invalid %s parameter: %s", key, exc.message)
    return FilterSet(**fields)


def filters_from_json(raw: str) -> FilterSet:
    """Strictly decode the combined ``filters`` JSON parameter."""
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise FilterDecodeError("Invalid filters format") from exc
    if not isinstance(payload, dict):
        raise FilterDecodeError("Invalid filters format")

    fields: dict[str, Any] = {}
    for key, value in payload.items():
        if value is None:
            continue
        _assign(fields, key, classify_value(key, value))
    return FilterSet(**fields)


def _assign(fields: dict[str, Any], key: str, value: ParamValue) -> None:
    if key in _LIST_FIELDS:
        if not isinstance(value, ListValue):
            raise FilterDecodeError(f"{key} must be a JSON array")
        if not all(isinstance(item, str) for item in value.items):
            raise FilterDecodeError(f"{key} must contain only strings")
        fields[_LIST_FIELDS[key]] = tuple(value.items)
    elif key == DATE_RANGE_KEY:
        if not isinstance(value, DateRangeValue):
            raise FilterDecodeError(f"{key} must be an object with start and end")
        try:
            fields["date_range"] = DateRange(
                start=parse_iso_datetime(value.start),
                end=parse_iso_datetime(value.end),
            )
        except ValueError as exc:
            raise FilterDecodeError(f"{key} has an invalid date: {exc}") from exc
    elif key == MIN_AUTHORITY_KEY:
        if not isinstance(value, NumberValue):
            raise FilterDecodeError(f"{key} must be a number")
        fields["min_authority_score"] = value.number
    else:
        logger.debug("Ignoring unknown filter parameter %s", key)


def _parse_number(raw: str) -> float | None:
    try:
        number = float(raw)
    except ValueError:
        return None
    return number if math.isfinite(number) else None
