import importlib
from datetime import datetime
from uuid import UUID

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

import trusted_search.server as server_module
from trusted_search.config import ENV_CORPUS_PATH, ENV_MAX_PAGE_SIZE, SearchSettings
from trusted_search.server import create_app


@pytest.fixture()
def client(sample_corpus) -> TestClient:
    return TestClient(create_app(sample_corpus, SearchSettings()))


def _assert_error(response, status_code: int, code: str) -> dict:
    assert response.status_code == status_code
    error = response.json()["error"]
    assert error["code"] == code
    assert error["message"]
    assert error["timestamp"].endswith("Z")
    datetime.fromisoformat(error["timestamp"])
    UUID(error["requestId"])
    return error


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_search_climate(client: TestClient) -> None:
    response = client.get("/api/search", params={"q": "climate", "page": 1, "limit": 10})

    assert response.status_code == 200
    body = response.json()
    assert body["totalCount"] == 3
    assert body["currentPage"] == 1
    assert body["totalPages"] == 1
    assert body["query"] == "climate"
    assert body["filters"] == {}
    assert body["searchTime"] >= 0
    assert [item["source"]["id"] for item in body["results"]] == [
        "wikipedia",
        "nature",
        "britannica",
    ]

    first = body["results"][0]
    assert first["relevanceScore"] == 0.95
    assert first["contentType"] == "article"
    assert first["publishedDate"].startswith("2023-01-15")
    assert first["source"]["authorityScore"] == 8.5
    assert first["source"]["trustLevel"] == "high"
    assert first["source"]["domain"] == "en.wikipedia.org"


def test_search_with_itemized_filters(client: TestClient) -> None:
    response = client.get(
        "/api/search",
        params={"q": "quantum", "sourceTypes": '["academic"]'},
    )

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body["results"]] == ["physics-arxiv-1"]
    assert body["filters"] == {"sourceTypes": ["academic"]}


def test_search_with_combined_filters(client: TestClient) -> None:
    response = client.get(
        "/api/search",
        params={
            "q": "vaccine",
            "filters": '{"dateRange":{"start":"2024-01-01","end":"2024-01-31"}}',
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["totalCount"] == 0
    assert body["totalPages"] == 0
    assert body["filters"]["dateRange"] == {
        "start": "2024-01-01T00:00:00Z",
        "end": "2024-01-31T00:00:00Z",
    }


def test_search_page_past_end_is_empty(client: TestClient) -> None:
    body = client.get("/api/search", params={"q": "climate", "page": 5}).json()

    assert body["results"] == []
    assert body["totalCount"] == 3
    assert body["currentPage"] == 5


@pytest.mark.parametrize(
    ("params", "code"),
    [
        ({}, "MISSING_QUERY"),
        ({"q": "  "}, "MISSING_QUERY"),
        ({"q": "  ", "filters": "not-json", "page": "abc"}, "MISSING_QUERY"),
        ({"q": "x" * 501}, "INVALID_QUERY"),
        ({"q": "climate", "page": "abc"}, "INVALID_PARAMETERS"),
        ({"q": "climate", "limit": "0"}, "INVALID_PARAMETERS"),
        ({"q": "climate", "filters": "not-json"}, "INVALID_FILTERS"),
        (
            {"q": "climate", "filters": '{"dateRange":{"start":"2024-02-01","end":"2024-01-01"}}'},
            "VALIDATION_ERROR",
        ),
    ],
)
def test_search_errors(client: TestClient, params: dict, code: str) -> None:
    _assert_error(client.get("/api/search", params=params), 400, code)


@pytest.mark.parametrize("method", ["post", "put", "delete", "patch"])
def test_search_rejects_other_methods(client: TestClient, method: str) -> None:
    error = _assert_error(
        client.request(method.upper(), "/api/search"), 405, "METHOD_NOT_ALLOWED"
    )

    assert error["message"] == f"{method.upper()} method not supported for search endpoint"


def test_request_ids_are_unique(client: TestClient) -> None:
    first = client.get("/api/search").json()["error"]["requestId"]
    second = client.get("/api/search").json()["error"]["requestId"]

    assert first != second


def test_unexpected_failure_is_internal_error(client: TestClient, monkeypatch) -> None:
    def _boom(params):
        raise RuntimeError("corpus exploded")

    monkeypatch.setattr(client.app.state.service, "search", _boom)

    error = _assert_error(client.get("/api/search", params={"q": "x"}), 500, "INTERNAL_ERROR")
    assert "exploded" not in error["message"]


def test_suggestions(client: TestClient) -> None:
    response = client.get("/api/search/suggestions", params={"q": "cli", "limit": 5})

    assert response.status_code == 200
    body = response.json()
    assert body["query"] == "cli"
    assert body["count"] == len(body["suggestions"]) == 5
    assert "climate change" in body["suggestions"]


def test_suggestions_short_query(client: TestClient) -> None:
    body = client.get("/api/search/suggestions", params={"q": "a"}).json()

    assert body == {"suggestions": [], "query": "a", "count": 0}


def test_suggestions_bad_limit(client: TestClient) -> None:
    _assert_error(
        client.get("/api/search/suggestions", params={"q": "cli", "limit": 50}),
        400,
        "INVALID_LIMIT",
    )


def test_suggestions_reject_other_methods(client: TestClient) -> None:
    _assert_error(client.post("/api/search/suggestions"), 405, "METHOD_NOT_ALLOWED")


def test_filter_options(client: TestClient) -> None:
    response = client.get("/api/filters/options")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["availableSourceTypes"] == ["wikipedia", "encyclopedia", "academic", "government"]
    assert "paper" in data["availableContentTypes"]
    assert data["availableTopics"] == sorted(data["availableTopics"])
    assert data["dateRange"]["min"].startswith("2017-06-12")
    assert data["dateRange"]["max"].startswith("2024-01-15")


def test_filter_options_failure(client: TestClient, monkeypatch) -> None:
    def _boom():
        raise RuntimeError("no options")

    monkeypatch.setattr(client.app.state.service, "filter_options", _boom)

    error = _assert_error(client.get("/api/filters/options"), 500, "INTERNAL_ERROR")
    assert error["message"] == "Failed to generate filter options"


def test_create_app_configures_logging(sample_corpus, monkeypatch) -> None:
    calls: list[object] = []
    monkeypatch.setattr(server_module, "configure_logging", lambda *args: calls.append(args))

    create_app(sample_corpus, SearchSettings())

    assert calls == [()]


def test_import_does_not_read_environment(sample_corpus, monkeypatch) -> None:
    monkeypatch.setenv(ENV_MAX_PAGE_SIZE, "lots")
    monkeypatch.delenv(ENV_CORPUS_PATH, raising=False)

    module = importlib.reload(server_module)

    assert module.create_app(sample_corpus, SearchSettings()).state.service
    with pytest.raises(ValueError):
        module.app

    monkeypatch.delenv(ENV_MAX_PAGE_SIZE)
    default_app = module.app
    assert isinstance(default_app, FastAPI)
    assert module.app is default_app
    assert len(default_app.state.service.corpus) == 16
