"""
FastAPI server for Trusted Search.

Exposes the search, suggestion and filter-options endpoints over an
in-memory corpus loaded once at startup.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from .config import SearchSettings, configure_logging, resolve_corpus_path
from .corpus import Corpus, load_corpus
from .errors import INTERNAL_ERROR, METHOD_NOT_ALLOWED, error_envelope
from .schemas import FilterOptionsPayload, FilterOptionsResponse, SearchResponse, SuggestionsResponse
from .service import SearchService, ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()

_UNSUPPORTED_METHODS = ["POST", "PUT", "DELETE", "PATCH"]


def _service(request: Request) -> SearchService:
    return request.app.state.service


def _error_response(code: str, message: str, status_code: int) -> JSONResponse:
    return JSONResponse(error_envelope(code, message), status_code=status_code)


async def _simulate_latency(request: Request) -> None:
    latency_ms = _service(request).settings.simulated_latency_ms
    if latency_ms > 0:
        await asyncio.sleep(latency_ms / 1000)


@router.get("/health")
async def health_check():
    return {"status": "ok"}


@router.get("/api/search")
async def search(request: Request):
    """Search the corpus and return one page of ranked results."""
    try:
        await _simulate_latency(request)
        outcome = _service(request).search(request.query_params)
        if isinstance(outcome, ServiceError):
            return _error_response(outcome.code, outcome.message, outcome.status_code)
        return SearchResponse.from_result_page(outcome).model_dump(by_alias=True, mode="json")
    except Exception:
        logger.exception("Search API error")
        return _error_response(INTERNAL_ERROR, "An internal server error occurred", 500)


@router.api_route("/api/search", methods=_UNSUPPORTED_METHODS)
async def search_method_not_allowed(request: Request):
    return _error_response(
        METHOD_NOT_ALLOWED,
        f"{request.method} method not supported for search endpoint",
        405,
    )


@router.get("/api/search/suggestions")
async def suggestions(request: Request):
    """Return autocomplete suggestions for a partial query."""
    try:
        outcome = _service(request).suggest(request.query_params)
        if isinstance(outcome, ServiceError):
            return _error_response(outcome.code, outcome.message, outcome.status_code)
        return SuggestionsResponse.from_result(outcome).model_dump(by_alias=True, mode="json")
    except Exception:
        logger.exception("Suggestions API error")
        return _error_response(INTERNAL_ERROR, "An internal server error occurred", 500)


@router.api_route("/api/search/suggestions", methods=_UNSUPPORTED_METHODS)
async def suggestions_method_not_allowed(request: Request):
    return _error_response(
        METHOD_NOT_ALLOWED,
        f"{request.method} method not supported for suggestions endpoint",
        405,
    )


@router.get("/api/filters/options")
async def filter_options(request: Request):
    """Return the selectable filter values for the loaded corpus."""
    try:
        options = _service(request).filter_options()
        response = FilterOptionsResponse(data=FilterOptionsPayload.from_options(options))
        return response.model_dump(by_alias=True, mode="json")
    except Exception:
        logger.exception("Filter options API error")
        return _error_response(INTERNAL_ERROR, "Failed to generate filter options", 500)


def create_app(
    corpus: Corpus | None = None,
    settings: SearchSettings | None = None,
) -> FastAPI:
    """Build the application around an explicit corpus and settings."""
    configure_logging()
    resolved_corpus = corpus if corpus is not None else load_corpus(resolve_corpus_path())
    resolved_settings = settings or SearchSettings.from_env()

    app = FastAPI(
        title="Trusted Search",
        description="Search over curated encyclopedia, academic and government sources",
    )
    app.state.service = SearchService(resolved_corpus, resolved_settings)
    app.include_router(router)
    logger.info("Serving %d documents", len(resolved_corpus))
    return app


_default_app: FastAPI | None = None


def __getattr__(name: str):
    # `app` is built on first access; importing this module reads no configuration.
    global _default_app
    if name == "app":
        if _default_app is None:
            _default_app = create_app()
        return _default_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def run_server(host: str = "127.0.0.1", port: int = 8000):
    """Run the FastAPI server."""
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    run_server()
