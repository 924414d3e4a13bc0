import json
from typing import Annotated, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from typer import Argument, Exit, Option, Typer, echo

from .config import SearchSettings, configure_logging, resolve_corpus_path
from .corpus import CorpusLoadError, load_corpus
from .dates import parse_iso_datetime
from .errors import SearchError
from .models import DateRange, FilterSet
from .schemas import FilterOptionsPayload, SearchResponse
from .search import (
    SearchEngine,
    SuggestionEngine,
    build_search_url,
    derive_filter_options,
    describe_filters,
    has_active_filters,
)

app = Typer(no_args_is_help=True)

console = Console()

SourceTypeOption = Annotated[
    Optional[list[str]],
    Option("--source-type", "-s", help="Restrict to a source type (repeatable)."),
]
ContentTypeOption = Annotated[
    Optional[list[str]],
    Option("--content-type", "-c", help="Restrict to a content type (repeatable)."),
]
TopicOption = Annotated[
    Optional[list[str]],
    Option("--topic", "-t", help="Keep documents whose topics contain this text (repeatable)."),
]
StartOption = Annotated[
    Optional[str], Option("--start", help="Earliest published date (ISO-8601).")
]
EndOption = Annotated[
    Optional[str], Option("--end", help="Latest published date (ISO-8601).")
]
MinAuthorityOption = Annotated[
    Optional[float], Option("--min-authority", help="Minimum source authority score.")
]
CorpusOption = Annotated[
    Optional[str], Option("--corpus", help="Path to a corpus JSON file.")
]


@app.callback()
def main(
    log_level: Annotated[
        Optional[str],
        Option("--log-level", help="Logging level (default: TRUSTED_SEARCH_LOG_LEVEL or INFO)."),
    ] = None,
) -> None:
    """Search a curated corpus of encyclopedia, academic and government sources."""
    configure_logging(log_level)


def _fail(message: str) -> None:
    console.print(f"[bold red]{message}[/]")
    raise Exit(code=1)


def _load(corpus_path: str | None):
    try:
        return load_corpus(resolve_corpus_path(corpus_path))
    except CorpusLoadError as exc:
        _fail(str(exc))


def _build_filters(
    source_types: list[str] | None,
    content_types: list[str] | None,
    topics: list[str] | None,
    start: str | None,
    end: str | None,
    min_authority: float | None,
) -> FilterSet:
    date_range: DateRange | None = None
    if start or end:
        if not (start and end):
            _fail("Both --start and --end are required for a date filter.")
        try:
            date_range = DateRange(start=parse_iso_datetime(start), end=parse_iso_datetime(end))
        except ValueError as exc:
            _fail(f"Invalid date: {exc}")

    return FilterSet(
        source_types=tuple(source_types) if source_types else None,
        content_types=tuple(content_types) if content_types else None,
        topics=tuple(topics) if topics else None,
        date_range=date_range,
        min_authority_score=min_authority,
    )


@app.command()
def search(
    query: Annotated[str, Argument(help="Free-text query.")],
    page: Annotated[int, Option("--page", "-p", help="1-based page number.")] = 1,
    limit: Annotated[int, Option("--limit", "-l", help="Results per page.")] = 10,
    source_type: SourceTypeOption = None,
    content_type: ContentTypeOption = None,
    topic: TopicOption = None,
    start: StartOption = None,
    end: EndOption = None,
    min_authority: MinAuthorityOption = None,
    as_json: Annotated[bool, Option("--json", help="Print the raw JSON response.")] = False,
    corpus: CorpusOption = None,
) -> None:
    """Search the corpus and print one page of results."""
    filters = _build_filters(source_type, content_type, topic, start, end, min_authority)
    engine = SearchEngine(_load(corpus), SearchSettings.from_env())

    try:
        result = engine.search(query, filters=filters, page=page, limit=limit)
    except SearchError as exc:
        _fail(f"{exc.code}: {exc.message}")

    if as_json:
        payload = SearchResponse.from_result_page(result).model_dump(by_alias=True, mode="json")
        echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    header = f"{result.total_count} results for `{result.query}`"
    if has_active_filters(result.filters):
        header += f" ({describe_filters(result.filters)})"
    console.print(Markdown(header))

    for rank, document in enumerate(result.results, start=(page - 1) * limit + 1):
        content = (
            f"{document.snippet}\n\n"
            f"**{document.source.name}** ({document.source.trust_level}, "
            f"authority {document.source.authority_score:.1f}) | {document.content_type} | "
            f"relevance {document.relevance_score:.2f}\n\n{document.url}"
        )
        console.print(
            Panel(
                Markdown(content),
                title_align="left",
                title=f"{rank}. {document.title}",
                border_style="bold green",
            )
        )

    console.print(
        f"Page {result.current_page} of {result.total_pages} "
        f"[dim]({result.search_time:.2f}ms)[/]"
    )


@app.command()
def suggest(
    partial: Annotated[str, Argument(help="Partial query.")],
    limit: Annotated[int, Option("--limit", "-l", help="Maximum suggestions.")] = 5,
    corpus: CorpusOption = None,
) -> None:
    """Print autocomplete suggestions for a partial query."""
    settings = SearchSettings.from_env()
    if not 1 <= limit <= settings.max_suggestion_limit:
        _fail(f"Limit must be between 1 and {settings.max_suggestion_limit}")
    engine = SuggestionEngine(_load(corpus).suggestions, max_limit=settings.max_suggestion_limit)
    for suggestion in engine.suggest(partial, limit):
        console.print(suggestion)


@app.command()
def options(corpus: CorpusOption = None) -> None:
    """Print the available filter values."""
    payload = FilterOptionsPayload.from_options(derive_filter_options(_load(corpus)))
    table = Table(title="Filter options")
    table.add_column("Filter", style="bold cyan")
    table.add_column("Values")
    table.add_row("Source types", ", ".join(payload.available_source_types))
    table.add_row("Content types", ", ".join(payload.available_content_types))
    table.add_row("Topics", ", ".join(payload.available_topics))
    table.add_row(
        "Published",
        f"{payload.date_range.min.date().isoformat()} - {payload.date_range.max.date().isoformat()}",
    )
    console.print(table)


@app.command()
def url(
    query: Annotated[str, Argument(help="Free-text query.")],
    page: Annotated[Optional[int], Option("--page", "-p")] = None,
    limit: Annotated[Optional[int], Option("--limit", "-l")] = None,
    source_type: SourceTypeOption = None,
    content_type: ContentTypeOption = None,
    topic: TopicOption = None,
    start: StartOption = None,
    end: EndOption = None,
    min_authority: MinAuthorityOption = None,
) -> None:
    """Print a shareable search URL for the given query and filters."""
    filters = _build_filters(source_type, content_type, topic, start, end, min_authority)
    console.print(build_search_url(query, filters, page=page, limit=limit), soft_wrap=True)


@app.command()
def serve(
    host: Annotated[str, Option("--host")] = "127.0.0.1",
    port: Annotated[int, Option("--port")] = 8000,
) -> None:
    """Run the HTTP API."""
    from .server import run_server

    run_server(host=host, port=port)
