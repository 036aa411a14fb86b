"""
The main file that runs a Koj search from the command line
"""

import logging
import os
import sys

from PyQt6.QtCore import QCoreApplication

from koj.config import settings
from koj.logger import configure_logging
from koj.models.line import LineRecord
from koj.search.line_store import LineStore
from koj.search.match_highlighter import MatchSpan
from koj.search.search_coordinator import SearchCoordinator
from koj.search.search_result import SearchResult


def format_span(span: MatchSpan) -> str:
    """Render a span with the matched words in brackets"""
    match = f"[{span.match.rstrip()}] " if span.match else ""
    return f"{span.before}{match}{span.after}".rstrip()


def print_results(coordinator: SearchCoordinator, records: list[LineRecord]):
    query = coordinator.searched_query
    if query is None:
        return

    if not records:
        print("No results found")

    for record in records:
        result = SearchResult.from_record(
            record,
            query,
            transliteration_language=settings.RESULT_TRANSLITERATION_LANGUAGE,
            translation_language=settings.RESULT_TRANSLATION_LANGUAGE,
            show_citation=settings.SHOW_RESULT_CITATIONS,
            source_abbreviations=settings.SOURCE_ABBREVIATIONS,
        )
        print(format_span(result.gurmukhi))
        if result.transliteration:
            print(f"    {format_span(result.transliteration)}")
        if result.translation:
            print(f"    {result.translation}")
        if result.citation:
            print(f"    {result.citation}")


def main(argv: list[str]) -> int:
    os.makedirs(settings.DATA_DIR_PATH, exist_ok=True)
    configure_logging()
    logging.debug("Starting the search...")

    app = QCoreApplication(argv)

    store = LineStore(settings.DATABASE_PATH)
    store.open()
    try:
        coordinator = SearchCoordinator(store)
        exit_code = 0

        def on_results(records: list[LineRecord]):
            print_results(coordinator, records)
            app.quit()

        def on_failure(message: str):
            nonlocal exit_code
            print(f"Search failed: {message}", file=sys.stderr)
            exit_code = 1
            app.quit()

        query = coordinator.on_input_changed(" ".join(argv[1:]))
        if coordinator.last_dispatched_value is None:
            print(f"Type at least {settings.MIN_SEARCH_CHARS} letters to search")
            return 0

        _ = coordinator.results_changed.connect(on_results)
        _ = coordinator.lookup_failed.connect(on_failure)
        logging.debug("Searching %s (%s)", query.value, query.mode.value)
        _ = app.exec()
        return exit_code
    finally:
        store.close()


if __name__ == "__main__":
    sys.exit(main(sys.argv))
