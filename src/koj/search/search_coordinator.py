"""
Search Coordinator - turns search box input into lookups and results.

Every input change is parsed into a query. Queries long enough to search
are dispatched to a background lookup; shorter ones clear the results.
Only the response for the most recently dispatched query is applied, so
results never go back to an older query when lookups finish out of order.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal, pyqtSlot

from koj.config import Settings, settings
from koj.models.line import LineRecord
from koj.search.lookup_worker import LookupWorker
from koj.search.query_parser import MatchMode, SearchQuery, parse_query


@dataclass(frozen=True)
class SearchOptions:
    """What a lookup includes with each line."""

    include_translations: bool = True
    include_transliterations: bool = True
    include_citations: bool = True

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "SearchOptions":
        """Build the options from the configured result languages."""
        if config is None:
            config = settings
        return cls(
            include_translations=config.RESULT_TRANSLATION_LANGUAGE is not None,
            include_transliterations=config.RESULT_TRANSLITERATION_LANGUAGE
            is not None,
            include_citations=config.SHOW_RESULT_CITATIONS,
        )


class LineLookup(Protocol):
    """Anything that can find the lines matching a query value."""

    def lookup(
        self, value: str, mode: MatchMode, options: SearchOptions
    ) -> Sequence[LineRecord]: ...


class SearchCoordinator(QObject):
    """
    Owns the search session: the current query, the last dispatch and the results.

    Lookups run on the global thread pool unless another submit function
    is given. Their responses come back through handle_response, which
    must run on the thread owning the coordinator.
    """

    # Emitted with the new results whenever they change
    results_changed: pyqtSignal = pyqtSignal(object)
    # Emitted with an error message when the current query's lookup fails
    lookup_failed: pyqtSignal = pyqtSignal(str)

    def __init__(
        self,
        lookup: LineLookup,
        options: SearchOptions | None = None,
        submit: Callable[[QRunnable], None] | None = None,
        min_chars: int | None = None,
        parent: QObject | None = None,
    ):
        """
        Initialize the search coordinator.

        Args:
            lookup: Where lines are looked up
            options: What to include with each line, defaults to the settings
            submit: Runs a lookup worker, defaults to the global thread pool
            min_chars: Shortest value that is searched, defaults to the settings
            parent: Parent object
        """
        super().__init__(parent)
        self.logger: logging.Logger = logging.getLogger("SearchCoordinator")
        self._lookup: LineLookup = lookup
        self._options: SearchOptions = options or SearchOptions.from_settings()
        self._submit: Callable[[QRunnable], None] = (
            submit or QThreadPool.globalInstance().start  # pyright: ignore[reportOptionalMemberAccess]
        )
        self._min_chars: int = (
            min_chars if min_chars is not None else settings.MIN_SEARCH_CHARS
        )

        self._current_query: SearchQuery = parse_query("")
        self._last_dispatched: SearchQuery | None = None
        self._dispatch_id: int = 0
        self._results: list[LineRecord] = []
        self._searched_query: SearchQuery | None = None

    @property
    def current_query(self) -> SearchQuery:
        """The query parsed from the latest input."""
        return self._current_query

    @property
    def last_dispatched_value(self) -> str | None:
        """The value of the most recent dispatch, None once cleared."""
        if self._last_dispatched is None:
            return None
        return self._last_dispatched.value

    @property
    def results(self) -> list[LineRecord]:
        """The lines found for searched_query."""
        return list(self._results)

    @property
    def searched_query(self) -> SearchQuery | None:
        """The query that produced the current results."""
        return self._searched_query

    @property
    def options(self) -> SearchOptions:
        return self._options

    def on_input_changed(self, raw: str) -> SearchQuery:
        """
        Handle new search box input.

        Args:
            raw: Input as typed

        Returns:
            The parsed query
        """
        query = parse_query(raw)
        self._current_query = query

        if not query.is_dispatchable(self._min_chars):
            # Anything still in flight is for an older input
            self._last_dispatched = None
            self._clear_results()
            return query

        self._dispatch(query)
        return query

    def clear(self) -> None:
        """Clear the input and the results."""
        _ = self.on_input_changed("")

    def set_options(self, options: SearchOptions) -> None:
        """
        Replace the result options and search the current query again.

        Args:
            options: What to include with each line
        """
        if options == self._options:
            return
        self._options = options
        if self._current_query.is_dispatchable(self._min_chars):
            self._dispatch(self._current_query)

    def _dispatch(self, query: SearchQuery) -> None:
        # Recorded before submitting so an immediate response is not stale
        self._dispatch_id += 1
        self._last_dispatched = query
        self.logger.debug(
            "Dispatching %s (%s) as #%d",
            query.value,
            query.mode.value,
            self._dispatch_id,
        )

        worker = LookupWorker(self._lookup, query, self._options, self._dispatch_id)
        _ = worker.signals.finished.connect(self.handle_response)
        _ = worker.signals.failed.connect(self.handle_failure)
        self._submit(worker)

    def _is_current(self, query: SearchQuery, dispatch_id: int | None) -> bool:
        """
        Check a response against the most recent dispatch.

        Re-searching with new options dispatches an equal query, so only the
        dispatch id tells the two lookups apart.
        """
        last = self._last_dispatched
        if last is None or query.value != last.value or query.mode != last.mode:
            return False
        return dispatch_id is None or dispatch_id == self._dispatch_id

    @pyqtSlot(object, object, int)
    def handle_response(
        self,
        query: SearchQuery,
        records: list[LineRecord],
        dispatch_id: int | None = None,
    ) -> bool:
        """
        Apply a lookup response if it is for the most recent dispatch.

        Args:
            query: The query the lookup was run for
            records: Lines found
            dispatch_id: The dispatch the lookup was run for, if known

        Returns:
            True if the results were replaced, False if the response was stale
        """
        if not self._is_current(query, dispatch_id):
            self.logger.debug("Discarding stale results for %s", query.value)
            return False

        self._results = list(records)
        self._searched_query = query
        self.logger.debug("%d results for %s", len(self._results), query.value)
        self.results_changed.emit(self.results)
        return True

    @pyqtSlot(object, str, int)
    def handle_failure(
        self, query: SearchQuery, message: str, dispatch_id: int | None = None
    ) -> None:
        """
        Report a failed lookup. The current results are kept.

        Args:
            query: The query the lookup was run for
            message: What went wrong
            dispatch_id: The dispatch the lookup was run for, if known
        """
        self.logger.warning("Lookup failed for %s: %s", query.value, message)
        if self._is_current(query, dispatch_id):
            self.lookup_failed.emit(message)

    def _clear_results(self) -> None:
        self._results = []
        self._searched_query = None
        self.results_changed.emit([])
