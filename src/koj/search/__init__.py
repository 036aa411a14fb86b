"""
Search module for the Koj application.

Parses phonetic queries, looks up Gurbani lines in a SQLite store and
highlights the matched words.
"""

from koj.search.line_store import LineStore
from koj.search.lookup_worker import LookupSignals, LookupWorker
from koj.search.match_highlighter import EMPTY_SPAN, MatchSpan, highlight
from koj.search.query_parser import WILDCARD_MARKER, MatchMode, SearchQuery, parse_query
from koj.search.search_coordinator import LineLookup, SearchCoordinator, SearchOptions
from koj.search.search_result import SearchResult, format_citation

__all__ = [
    "EMPTY_SPAN",
    "LineLookup",
    "LineStore",
    "LookupSignals",
    "LookupWorker",
    "MatchMode",
    "MatchSpan",
    "SearchCoordinator",
    "SearchOptions",
    "SearchQuery",
    "SearchResult",
    "WILDCARD_MARKER",
    "format_citation",
    "highlight",
    "parse_query",
]
