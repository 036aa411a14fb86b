"""
Query Parser - turns search box input into a search query.

The first character may be an anchor selecting the search mode. The rest
of the input is phonetic ASCII, converted to Unicode Gurmukhi.
"""

from dataclasses import dataclass, field
from enum import Enum

from koj.config import settings
from koj.utils.gurmukhi import to_unicode

# Stands in for "any single letter" in first letter queries
WILDCARD_MARKER: str = "_"


class MatchMode(Enum):
    """How a query is matched against a line."""

    FIRST_LETTER = "first-letter"
    FULL_WORD = "full-word"


@dataclass(frozen=True)
class SearchQuery:
    """
    A parsed search box input.

    The minimum search length is measured on what was typed after the
    anchor, since one keystroke can become two code points (ਸ਼) and two
    keystrokes can become one (ਇ). Queries built directly, without a typed
    form, are measured on their value.
    """

    anchor: str | None
    mode: MatchMode
    value: str
    typed: str | None = field(default=None, compare=False)

    def is_dispatchable(self, min_chars: int | None = None) -> bool:
        """Whether the query is long enough to be sent to a lookup."""
        if min_chars is None:
            min_chars = settings.MIN_SEARCH_CHARS
        length = len(self.typed) if self.typed is not None else len(self.value)
        return length >= min_chars

    @property
    def text(self) -> str:
        """The value prefixed with its anchor, as it would be typed back."""
        return f"{self.anchor or ''}{self.value}"


def parse_query(
    raw: str,
    anchors: dict[str, str] | None = None,
    wildcard: str | None = None,
) -> SearchQuery:
    """
    Parse search box input into a SearchQuery.

    Any input, including an empty string, gives a valid query. Only the
    first character is considered as an anchor, so repeated anchors are
    kept as part of the value.

    Args:
        raw: Input as typed
        anchors: Map of anchor character to mode, defaults to the settings
        wildcard: Keystroke meaning "any letter" in first letter mode

    Returns:
        The parsed query
    """
    if anchors is None:
        anchors = settings.SEARCH_ANCHORS
    if wildcard is None:
        wildcard = settings.SEARCH_WILDCARD_CHAR

    anchor: str | None = None
    mode = MatchMode.FIRST_LETTER
    remainder = raw

    if raw and raw[0] in anchors:
        anchor = raw[0]
        mode = MatchMode(anchors[anchor])
        remainder = raw[1:]

    value = to_unicode(remainder)

    if mode == MatchMode.FIRST_LETTER and wildcard:
        value = value.replace(wildcard, WILDCARD_MARKER)

    return SearchQuery(anchor=anchor, mode=mode, value=value, typed=remainder)
