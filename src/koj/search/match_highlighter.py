"""
Match Highlighter - splits a line into the words before, inside and after a match.

Matches are always located in the Gurmukhi of the line. The position is
turned into a range of word indexes, and that range is applied to the
target string, which only has to line up with the Gurmukhi word for word
(a transliteration, or the Gurmukhi itself).
"""

import re
import unicodedata
from collections.abc import Callable
from typing import NamedTuple

from koj.search.query_parser import WILDCARD_MARKER, MatchMode, SearchQuery
from koj.utils.gurmukhi import first_letters, strip_accents, strip_vishraams


class MatchSpan(NamedTuple):
    """
    A target string split around its first match.

    Every non-empty part ends with a single space, so the parts can be
    rendered one after the other.
    """

    before: str
    match: str
    after: str


EMPTY_SPAN = MatchSpan("", "", "")

Highlighter = Callable[[list[str], str, str], MatchSpan]


def _join_words(words: list[str]) -> str:
    return f"{' '.join(words)} " if words else ""


def _split_words(words: list[str], start: int, end: int) -> MatchSpan:
    """Slice the target words by the word index range [start, end)."""
    return MatchSpan(
        _join_words(words[:start]),
        _join_words(words[start:end]),
        _join_words(words[end:]),
    )


def _no_match(words: list[str]) -> MatchSpan:
    return MatchSpan("", "", _join_words(words))


def full_word_matches(words: list[str], gurmukhi: str, value: str) -> MatchSpan:
    """
    Highlight the whole words containing the query in the line.

    Args:
        words: Target words, vishraams removed
        gurmukhi: The Gurmukhi of the line
        value: Query value in Unicode Gurmukhi

    Returns:
        The target split around the matched words
    """
    base_gurmukhi = unicodedata.normalize("NFC", strip_vishraams(gurmukhi))
    # Trailing spaces would stop a match on the last word
    needle = value.strip()

    found_position = base_gurmukhi.find(needle) if needle else -1
    if found_position == -1:
        return _no_match(words)

    # Backtrack to the beginning of the first word, then forward to the end of the last
    match_start = base_gurmukhi.rfind(" ", 0, found_position) + 1
    match_end = base_gurmukhi.find(" ", found_position + len(needle))
    if match_end == -1:
        match_end = len(base_gurmukhi)

    word_start = len(base_gurmukhi[:match_start].split())
    word_count = len(base_gurmukhi[match_start:match_end].split())

    return _split_words(words, word_start, word_start + word_count)


def _first_letter_pattern(value: str) -> str:
    letters = strip_accents(value)
    return "".join(
        "." if letter == WILDCARD_MARKER else re.escape(letter) for letter in letters
    )


def first_letter_matches(words: list[str], gurmukhi: str, value: str) -> MatchSpan:
    """
    Highlight the run of words whose first letters spell the query.

    Each word contributes exactly one letter to the searched projection,
    so a match's character range is also its word index range.

    Args:
        words: Target words, vishraams removed
        gurmukhi: The Gurmukhi of the line
        value: Query value in Unicode Gurmukhi, wildcards as markers

    Returns:
        The target split around the matched words
    """
    letters = first_letters(unicodedata.normalize("NFC", strip_vishraams(gurmukhi)))

    pattern = _first_letter_pattern(value)
    if not pattern:
        return _no_match(words)

    match = re.search(pattern, letters)
    if match is None:
        return _no_match(words)

    return _split_words(words, match.start(), match.end())


HIGHLIGHTERS: dict[MatchMode, Highlighter] = {
    MatchMode.FULL_WORD: full_word_matches,
    MatchMode.FIRST_LETTER: first_letter_matches,
}


def highlight(target: str | None, gurmukhi: str, query: SearchQuery) -> MatchSpan:
    """
    Split the target into the words before the first match, the match, and after it.

    A target that does not match is not an error: the whole of it is
    returned as the "after" part.

    Args:
        target: The text to highlight, word aligned with the Gurmukhi
        gurmukhi: The Gurmukhi of the line the target belongs to
        query: The query the line was found with

    Returns:
        A MatchSpan of (before, match, after)
    """
    if not target or not query.value:
        return EMPTY_SPAN

    # Vishraams stay out of the highlighted output
    words = strip_vishraams(target).split()

    return HIGHLIGHTERS[query.mode](words, gurmukhi, query.value)
