"""
Search Result - a found line prepared for display.

The Gurmukhi and the transliteration are split around the match so the
matched words can be highlighted. The translation is shown as is.
"""

from dataclasses import dataclass

from koj.config import settings
from koj.models.line import LineRecord
from koj.search.match_highlighter import MatchSpan, highlight
from koj.search.query_parser import SearchQuery


def format_citation(
    record: LineRecord, source_abbreviations: dict[int, str] | None = None
) -> str | None:
    """
    Format where the line comes from, e.g. (Guru Nanak Dev Ji. "Jap Ji Sahib", SGGS, Ang 1).

    Args:
        record: The line, with its section loaded
        source_abbreviations: Short names of the sources, defaults to the settings

    Returns:
        The citation, or None if the line has no section
    """
    if record.section is None:
        return None
    if source_abbreviations is None:
        source_abbreviations = settings.SOURCE_ABBREVIATIONS

    section = record.section
    writer = f"{section.writer_name}. " if section.writer_name else ""
    source = source_abbreviations.get(record.source_id, str(record.source_id))
    parts = [f'"{section.name}"', source, f"{section.page_name} {record.source_page}"]
    return f"({writer}{', '.join(parts)})"


@dataclass
class SearchResult:
    """Represents a single search result for display."""

    line_id: str
    shabad_id: str
    gurmukhi: MatchSpan
    transliteration: MatchSpan | None
    translation: str | None
    citation: str | None

    @staticmethod
    def from_record(
        record: LineRecord,
        query: SearchQuery,
        transliteration_language: int | None = None,
        translation_language: int | None = None,
        show_citation: bool = True,
        source_abbreviations: dict[int, str] | None = None,
    ) -> "SearchResult":
        """
        Create a SearchResult from a looked up line.

        Args:
            record: The line found
            query: The query that found it
            transliteration_language: Language of the transliteration to show
            translation_language: Language of the translation to show
            show_citation: Whether to include where the line comes from
            source_abbreviations: Short names of the sources

        Returns:
            The result, highlighted for the query
        """
        transliteration = record.transliteration(transliteration_language)

        return SearchResult(
            line_id=record.id,
            shabad_id=record.shabad_id,
            gurmukhi=highlight(record.gurmukhi, record.gurmukhi, query),
            transliteration=(
                highlight(transliteration, record.gurmukhi, query)
                if transliteration
                else None
            ),
            translation=record.translation(translation_language),
            citation=(
                format_citation(record, source_abbreviations) if show_citation else None
            ),
        )
