"""Tests for preparing search results for display"""

from koj.models.line import LineRecord, SectionMeta
from koj.search.match_highlighter import MatchSpan
from koj.search.query_parser import parse_query
from koj.search.search_result import SearchResult, format_citation

SOURCES = {1: "SGGS", 2: "DG"}


def _create_test_record(section: SectionMeta | None = None) -> LineRecord:
    return LineRecord(
        id="5",
        shabad_id="2",
        source_id=1,
        source_page=8,
        gurmukhi="ਸੋ ਦਰੁ ਕੇਹਾ; ਸੋ ਘਰੁ ਕੇਹਾ; ਜਿਤੁ ਬਹਿ; ਸਰਬ ਸਮਾਲੇ ॥",
        transliterations={1: "so dhar kehaa so ghar kehaa jit beh sarab samaale ||"},
        translations={1: "Where is That Gate, and Where is That Dwelling?"},
        section=section,
    )


class TestFormatCitation:
    """Tests for format_citation"""

    def test_with_writer(self):
        record = _create_test_record(
            SectionMeta(name="Jap Ji Sahib", writer_name="Guru Nanak Dev Ji")
        )
        assert (
            format_citation(record, SOURCES)
            == '(Guru Nanak Dev Ji. "Jap Ji Sahib", SGGS, Ang 8)'
        )

    def test_without_writer(self):
        record = _create_test_record(SectionMeta(name="Jap Ji Sahib"))
        assert format_citation(record, SOURCES) == '("Jap Ji Sahib", SGGS, Ang 8)'

    def test_unknown_source(self):
        record = _create_test_record(SectionMeta(name="Jap Ji Sahib"))
        assert format_citation(record, {}) == '("Jap Ji Sahib", 1, Ang 8)'

    def test_without_section(self):
        assert format_citation(_create_test_record(), SOURCES) is None


class TestSearchResult:
    """Tests for SearchResult.from_record"""

    def test_from_record(self):
        record = _create_test_record(SectionMeta(name="Jap Ji Sahib"))
        result = SearchResult.from_record(
            record,
            parse_query("sGk"),
            transliteration_language=1,
            translation_language=1,
            source_abbreviations=SOURCES,
        )

        assert result.line_id == "5"
        assert result.shabad_id == "2"
        assert result.gurmukhi == MatchSpan(
            "ਸੋ ਦਰੁ ਕੇਹਾ ", "ਸੋ ਘਰੁ ਕੇਹਾ ", "ਜਿਤੁ ਬਹਿ ਸਰਬ ਸਮਾਲੇ ॥ "
        )
        assert result.transliteration == MatchSpan(
            "so dhar kehaa ", "so ghar kehaa ", "jit beh sarab samaale || "
        )
        assert result.translation == "Where is That Gate, and Where is That Dwelling?"
        assert result.citation == '("Jap Ji Sahib", SGGS, Ang 8)'

    def test_missing_languages(self):
        result = SearchResult.from_record(
            _create_test_record(),
            parse_query("#ਘਰੁ"),
            transliteration_language=None,
            translation_language=3,
        )

        assert result.transliteration is None
        assert result.translation is None
        assert result.gurmukhi.match == "ਘਰੁ "

    def test_citation_hidden(self):
        result = SearchResult.from_record(
            _create_test_record(SectionMeta(name="Jap Ji Sahib")),
            parse_query("sGk"),
            show_citation=False,
        )
        assert result.citation is None
