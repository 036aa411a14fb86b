"""Tests for the SQLite line store"""

import tempfile
from pathlib import Path

from koj.config import settings
from koj.models.line import LineRecord, SectionMeta
from koj.search.line_store import LineStore
from koj.search.query_parser import WILDCARD_MARKER, MatchMode
from koj.search.search_coordinator import SearchOptions

JAP_JI = SectionMeta(name="Jap Ji Sahib", writer_name="Guru Nanak Dev Ji")
ALL_OPTIONS = SearchOptions()


def _create_test_record(
    line_id: str = "2",
    gurmukhi: str = "ਆਦਿ ਸਚੁ; ਜੁਗਾਦਿ ਸਚੁ ॥",
    transliteration: str = "aadh sach jugaadh sach ||",
    translation: str = "True In The Primal Beginning. True Throughout The Ages.",
) -> LineRecord:
    """Helper to create a test line."""
    return LineRecord(
        id=line_id,
        shabad_id="1",
        source_id=1,
        source_page=1,
        gurmukhi=gurmukhi,
        transliterations={1: transliteration},
        translations={1: translation},
        section=JAP_JI,
    )


def _create_test_store() -> LineStore:
    """Helper to create an in-memory store with a few lines."""
    store = LineStore(":memory:")
    store.open()
    store.add_line(
        _create_test_record(
            "1",
            "ੴ ਸਤਿ ਨਾਮੁ; ਕਰਤਾ ਪੁਰਖੁ ॥",
            "ikoa(n)kaar sat naam karataa purakh ||",
            "One Universal Creator God.",
        )
    )
    store.add_line(_create_test_record())
    store.add_line(
        _create_test_record(
            "3",
            "ਹੈ ਭੀ ਸਚੁ; ਨਾਨਕ; ਹੋਸੀ ਭੀ ਸਚੁ ॥੧॥",
            "hai bhee sach naanak hosee bhee sach ||1||",
            "True Here And Now.",
        )
    )
    return store


class TestLineStore:
    """Tests for the LineStore class"""

    def test_open_and_close(self):
        """Test opening and closing a store on disk"""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = LineStore(Path(tmpdir) / "data" / "lines.sqlite")

            store.open()
            assert store.is_open
            assert (Path(tmpdir) / "data" / "lines.sqlite").exists()

            store.close()
            assert not store.is_open

    def test_add_line(self):
        store = _create_test_store()

        stats = store.get_stats()
        assert stats == {
            "shabads": 1,
            "lines": 3,
            "transliterations": 3,
            "translations": 3,
        }

        store.close()

    def test_add_line_replaces_existing(self):
        store = _create_test_store()

        store.add_line(_create_test_record(translation="Updated"))

        results = store.full_word_search("ਜੁਗਾਦਿ", ALL_OPTIONS)
        assert len(results) == 1
        assert results[0].translations == {1: "Updated"}
        assert store.get_stats()["lines"] == 3

        store.close()

    def test_add_shabad(self):
        store = LineStore(":memory:")
        store.open()

        store.add_shabad("7", 2, SectionMeta(name="Akal Ustat", page_name="Page"))
        store.add_line(
            LineRecord(
                id="70", shabad_id="7", source_id=2, source_page=11, gurmukhi="ਅਕਾਲ ਪੁਰਖ"
            )
        )

        results = store.first_letter_search("ਅਪ", ALL_OPTIONS)
        assert results[0].source_id == 2
        assert results[0].section == SectionMeta(
            name="Akal Ustat", writer_name=None, page_name="Page"
        )

        store.close()

    def test_stats_when_closed(self):
        store = LineStore(":memory:")
        assert store.get_stats()["lines"] == 0


class TestSearch:
    """Tests for looking up lines"""

    def test_first_letter_search(self):
        store = _create_test_store()

        results = store.first_letter_search("ਸਜ", ALL_OPTIONS)

        assert [record.id for record in results] == ["2"]
        assert results[0].gurmukhi == "ਆਦਿ ਸਚੁ; ਜੁਗਾਦਿ ਸਚੁ ॥"
        store.close()

    def test_first_letter_search_ignores_accents(self):
        store = _create_test_store()

        assert [record.id for record in store.first_letter_search("ਆਸ", ALL_OPTIONS)] == [
            "2"
        ]
        store.close()

    def test_first_letter_wildcard(self):
        store = _create_test_store()

        results = store.first_letter_search(f"ਭ{WILDCARD_MARKER}ਨ", ALL_OPTIONS)

        assert [record.id for record in results] == ["3"]
        store.close()

    def test_results_in_insertion_order(self):
        store = _create_test_store()

        results = store.first_letter_search("ਸ", ALL_OPTIONS)

        assert [record.id for record in results] == ["1", "2", "3"]
        store.close()

    def test_results_are_limited(self):
        store = LineStore(":memory:")
        store.open()
        for index in range(settings.MAX_RESULTS + 5):
            store.add_line(_create_test_record(line_id=str(index)))

        results = store.first_letter_search("ਸਜ", ALL_OPTIONS)

        assert len(results) == settings.MAX_RESULTS
        store.close()

    def test_full_word_search(self):
        store = _create_test_store()

        results = store.full_word_search("ਸਚੁ ਜੁਗਾ", ALL_OPTIONS)

        assert [record.id for record in results] == ["2"]
        store.close()

    def test_full_word_search_ignores_vishraams(self):
        store = _create_test_store()

        results = store.full_word_search("ਸਚੁ ਨਾਨਕ ਹੋਸੀ", ALL_OPTIONS)

        assert [record.id for record in results] == ["3"]
        store.close()

    def test_full_word_search_is_literal(self):
        store = _create_test_store()

        assert store.full_word_search(f"ਸ{WILDCARD_MARKER}ਚ", ALL_OPTIONS) == []
        assert store.full_word_search("%", ALL_OPTIONS) == []
        assert store.full_word_search("   ", ALL_OPTIONS) == []
        store.close()

    def test_lookup_dispatches_by_mode(self):
        store = _create_test_store()

        first_letter = store.lookup("ਸਨ", MatchMode.FIRST_LETTER, ALL_OPTIONS)
        full_word = store.lookup("ਸਨ", MatchMode.FULL_WORD, ALL_OPTIONS)

        assert [record.id for record in first_letter] == ["1", "3"]
        assert full_word == []
        store.close()

    def test_options_limit_what_is_loaded(self):
        store = _create_test_store()
        options = SearchOptions(
            include_translations=False,
            include_transliterations=True,
            include_citations=False,
        )

        record = store.first_letter_search("ਸਜ", options)[0]

        assert record.translations == {}
        assert record.transliterations == {1: "aadh sach jugaadh sach ||"}
        assert record.section is None
        store.close()

    def test_citation_is_loaded(self):
        store = _create_test_store()

        record = store.first_letter_search("ਸਜ", ALL_OPTIONS)[0]

        assert record.section == JAP_JI
        assert record.source_page == 1
        store.close()
