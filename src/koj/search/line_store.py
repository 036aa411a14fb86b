"""
SQLite line store for the Koj search.

Stores Gurbani lines with their transliterations and translations, and
answers first letter and full word lookups. Each line keeps a precomputed
first letter projection and a vishraam free copy of its Gurmukhi so that
both searches are a single LIKE query.
"""

import logging
import sqlite3
import threading
import unicodedata
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from koj.config import settings
from koj.models.line import LineRecord, SectionMeta
from koj.search.query_parser import WILDCARD_MARKER, MatchMode
from koj.utils.gurmukhi import first_letters, strip_accents, strip_vishraams

if TYPE_CHECKING:
    from koj.search.search_coordinator import SearchOptions

LIKE_ESCAPE: str = "\\"


def _escape_like(text: str) -> str:
    """Escape LIKE wildcards so the text only matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class LineStore:
    """
    SQLite store of lines, implementing the line lookup used by the search.

    The connection is shared with the lookup worker threads, so every
    statement runs under a lock.
    """

    def __init__(self, db_path: Path | str | None = None):
        """
        Initialize the line store.

        Args:
            db_path: Database file, or ":memory:". Defaults to the settings.
        """
        self.logger = logging.getLogger("LineStore")
        self._db_path: Path | str = (
            db_path if db_path is not None else settings.DATABASE_PATH
        )
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        """Check if the store has an open connection."""
        return self._conn is not None

    def open(self) -> None:
        """Open the database, creating the schema if it is missing."""
        if self._conn is not None:
            return

        if isinstance(self._db_path, Path):
            self._db_path.parent.mkdir(parents=True, exist_ok=True)

        self._conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._create_schema()
        self.logger.info("Opened line store at %s", self._db_path)

    def close(self) -> None:
        """Close the database."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def _create_schema(self) -> None:
        """Create the tables and indices."""
        if self._conn is None:
            return

        cursor = self._conn.cursor()

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS shabads (
                id TEXT PRIMARY KEY,
                source_id INTEGER NOT NULL,
                section_name TEXT,
                writer_name TEXT,
                page_name TEXT
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS lines (
                order_id INTEGER PRIMARY KEY AUTOINCREMENT,
                id TEXT NOT NULL UNIQUE,
                shabad_id TEXT NOT NULL,
                source_page INTEGER NOT NULL,
                gurmukhi TEXT NOT NULL,
                first_letters TEXT NOT NULL,
                plain TEXT NOT NULL
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS transliterations (
                line_id TEXT NOT NULL,
                language_id INTEGER NOT NULL,
                text TEXT NOT NULL,
                PRIMARY KEY (line_id, language_id)
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS translations (
                line_id TEXT NOT NULL,
                language_id INTEGER NOT NULL,
                text TEXT NOT NULL,
                PRIMARY KEY (line_id, language_id)
            )
        """)

        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_lines_shabad_id ON lines(shabad_id)
        """)

        self._conn.commit()

    def add_shabad(
        self, shabad_id: str, source_id: int, section: SectionMeta | None = None
    ) -> None:
        """
        Add or replace a Shabad.

        Args:
            shabad_id: ID of the Shabad
            source_id: ID of the source the Shabad is from
            section: Citation metadata for the Shabad
        """
        if self._conn is None:
            self.open()

        with self._lock:
            cursor = self._conn.cursor()  # pyright: ignore[reportOptionalMemberAccess]
            cursor.execute(
                """
                INSERT OR REPLACE INTO shabads
                (id, source_id, section_name, writer_name, page_name)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    shabad_id,
                    source_id,
                    section.name if section else None,
                    section.writer_name if section else None,
                    section.page_name if section else None,
                ),
            )
            self._conn.commit()  # pyright: ignore[reportOptionalMemberAccess]

    def add_line(self, record: LineRecord) -> None:
        """
        Add or update a line, with its transliterations and translations.

        The Shabad is created from the record if it does not exist yet.

        Args:
            record: Line to store
        """
        if self._conn is None:
            self.open()

        plain = unicodedata.normalize("NFC", strip_vishraams(record.gurmukhi))

        with self._lock:
            cursor = self._conn.cursor()  # pyright: ignore[reportOptionalMemberAccess]

            cursor.execute(
                "SELECT id FROM shabads WHERE id = ?", (record.shabad_id,)
            )
            if cursor.fetchone() is None:
                section = record.section
                cursor.execute(
                    """
                    INSERT INTO shabads
                    (id, source_id, section_name, writer_name, page_name)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        record.shabad_id,
                        record.source_id,
                        section.name if section else None,
                        section.writer_name if section else None,
                        section.page_name if section else None,
                    ),
                )

            cursor.execute(
                """
                INSERT INTO lines
                (id, shabad_id, source_page, gurmukhi, first_letters, plain)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    shabad_id = excluded.shabad_id,
                    source_page = excluded.source_page,
                    gurmukhi = excluded.gurmukhi,
                    first_letters = excluded.first_letters,
                    plain = excluded.plain
                """,
                (
                    record.id,
                    record.shabad_id,
                    record.source_page,
                    record.gurmukhi,
                    first_letters(plain),
                    plain,
                ),
            )

            for table, texts in (
                ("transliterations", record.transliterations),
                ("translations", record.translations),
            ):
                cursor.execute(f"DELETE FROM {table} WHERE line_id = ?", (record.id,))
                cursor.executemany(
                    f"INSERT INTO {table} (line_id, language_id, text) VALUES (?, ?, ?)",
                    [(record.id, language, text) for language, text in texts.items()],
                )

            self._conn.commit()  # pyright: ignore[reportOptionalMemberAccess]

    def lookup(
        self, value: str, mode: MatchMode, options: "SearchOptions"
    ) -> Sequence[LineRecord]:
        """
        Find the lines matching a parsed query value.

        Args:
            value: Query value in Unicode Gurmukhi
            mode: How the value is matched
            options: What to include with each line

        Returns:
            Up to MAX_RESULTS matching lines
        """
        if mode == MatchMode.FULL_WORD:
            return self.full_word_search(value, options)
        return self.first_letter_search(value, options)

    def first_letter_search(
        self, letters: str, options: "SearchOptions"
    ) -> list[LineRecord]:
        """
        Search for lines containing the first letters of consecutive words.

        Args:
            letters: First letters, with wildcard markers for any letter
            options: What to include with each line

        Returns:
            List of matching lines
        """
        pattern = "".join(
            "_" if letter == WILDCARD_MARKER else _escape_like(letter)
            for letter in strip_accents(letters)
        )
        if not pattern:
            return []
        return self._search("first_letters", f"%{pattern}%", options)

    def full_word_search(self, words: str, options: "SearchOptions") -> list[LineRecord]:
        """
        Search for lines containing the words.

        Args:
            words: Gurmukhi text to find within a line
            options: What to include with each line

        Returns:
            List of matching lines
        """
        words = words.strip()
        if not words:
            return []
        return self._search("plain", f"%{_escape_like(words)}%", options)

    def _search(
        self, column: str, pattern: str, options: "SearchOptions"
    ) -> list[LineRecord]:
        """Run a LIKE search on a lines column and build the records."""
        with self._lock:
            if self._conn is None:
                return []

            cursor = self._conn.cursor()
            cursor.execute(
                f"""
                SELECT l.*, s.source_id, s.section_name, s.writer_name, s.page_name
                FROM lines l
                JOIN shabads s ON l.shabad_id = s.id
                WHERE l.{column} LIKE ? ESCAPE ?
                ORDER BY l.order_id
                LIMIT ?
                """,
                (pattern, LIKE_ESCAPE, settings.MAX_RESULTS),
            )
            rows = cursor.fetchall()

            results: list[LineRecord] = []
            for row in rows:
                record = LineRecord(
                    id=row["id"],
                    shabad_id=row["shabad_id"],
                    source_id=row["source_id"],
                    source_page=row["source_page"],
                    gurmukhi=row["gurmukhi"],
                )
                if options.include_transliterations:
                    record.transliterations = self._language_texts(
                        cursor, "transliterations", record.id
                    )
                if options.include_translations:
                    record.translations = self._language_texts(
                        cursor, "translations", record.id
                    )
                if options.include_citations and row["section_name"] is not None:
                    record.section = SectionMeta(
                        name=row["section_name"],
                        writer_name=row["writer_name"],
                        page_name=row["page_name"] or "Ang",
                    )
                results.append(record)

            return results

    @staticmethod
    def _language_texts(
        cursor: sqlite3.Cursor, table: str, line_id: str
    ) -> dict[int, str]:
        cursor.execute(
            f"SELECT language_id, text FROM {table} WHERE line_id = ?", (line_id,)
        )
        return {row["language_id"]: row["text"] for row in cursor.fetchall()}

    def get_stats(self) -> dict[str, int]:
        """Get statistics about the store."""
        with self._lock:
            if self._conn is None:
                return {
                    "shabads": 0,
                    "lines": 0,
                    "transliterations": 0,
                    "translations": 0,
                }

            cursor = self._conn.cursor()
            stats: dict[str, int] = {}
            for table in ("shabads", "lines", "transliterations", "translations"):
                cursor.execute(f"SELECT COUNT(*) as count FROM {table}")
                stats[table] = cursor.fetchone()["count"]
            return stats
