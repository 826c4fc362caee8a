"""SQLite-backed vocabulary and language-pair persistence."""

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from snatch.core import EntryNotFoundError, LanguagePairConfig, VocabularyEntry, VocabularyStoreError

logger = logging.getLogger(__name__)

IN_MEMORY = ":memory:"

_ENTRY_COLUMNS = """
    id, word, language_code, example_sentence, source_text, category,
    box_level, last_reviewed_at, next_review_at, created_at, is_favorite
"""


def _casefold(value: Optional[str]) -> str:
    return (value or "").casefold()


class DatabaseManager:
    """Owns the SQLite connection, schema, and vocabulary persistence helpers.

    Every sqlite3 failure is re-raised as VocabularyStoreError. Writes run in a
    transaction, so a failed write leaves the stored row untouched.
    """

    def __init__(self, db_path: Union[Path, str]) -> None:
        if str(db_path) == IN_MEMORY:
            self.db_path: Union[Path, str] = IN_MEMORY
        else:
            self.db_path = Path(db_path)
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self.connection = sqlite3.connect(str(self.db_path))
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to open vocabulary database {db_path}: {e}") from e
        self.connection.row_factory = sqlite3.Row
        # Unicode-aware case folding; SQLite's LOWER() only folds ASCII.
        self.connection.create_function("casefold", 1, _casefold, deterministic=True)

    def ensure_schema(self) -> None:
        """Create tables and indexes if they do not exist."""
        try:
            with self.connection:
                self.connection.execute(
                    """
                    CREATE TABLE IF NOT EXISTS vocabulary_entries (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        word TEXT NOT NULL,
                        language_code TEXT NOT NULL,
                        example_sentence TEXT NOT NULL DEFAULT '',
                        source_text TEXT NOT NULL DEFAULT '',
                        category TEXT NOT NULL,
                        box_level INTEGER NOT NULL DEFAULT 0
                            CHECK (box_level BETWEEN 0 AND 4),
                        last_reviewed_at TEXT,
                        next_review_at TEXT,
                        created_at TEXT NOT NULL,
                        is_favorite INTEGER NOT NULL DEFAULT 0
                    );
                    """
                )
                self.connection.execute(
                    """
                    CREATE TABLE IF NOT EXISTS language_config (
                        id INTEGER PRIMARY KEY CHECK (id = 1),
                        native_code TEXT NOT NULL,
                        learning_code TEXT NOT NULL,
                        updated_at TEXT NOT NULL
                    );
                    """
                )
                self.connection.execute(
                    """
                    CREATE INDEX IF NOT EXISTS idx_vocabulary_entries_language
                    ON vocabulary_entries(language_code);
                    """
                )
                self.connection.execute(
                    """
                    CREATE INDEX IF NOT EXISTS idx_vocabulary_entries_created
                    ON vocabulary_entries(created_at);
                    """
                )
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to create vocabulary schema: {e}") from e

    def insert_entry(self, entry: VocabularyEntry) -> VocabularyEntry:
        """Insert a new entry and return it with its assigned id."""
        try:
            with self.connection:
                cur = self.connection.execute(
                    """
                    INSERT INTO vocabulary_entries (
                        word, language_code, example_sentence, source_text, category,
                        box_level, last_reviewed_at, next_review_at, created_at, is_favorite
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        entry.word,
                        entry.language_code,
                        entry.example_sentence,
                        entry.source_text,
                        entry.category,
                        entry.box_level,
                        self._to_text(entry.last_reviewed_at),
                        self._to_text(entry.next_review_at),
                        self._to_text(entry.created_at),
                        int(entry.is_favorite),
                    ),
                )
                entry_id = cur.lastrowid
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to save '{entry.word}': {e}") from e
        return self._require_entry(entry_id)

    def get_entry(self, entry_id: int) -> Optional[VocabularyEntry]:
        try:
            row = self.connection.execute(
                f"SELECT {_ENTRY_COLUMNS} FROM vocabulary_entries WHERE id = ?",
                (entry_id,),
            ).fetchone()
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to read entry {entry_id}: {e}") from e
        return self._row_to_entry(row) if row else None

    def delete_entry(self, entry_id: int) -> bool:
        """Delete an entry. Returns False when no such entry existed."""
        try:
            with self.connection:
                cur = self.connection.execute(
                    "DELETE FROM vocabulary_entries WHERE id = ?", (entry_id,)
                )
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to delete entry {entry_id}: {e}") from e
        return cur.rowcount > 0

    def update_review_state(self, entry: VocabularyEntry) -> VocabularyEntry:
        """Persist box level and review timestamps of an existing entry."""
        if entry.id is None:
            raise ValueError("Cannot update review state of an unsaved entry")
        try:
            with self.connection:
                cur = self.connection.execute(
                    """
                    UPDATE vocabulary_entries
                    SET box_level = ?, last_reviewed_at = ?, next_review_at = ?
                    WHERE id = ?
                    """,
                    (
                        entry.box_level,
                        self._to_text(entry.last_reviewed_at),
                        self._to_text(entry.next_review_at),
                        entry.id,
                    ),
                )
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to record review for entry {entry.id}: {e}") from e
        if cur.rowcount == 0:
            raise EntryNotFoundError(f"Entry {entry.id} no longer exists")
        return self._require_entry(entry.id)

    def set_favorite(self, entry_id: int, is_favorite: bool) -> VocabularyEntry:
        try:
            with self.connection:
                cur = self.connection.execute(
                    "UPDATE vocabulary_entries SET is_favorite = ? WHERE id = ?",
                    (int(is_favorite), entry_id),
                )
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to update favorite for entry {entry_id}: {e}") from e
        if cur.rowcount == 0:
            raise EntryNotFoundError(f"Entry {entry_id} no longer exists")
        return self._require_entry(entry_id)

    def list_entries(
        self,
        language_code: Optional[str] = None,
        favorites_only: bool = False,
        search: Optional[str] = None,
        newest_first: bool = True,
    ) -> List[VocabularyEntry]:
        """
        List entries matching all given filters.

        Args:
            language_code: Only entries with this code.
            favorites_only: Only favorite entries.
            search: Case-insensitive substring of word or example sentence.
            newest_first: Sort by created_at descending (ascending otherwise).
        """
        clauses = []
        params: list = []
        if language_code:
            clauses.append("language_code = ?")
            params.append(language_code)
        if favorites_only:
            clauses.append("is_favorite = 1")
        if search:
            clauses.append("(instr(casefold(word), ?) > 0 OR instr(casefold(example_sentence), ?) > 0)")
            needle = search.casefold()
            params.extend([needle, needle])

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        order = "DESC" if newest_first else "ASC"
        try:
            rows = self.connection.execute(
                f"""
                SELECT {_ENTRY_COLUMNS}
                FROM vocabulary_entries
                {where}
                ORDER BY created_at {order}, id {order}
                """,
                params,
            ).fetchall()
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to list vocabulary entries: {e}") from e
        return [self._row_to_entry(row) for row in rows]

    def list_languages(self) -> List[str]:
        """Distinct language codes among saved entries, sorted."""
        try:
            rows = self.connection.execute(
                "SELECT DISTINCT language_code FROM vocabulary_entries ORDER BY language_code"
            ).fetchall()
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to list languages: {e}") from e
        return [row["language_code"] for row in rows]

    def get_language_config(self) -> LanguagePairConfig:
        """Return the stored language pair, or the defaults when none is stored."""
        try:
            row = self.connection.execute(
                "SELECT native_code, learning_code, updated_at FROM language_config WHERE id = 1"
            ).fetchone()
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to read language settings: {e}") from e
        if row is None:
            return LanguagePairConfig.defaults()
        return LanguagePairConfig(
            native_code=row["native_code"],
            learning_code=row["learning_code"],
            updated_at=self._from_text(row["updated_at"]),
        )

    def save_language_config(self, config: LanguagePairConfig) -> LanguagePairConfig:
        if config.updated_at is None:
            raise ValueError("LanguagePairConfig.updated_at is required when saving")
        try:
            with self.connection:
                self.connection.execute(
                    """
                    INSERT INTO language_config (id, native_code, learning_code, updated_at)
                    VALUES (1, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        native_code = excluded.native_code,
                        learning_code = excluded.learning_code,
                        updated_at = excluded.updated_at
                    """,
                    (config.native_code, config.learning_code, self._to_text(config.updated_at)),
                )
        except sqlite3.Error as e:
            raise VocabularyStoreError(f"Failed to save language settings: {e}") from e
        return self.get_language_config()

    def close(self) -> None:
        self.connection.close()

    def _require_entry(self, entry_id: int) -> VocabularyEntry:
        entry = self.get_entry(entry_id)
        if entry is None:
            raise VocabularyStoreError(f"Entry {entry_id} not found after write")
        return entry

    @staticmethod
    def _to_text(value: Optional[datetime]) -> Optional[str]:
        return value.isoformat() if value is not None else None

    @staticmethod
    def _from_text(value: Optional[str]) -> Optional[datetime]:
        return datetime.fromisoformat(value) if value else None

    @classmethod
    def _row_to_entry(cls, row: sqlite3.Row) -> VocabularyEntry:
        return VocabularyEntry(
            id=row["id"],
            word=row["word"],
            language_code=row["language_code"],
            example_sentence=row["example_sentence"],
            source_text=row["source_text"],
            category=row["category"],
            box_level=row["box_level"],
            last_reviewed_at=cls._from_text(row["last_reviewed_at"]),
            next_review_at=cls._from_text(row["next_review_at"]),
            created_at=cls._from_text(row["created_at"]),
            is_favorite=bool(row["is_favorite"]),
        )
