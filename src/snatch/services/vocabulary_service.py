"""Vocabulary Service - orchestrates saving candidates, browsing, and recording reviews."""

import logging
import random
from datetime import datetime, timezone
from typing import List, Optional

from snatch.core import (
    UNDETERMINED,
    EntryNotFoundError,
    LanguagePairConfig,
    VocabularyEntry,
    WordCandidate,
    normalize_language_code,
)
from snatch.io import DatabaseManager
from snatch.services.review import ReviewOutcome, ReviewSession, apply_review, select_due
from snatch.services.text_processing import normalize_text

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VocabularyService:
    """Application service for the saved word list and its review schedule.

    Depends on DatabaseManager for persistence. Entries are immutable values:
    every change is computed first, written, and only the stored result is
    returned, so a failed write never looks successful to the caller.
    """

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    def accept_candidate(self, candidate: WordCandidate, now: Optional[datetime] = None) -> VocabularyEntry:
        """
        Save a confirmed candidate as a new vocabulary entry.

        The entry starts in box 0 with no review timestamps, so it is due at once.

        Raises:
            ValueError: If the candidate text is blank.
            VocabularyStoreError: If the store rejects the write.
        """
        text = normalize_text(candidate.text)
        if not text:
            raise ValueError("Cannot save a blank candidate")

        entry = VocabularyEntry(
            word=text,
            language_code=normalize_language_code(candidate.language_code),
            example_sentence=text,
            source_text=candidate.full_source_text,
            category=candidate.category,
            created_at=now or utcnow(),
        )
        saved = self._db.insert_entry(entry)
        logger.info("Saved %s entry %d (%s)", saved.category, saved.id, saved.language_code)
        return saved

    def get_entry(self, entry_id: int) -> Optional[VocabularyEntry]:
        return self._db.get_entry(entry_id)

    def delete_entry(self, entry_id: int) -> bool:
        deleted = self._db.delete_entry(entry_id)
        if deleted:
            logger.info("Deleted entry %d", entry_id)
        return deleted

    def toggle_favorite(self, entry: VocabularyEntry) -> VocabularyEntry:
        if entry.id is None:
            raise ValueError("Cannot favorite an unsaved entry")
        return self._db.set_favorite(entry.id, not entry.is_favorite)

    def search_entries(
        self,
        query: str = "",
        language_code: Optional[str] = None,
        favorites_only: bool = False,
        newest_first: bool = True,
    ) -> List[VocabularyEntry]:
        """List entries filtered by language, favorite flag, and a word/example substring."""
        return self._db.list_entries(
            language_code=normalize_language_code(language_code) if language_code else None,
            favorites_only=favorites_only,
            search=normalize_text(query) or None,
            newest_first=newest_first,
        )

    def list_languages(self) -> List[str]:
        return self._db.list_languages()

    def due_entries(self, now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> List[VocabularyEntry]:
        return select_due(self._db.list_entries(newest_first=False), now or utcnow(), rng)

    def start_review_session(
        self,
        now: Optional[datetime] = None,
        rng: Optional[random.Random] = None,
    ) -> ReviewSession:
        """Build a review session from every entry due at `now`."""
        session = ReviewSession(self._db.list_entries(newest_first=False), now or utcnow(), rng)
        logger.info("Review session started with %d due cards", session.total)
        return session

    def record_review(
        self,
        entry: VocabularyEntry,
        outcome: ReviewOutcome,
        now: Optional[datetime] = None,
    ) -> VocabularyEntry:
        """
        Apply a review outcome to an entry and persist it as one read-modify-write.

        The latest stored state is read first so the transition starts from
        what is actually saved.

        Returns:
            The entry as stored after the transition.

        Raises:
            EntryNotFoundError: If the entry was deleted in the meantime.
            VocabularyStoreError: If the write fails; the stored entry keeps
                its previous state.
        """
        if entry.id is None:
            raise ValueError("Cannot review an unsaved entry")
        current = self._db.get_entry(entry.id)
        if current is None:
            raise EntryNotFoundError(f"Entry {entry.id} no longer exists")

        updated = apply_review(current, outcome, now or utcnow())
        saved = self._db.update_review_state(updated)
        logger.info(
            "Entry %d answered %s: box %d -> %d",
            saved.id,
            outcome.value,
            current.box_level,
            saved.box_level,
        )
        return saved

    def get_language_pair(self) -> LanguagePairConfig:
        return self._db.get_language_config()

    def set_language_pair(
        self,
        native_code: str,
        learning_code: str,
        now: Optional[datetime] = None,
    ) -> LanguagePairConfig:
        """Store a new language pair, normalizing both codes.

        Raises:
            ValueError: If either code is blank or "und".
        """
        native = normalize_language_code(native_code)
        learning = normalize_language_code(learning_code)
        if UNDETERMINED in (native, learning):
            raise ValueError(f"Invalid language pair: native={native_code!r} learning={learning_code!r}")

        config = LanguagePairConfig(
            native_code=native,
            learning_code=learning,
            updated_at=now or utcnow(),
        )
        return self._db.save_language_config(config)
