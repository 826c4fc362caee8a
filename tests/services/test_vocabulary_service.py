import random
import unicodedata
from dataclasses import replace
from datetime import timedelta
from unittest.mock import patch

import pytest

from snatch.core import EntryNotFoundError, VocabularyEntry, VocabularyStoreError, WordCandidate
from snatch.services import ReviewOutcome


def learning_candidate(text="Hello world.", source="Hello world. 안녕하세요."):
    return WordCandidate(text=text, language_code="en", is_learning_language=True, full_source_text=source)


def native_candidate(text="안녕하세요.", source="Hello world. 안녕하세요."):
    return WordCandidate(text=text, language_code="ko", is_learning_language=False, full_source_text=source)


class TestAcceptCandidate:
    def test_creates_new_entry(self, vocabulary_service, now):
        entry = vocabulary_service.accept_candidate(learning_candidate(), now)

        assert entry.id is not None
        assert entry.word == "Hello world."
        assert entry.example_sentence == "Hello world."
        assert entry.source_text == "Hello world. 안녕하세요."
        assert entry.language_code == "en"
        assert entry.category == "learning"
        assert entry.box_level == 0
        assert entry.last_reviewed_at is None
        assert entry.next_review_at is None
        assert entry.created_at == now
        assert entry.is_favorite is False

    def test_native_candidate_category(self, vocabulary_service, now):
        entry = vocabulary_service.accept_candidate(native_candidate(), now)
        assert entry.category == "native"

    def test_text_trimmed_and_code_normalized(self, vocabulary_service, now):
        candidate = WordCandidate("  Hello  ", "en-US", True, "  Hello  ")

        entry = vocabulary_service.accept_candidate(candidate, now)

        assert entry.word == "Hello"
        assert entry.language_code == "en"

    def test_blank_candidate_rejected(self, vocabulary_service, now):
        with pytest.raises(ValueError):
            vocabulary_service.accept_candidate(learning_candidate(text="   "), now)
        assert vocabulary_service.search_entries() == []

    def test_new_entry_is_due_immediately(self, vocabulary_service, now):
        entry = vocabulary_service.accept_candidate(learning_candidate(), now)
        assert [e.id for e in vocabulary_service.due_entries(now)] == [entry.id]

    def test_default_timestamp_is_aware(self, vocabulary_service):
        entry = vocabulary_service.accept_candidate(learning_candidate())
        assert entry.created_at.tzinfo is not None


    def test_whitespace_collapsed_at_capture(self, vocabulary_service, now):
        entry = vocabulary_service.accept_candidate(learning_candidate("see  you\tsoon"), now)

        assert entry.word == "see you soon"
        assert entry.example_sentence == "see you soon"


class TestBrowsing:
    def test_toggle_favorite(self, vocabulary_service, now):
        entry = vocabulary_service.accept_candidate(learning_candidate(), now)

        favorited = vocabulary_service.toggle_favorite(entry)
        unfavorited = vocabulary_service.toggle_favorite(favorited)

        assert favorited.is_favorite is True
        assert unfavorited.is_favorite is False

    def test_toggle_favorite_requires_saved_entry(self, vocabulary_service, now):
        with pytest.raises(ValueError):
            vocabulary_service.toggle_favorite(
                VocabularyEntry(
                    word="unsaved",
                    language_code="en",
                    example_sentence="unsaved",
                    source_text="unsaved",
                    category="learning",
                    created_at=now,
                )
            )

    def test_search_by_language_and_query(self, vocabulary_service, now):
        vocabulary_service.accept_candidate(learning_candidate("Good morning."), now)
        vocabulary_service.accept_candidate(learning_candidate("Good night."), now)
        vocabulary_service.accept_candidate(native_candidate("좋은 아침."), now)

        assert len(vocabulary_service.search_entries(language_code="en-US")) == 2
        assert [e.word for e in vocabulary_service.search_entries("  MORNING ")] == ["Good morning."]
        assert [e.word for e in vocabulary_service.search_entries(language_code="ko")] == ["좋은 아침."]

    @pytest.mark.parametrize("query", ["see  you", "see you", "SEE\tYOU", " see\n you "])
    def test_entry_found_by_its_own_text(self, vocabulary_service, now, query):
        entry = vocabulary_service.accept_candidate(learning_candidate("see  you"), now)

        assert [e.id for e in vocabulary_service.search_entries(query)] == [entry.id]

    def test_decomposed_capture_found_by_typed_query(self, vocabulary_service, now):
        decomposed = unicodedata.normalize("NFD", "한국어 공부")
        entry = vocabulary_service.accept_candidate(native_candidate(decomposed), now)

        assert [e.id for e in vocabulary_service.search_entries("한국어")] == [entry.id]

    def test_search_favorites_only(self, vocabulary_service, now):
        entry = vocabulary_service.accept_candidate(learning_candidate(), now)
        vocabulary_service.accept_candidate(native_candidate(), now)
        vocabulary_service.toggle_favorite(entry)

        assert [e.id for e in vocabulary_service.search_entries(favorites_only=True)] == [entry.id]

    def test_delete_entry(self, vocabulary_service, now):
        entry = vocabulary_service.accept_candidate(learning_candidate(), now)

        assert vocabulary_service.delete_entry(entry.id) is True
        assert vocabulary_service.get_entry(entry.id) is None
        assert vocabulary_service.delete_entry(entry.id) is False

    def test_list_languages(self, vocabulary_service, now):
        vocabulary_service.accept_candidate(learning_candidate(), now)
        vocabulary_service.accept_candidate(native_candidate(), now)
        assert vocabulary_service.list_languages() == ["en", "ko"]


class TestRecordReview:
    def _entry_in_box(self, vocabulary_service, db, now, box_level):
        entry = vocabulary_service.accept_candidate(learning_candidate(), now)
        if box_level:
            entry = db.update_review_state(replace(entry, box_level=box_level))
        return entry

    def test_correct_answer_promotes(self, vocabulary_service, db, now):
        entry = self._entry_in_box(vocabulary_service, db, now, 2)

        saved = vocabulary_service.record_review(entry, ReviewOutcome.CORRECT, now)

        assert saved.box_level == 3
        assert saved.next_review_at == now + timedelta(days=7)
        assert db.get_entry(entry.id) == saved

    def test_wrong_answer_resets(self, vocabulary_service, db, now):
        entry = self._entry_in_box(vocabulary_service, db, now, 3)

        saved = vocabulary_service.record_review(entry, ReviewOutcome.WRONG, now)

        assert saved.box_level == 0
        assert saved.next_review_at == now
        assert saved.last_reviewed_at == now

    def test_transition_starts_from_stored_state(self, vocabulary_service, db, now):
        stale = vocabulary_service.accept_candidate(learning_candidate(), now)
        vocabulary_service.record_review(stale, ReviewOutcome.CORRECT, now)

        saved = vocabulary_service.record_review(stale, ReviewOutcome.CORRECT, now + timedelta(days=1))

        assert saved.box_level == 2

    def test_correct_answer_leaves_due_list(self, vocabulary_service, now):
        entry = vocabulary_service.accept_candidate(learning_candidate(), now)
        vocabulary_service.record_review(entry, ReviewOutcome.CORRECT, now)

        assert vocabulary_service.due_entries(now + timedelta(hours=1)) == []
        assert len(vocabulary_service.due_entries(now + timedelta(days=1))) == 1

    def test_deleted_entry_raises(self, vocabulary_service, now):
        entry = vocabulary_service.accept_candidate(learning_candidate(), now)
        vocabulary_service.delete_entry(entry.id)

        with pytest.raises(EntryNotFoundError):
            vocabulary_service.record_review(entry, ReviewOutcome.CORRECT, now)

    def test_failed_write_keeps_previous_state(self, vocabulary_service, db, now):
        entry = self._entry_in_box(vocabulary_service, db, now, 2)

        with patch.object(db, "update_review_state", side_effect=VocabularyStoreError("disk full")):
            with pytest.raises(VocabularyStoreError):
                vocabulary_service.record_review(entry, ReviewOutcome.CORRECT, now)

        assert db.get_entry(entry.id).box_level == 2

    def test_start_review_session_uses_seeded_order(self, vocabulary_service, now):
        for i in range(6):
            vocabulary_service.accept_candidate(learning_candidate(f"Sentence number {i}."), now)

        first = vocabulary_service.start_review_session(now, random.Random(9))
        second = vocabulary_service.start_review_session(now, random.Random(9))

        assert first.total == 6
        assert [e.id for e in first.queue] == [e.id for e in second.queue]


class TestLanguagePair:
    def test_defaults(self, vocabulary_service):
        pair = vocabulary_service.get_language_pair()
        assert (pair.native_code, pair.learning_code) == ("ko", "en")

    def test_set_normalizes_and_persists(self, vocabulary_service, now):
        vocabulary_service.set_language_pair("ja-JP", "EN_us", now)

        pair = vocabulary_service.get_language_pair()
        assert (pair.native_code, pair.learning_code) == ("ja", "en")
        assert pair.updated_at == now

    @pytest.mark.parametrize("native, learning", [("", "en"), ("ko", "und"), ("  ", "  ")])
    def test_invalid_pair_rejected(self, vocabulary_service, native, learning):
        with pytest.raises(ValueError):
            vocabulary_service.set_language_pair(native, learning)
        assert vocabulary_service.get_language_pair().updated_at is None
