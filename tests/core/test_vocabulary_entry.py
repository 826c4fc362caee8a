"""Unit tests for VocabularyEntry and WordCandidate entities."""

from dataclasses import replace

import pytest

from snatch.core import CATEGORY_LEARNING, CATEGORY_NATIVE, VocabularyEntry, WordCandidate


def make_entry(now, **overrides):
    fields = dict(
        word="serendipity",
        language_code="en",
        example_sentence="serendipity",
        source_text="Pure serendipity.",
        category=CATEGORY_LEARNING,
        created_at=now,
    )
    fields.update(overrides)
    return VocabularyEntry(**fields)


def test_new_entry_defaults(now):
    entry = make_entry(now)

    assert entry.id is None
    assert entry.box_level == 0
    assert entry.last_reviewed_at is None
    assert entry.next_review_at is None
    assert entry.is_favorite is False
    assert entry.is_learning is True
    assert entry.is_mastered is False


def test_blank_word_rejected(now):
    with pytest.raises(ValueError, match="must not be blank"):
        make_entry(now, word="   ")


@pytest.mark.parametrize("box_level", [-1, 5, 10])
def test_box_level_out_of_range_rejected(now, box_level):
    with pytest.raises(ValueError, match="box_level"):
        make_entry(now, box_level=box_level)


def test_replace_revalidates(now):
    entry = make_entry(now, box_level=4)
    assert entry.is_mastered

    with pytest.raises(ValueError):
        replace(entry, box_level=5)


def test_entries_are_immutable(now):
    entry = make_entry(now)
    with pytest.raises(AttributeError):
        entry.box_level = 3


def test_candidate_category_follows_language_flag():
    learning = WordCandidate("Hello world.", "en", True, "Hello world. 안녕하세요.")
    native = WordCandidate("안녕하세요.", "ko", False, "Hello world. 안녕하세요.")

    assert learning.category == CATEGORY_LEARNING
    assert native.category == CATEGORY_NATIVE
