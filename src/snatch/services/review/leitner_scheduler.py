"""Leitner scheduler - pure functions over vocabulary entry review state.

Box 0 holds new or missed entries and is due every session; each correct
answer moves an entry up one box and pushes its next review further out.
A wrong answer sends it back to box 0.
"""

import random
from dataclasses import replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, Iterable, List, Optional

from snatch.core import MAX_BOX_LEVEL, MIN_BOX_LEVEL, VocabularyEntry

BOX_INTERVALS: Dict[int, timedelta] = {
    0: timedelta(0),
    1: timedelta(days=1),
    2: timedelta(days=3),
    3: timedelta(days=7),
    4: timedelta(days=14),
}


class ReviewOutcome(Enum):
    CORRECT = "correct"
    WRONG = "wrong"


def interval_for_box(box_level: int) -> timedelta:
    """Delay until an entry in the given box is due again.

    Raises:
        ValueError: if box_level is outside [0, 4].
    """
    if box_level not in BOX_INTERVALS:
        raise ValueError(f"box_level {box_level} outside [{MIN_BOX_LEVEL}, {MAX_BOX_LEVEL}]")
    return BOX_INTERVALS[box_level]


def is_due(entry: VocabularyEntry, now: datetime) -> bool:
    """An entry is due when it was never scheduled or its review time has arrived."""
    return entry.next_review_at is None or entry.next_review_at <= now


def select_due(
    entries: Iterable[VocabularyEntry],
    now: datetime,
    rng: Optional[random.Random] = None,
) -> List[VocabularyEntry]:
    """
    Pick every due entry and shuffle them into a fresh review order.

    Args:
        entries: Candidate entries (any order).
        now: Reference time for the due check.
        rng: Random source; pass a seeded instance for a reproducible order.

    Returns:
        Due entries in shuffled order; empty when nothing is due.
    """
    due = [entry for entry in entries if is_due(entry, now)]
    (rng or random.Random()).shuffle(due)
    return due


def apply_correct(entry: VocabularyEntry, now: datetime) -> VocabularyEntry:
    box_level = min(entry.box_level + 1, MAX_BOX_LEVEL)
    return replace(
        entry,
        box_level=box_level,
        last_reviewed_at=now,
        next_review_at=now + interval_for_box(box_level),
    )


def apply_wrong(entry: VocabularyEntry, now: datetime) -> VocabularyEntry:
    # Due again at the next session, not re-queued in the current one.
    return replace(
        entry,
        box_level=MIN_BOX_LEVEL,
        last_reviewed_at=now,
        next_review_at=now,
    )


def apply_review(entry: VocabularyEntry, outcome: ReviewOutcome, now: datetime) -> VocabularyEntry:
    """Return the entry's state after answering it with the given outcome."""
    if outcome is ReviewOutcome.CORRECT:
        return apply_correct(entry, now)
    return apply_wrong(entry, now)
