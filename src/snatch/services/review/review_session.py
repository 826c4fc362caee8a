"""Review session - one pass over the shuffled queue of due entries."""

import random
from datetime import datetime
from typing import Iterable, List, Optional

from snatch.core import VocabularyEntry

from .leitner_scheduler import ReviewOutcome, select_due


class ReviewSession:
    """
    Walks a queue of due entries built once at session start.

    Each card is answered exactly once. A wrong answer does not put the card
    back in this queue; it becomes due again for the next session.
    """

    def __init__(
        self,
        entries: Iterable[VocabularyEntry],
        now: datetime,
        rng: Optional[random.Random] = None,
    ):
        self._queue: List[VocabularyEntry] = select_due(entries, now, rng)
        self._position = 0
        self.correct_count = 0
        self.wrong_count = 0
        self.skipped_count = 0

    @property
    def queue(self) -> List[VocabularyEntry]:
        return list(self._queue)

    @property
    def total(self) -> int:
        return len(self._queue)

    @property
    def position(self) -> int:
        """0-indexed position of the current card."""
        return self._position

    @property
    def reviewed_count(self) -> int:
        return self.correct_count + self.wrong_count

    @property
    def is_empty(self) -> bool:
        """True when no card was due at session start ("no cards")."""
        return not self._queue

    @property
    def is_complete(self) -> bool:
        return self._position >= len(self._queue)

    @property
    def current(self) -> Optional[VocabularyEntry]:
        if self.is_complete:
            return None
        return self._queue[self._position]

    def advance(self, outcome: ReviewOutcome) -> None:
        """Record the outcome for the current card and move to the next one."""
        if self.is_complete:
            raise RuntimeError("Review session is complete; cannot advance")
        if outcome is ReviewOutcome.CORRECT:
            self.correct_count += 1
        else:
            self.wrong_count += 1
        self._position += 1

    def skip(self) -> None:
        """Move past the current card without an answer (e.g. it was deleted)."""
        if self.is_complete:
            raise RuntimeError("Review session is complete; cannot skip")
        self.skipped_count += 1
        self._position += 1
