"""Review Coordinator - runs a flashcard session over due vocabulary entries."""

import logging
import random
from datetime import datetime
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal, Slot

from snatch.core import EntryNotFoundError, VocabularyEntry, VocabularyStoreError
from snatch.services import ReviewOutcome, ReviewSession, VocabularyService
from snatch.services.vocabulary_service import utcnow

logger = logging.getLogger(__name__)


class ReviewCoordinator(QObject):
    """
    Manages the show card → reveal → answer → next card loop.

    The queue is fixed when the session starts. Answers are persisted before
    moving on; if the write fails the same card stays current. A card deleted
    while the session is open is skipped.
    """

    card_changed = Signal(object)  # VocabularyEntry
    card_revealed = Signal(object)  # VocabularyEntry
    session_completed = Signal(int)  # number of cards reviewed
    no_cards = Signal()
    error_occurred = Signal(str)

    def __init__(
        self,
        vocabulary_service: VocabularyService,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        super().__init__()

        if vocabulary_service is None:
            raise ValueError("VocabularyService must not be None")

        self.vocabulary_service = vocabulary_service
        self._rng = rng
        self._clock = clock

        self.session: Optional[ReviewSession] = None
        self.is_revealed = False

    @property
    def current_card(self) -> Optional[VocabularyEntry]:
        return self.session.current if self.session is not None else None

    @Slot()
    def start_session(self) -> Optional[ReviewSession]:
        """Build a fresh shuffled queue from the entries due right now."""
        self.is_revealed = False
        try:
            self.session = self.vocabulary_service.start_review_session(self._clock(), self._rng)
        except VocabularyStoreError as e:
            self.session = None
            self.error_occurred.emit(f"Could not load review cards: {e}")
            return None

        if self.session.is_empty:
            self.no_cards.emit()
        else:
            self.card_changed.emit(self.session.current)
        return self.session

    @Slot()
    def reveal(self):
        """Flip the current card to show its example sentence."""
        card = self.current_card
        if card is None:
            return
        self.is_revealed = not self.is_revealed
        if self.is_revealed:
            self.card_revealed.emit(card)

    @Slot()
    def mark_correct(self) -> Optional[VocabularyEntry]:
        return self._answer(ReviewOutcome.CORRECT)

    @Slot()
    def mark_wrong(self) -> Optional[VocabularyEntry]:
        return self._answer(ReviewOutcome.WRONG)

    def _answer(self, outcome: ReviewOutcome) -> Optional[VocabularyEntry]:
        card = self.current_card
        if card is None:
            return None

        try:
            saved = self.vocabulary_service.record_review(card, outcome, self._clock())
        except EntryNotFoundError:
            logger.info("Entry %s was deleted during review; skipping", card.id)
            self.session.skip()
            self._show_next()
            return None
        except VocabularyStoreError as e:
            logger.warning("Review of entry %s not saved: %s", card.id, e)
            self.error_occurred.emit(f"Could not save review: {e}")
            return None

        self.session.advance(outcome)
        self._show_next()
        return saved

    def _show_next(self):
        self.is_revealed = False
        if self.session.is_complete:
            self.session_completed.emit(self.session.reviewed_count)
        else:
            self.card_changed.emit(self.session.current)
