"""VocabularyEntry entity - a captured fragment scheduled for Leitner review."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

MIN_BOX_LEVEL = 0
MAX_BOX_LEVEL = 4

CATEGORY_LEARNING = "learning"
CATEGORY_NATIVE = "native"


@dataclass(frozen=True)
class VocabularyEntry:
    """Represents a saved word or phrase with its review metadata.

    Attributes:
        word: Captured fragment text, never blank.
        language_code: Normalized two-letter code, or "und".
        example_sentence: Usage context (may equal word).
        source_text: Full original input the fragment came from.
        category: Free-form tag; "learning" or "native" at capture time.
        box_level: Leitner box in [0, 4].
        last_reviewed_at: Time of the last review, None until reviewed.
        next_review_at: When the entry is due again, None means due now.
        created_at: Creation time, never changed after insert.
        is_favorite: User-toggled favorite flag.
        id: Store-assigned identifier, None before insert.
    """

    word: str
    language_code: str
    example_sentence: str
    source_text: str
    category: str
    created_at: datetime
    box_level: int = MIN_BOX_LEVEL
    last_reviewed_at: Optional[datetime] = None
    next_review_at: Optional[datetime] = None
    is_favorite: bool = False
    id: Optional[int] = None

    def __post_init__(self):
        if not self.word.strip():
            raise ValueError("VocabularyEntry word must not be blank")
        if not (MIN_BOX_LEVEL <= self.box_level <= MAX_BOX_LEVEL):
            raise ValueError(
                f"box_level {self.box_level} outside [{MIN_BOX_LEVEL}, {MAX_BOX_LEVEL}]"
            )

    @property
    def is_learning(self) -> bool:
        return self.category == CATEGORY_LEARNING

    @property
    def is_mastered(self) -> bool:
        """True once the entry sits in the highest box."""
        return self.box_level == MAX_BOX_LEVEL
