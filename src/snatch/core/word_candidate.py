"""Transient capture results: language-tagged segments and word candidates."""

from dataclasses import dataclass

from .vocabulary_entry import CATEGORY_LEARNING, CATEGORY_NATIVE


@dataclass(frozen=True)
class Segment:
    """A trimmed span of input text tagged with its detected language."""

    text: str
    """Span text with surrounding whitespace removed"""

    language_code: str
    """Code reported by the language identifier (not yet normalized)"""

    start_offset: int
    """Character offset of the trimmed span in the input (inclusive)"""

    end_offset: int
    """Character offset of the trimmed span in the input (exclusive)"""


@dataclass(frozen=True)
class WordCandidate:
    """A fragment proposed for saving, waiting for the user to accept or reject it."""

    text: str
    language_code: str
    is_learning_language: bool
    full_source_text: str

    @property
    def category(self) -> str:
        return CATEGORY_LEARNING if self.is_learning_language else CATEGORY_NATIVE
