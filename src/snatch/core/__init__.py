"""Domain layer - Pure entities for captured vocabulary and review state."""

from .errors import (
    EmptyClipboardError,
    EntryNotFoundError,
    ExtractionError,
    SnatchError,
    VocabularyStoreError,
)
from .language_codes import (
    DEFAULT_LEARNING_CODE,
    DEFAULT_NATIVE_CODE,
    UNDETERMINED,
    normalize_language_code,
)
from .language_pair import LanguagePairConfig
from .vocabulary_entry import (
    CATEGORY_LEARNING,
    CATEGORY_NATIVE,
    MAX_BOX_LEVEL,
    MIN_BOX_LEVEL,
    VocabularyEntry,
)
from .word_candidate import Segment, WordCandidate

__all__ = [
    "VocabularyEntry",
    "LanguagePairConfig",
    "WordCandidate",
    "Segment",
    "SnatchError",
    "ExtractionError",
    "EmptyClipboardError",
    "VocabularyStoreError",
    "EntryNotFoundError",
    "normalize_language_code",
    "UNDETERMINED",
    "DEFAULT_NATIVE_CODE",
    "DEFAULT_LEARNING_CODE",
    "CATEGORY_LEARNING",
    "CATEGORY_NATIVE",
    "MIN_BOX_LEVEL",
    "MAX_BOX_LEVEL",
]
