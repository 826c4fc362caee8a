"""Candidate Classifier - keeps the segments written in the user's native or learning language."""

import logging
from enum import Enum
from typing import List, Optional

from snatch.core import (
    DEFAULT_LEARNING_CODE,
    DEFAULT_NATIVE_CODE,
    LanguagePairConfig,
    WordCandidate,
    normalize_language_code,
)

from .segmenter import Segmenter

logger = logging.getLogger(__name__)


class Granularity(Enum):
    """Span size used when proposing candidates."""

    SENTENCE = "sentence"
    WORD = "word"


class CandidateClassifier:
    """
    Turns captured text into word candidates for the configured language pair.

    The language pair is passed on every call; nothing is cached between calls.
    Segments in any third language are dropped silently.
    """

    def __init__(self, segmenter: Segmenter):
        self._segmenter = segmenter

    def classify(
        self,
        text: str,
        native_code: Optional[str] = DEFAULT_NATIVE_CODE,
        learning_code: Optional[str] = DEFAULT_LEARNING_CODE,
        granularity: Granularity = Granularity.SENTENCE,
    ) -> List[WordCandidate]:
        """
        Classify each segment of text against the native/learning pair.

        Args:
            text: Captured text (pasted or extracted).
            native_code: The user's native language; blank falls back to "ko".
            learning_code: The language being learned; blank falls back to "en".
            granularity: Sentence spans (default) or single-script word runs.

        Returns:
            Candidates in source order, without reordering or deduplication.
        """
        native = normalize_language_code((native_code or "").strip() or DEFAULT_NATIVE_CODE)
        learning = normalize_language_code((learning_code or "").strip() or DEFAULT_LEARNING_CODE)

        if granularity is Granularity.WORD:
            segments = self._segmenter.extract_words(text)
        else:
            segments = self._segmenter.segment(text)

        candidates = []
        for segment in segments:
            language = normalize_language_code(segment.language_code)
            is_learning = language == learning
            is_native = language == native
            if not (is_learning or is_native):
                continue
            candidates.append(
                WordCandidate(
                    text=segment.text,
                    language_code=language,
                    is_learning_language=is_learning,
                    full_source_text=text,
                )
            )

        logger.debug(
            "Kept %d of %d segments for pair native=%s learning=%s",
            len(candidates),
            len(segments),
            native,
            learning,
        )
        return candidates

    def classify_with_config(
        self,
        text: str,
        config: Optional[LanguagePairConfig],
        granularity: Granularity = Granularity.SENTENCE,
    ) -> List[WordCandidate]:
        """Classify using a stored language pair, or the defaults when none is stored."""
        config = config or LanguagePairConfig.defaults()
        return self.classify(text, config.native_code, config.learning_code, granularity)
