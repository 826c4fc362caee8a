"""
Snatch - capture vocabulary from the clipboard and review it with Leitner boxes.

This package provides:
- Language segmentation and native/learning classification of pasted text
- OCR of pasted screenshots
- SQLite-backed vocabulary storage
- Leitner spaced-repetition scheduling
"""

__version__ = "0.1.0"

# Make key components available at package level
from snatch.core import LanguagePairConfig, VocabularyEntry, WordCandidate
from snatch.services import CandidateClassifier, Segmenter

__all__ = [
    "VocabularyEntry",
    "LanguagePairConfig",
    "WordCandidate",
    "CandidateClassifier",
    "Segmenter",
]
