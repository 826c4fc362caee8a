"""Language services - identification, segmentation, and candidate classification."""

from snatch.services.language.language_identifier import (
    HeuristicLanguageIdentifier,
    LangdetectLanguageIdentifier,
    LanguageIdentifier,
    script_of,
)
from snatch.services.language.segmenter import Segmenter
from snatch.services.language.candidate_classifier import CandidateClassifier, Granularity

__all__ = [
    "LanguageIdentifier",
    "HeuristicLanguageIdentifier",
    "LangdetectLanguageIdentifier",
    "script_of",
    "Segmenter",
    "CandidateClassifier",
    "Granularity",
]
