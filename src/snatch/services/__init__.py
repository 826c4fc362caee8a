"""Services layer - business logic and external integrations."""

# Language services
from snatch.services.language import (
	CandidateClassifier,
	Granularity,
	HeuristicLanguageIdentifier,
	LangdetectLanguageIdentifier,
	LanguageIdentifier,
	Segmenter,
)

# Review scheduling
from snatch.services.review import ReviewOutcome, ReviewSession

# Text processing services
from snatch.services.text_processing import normalize_text

# Text extraction services
from snatch.services.text_extraction import (
	ExtractionResult,
	TesseractTextExtractor,
	TextExtractionWorker,
	TextExtractor,
)

from snatch.services.vocabulary_service import VocabularyService
from snatch.services.settings_manager import Settings, SettingsManager

__all__ = [
	"LanguageIdentifier",
	"HeuristicLanguageIdentifier",
	"LangdetectLanguageIdentifier",
	"Segmenter",
	"CandidateClassifier",
	"Granularity",
	"ReviewOutcome",
	"ReviewSession",
	"normalize_text",
	"TextExtractor",
	"ExtractionResult",
	"TesseractTextExtractor",
	"TextExtractionWorker",
	"VocabularyService",
	"Settings",
	"SettingsManager",
]
