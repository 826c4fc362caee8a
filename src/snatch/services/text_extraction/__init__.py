"""Text extraction services - abstract OCR interface, Tesseract implementation, and worker."""

from snatch.services.text_extraction.text_extractor import ExtractionResult, TextExtractor
from snatch.services.text_extraction.tesseract_text_extractor import (
    DEFAULT_OCR_LANGUAGES,
    TesseractTextExtractor,
)
from snatch.services.text_extraction.extraction_worker import ExtractionSignals, TextExtractionWorker

__all__ = [
    "TextExtractor",
    "ExtractionResult",
    "TesseractTextExtractor",
    "DEFAULT_OCR_LANGUAGES",
    "ExtractionSignals",
    "TextExtractionWorker",
]
