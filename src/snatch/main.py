"""Main entry point for the Snatch vocabulary capture application."""

import logging
import sys
from dataclasses import dataclass
from typing import Optional

from PySide6.QtGui import QGuiApplication

from snatch.coordinators import CaptureCoordinator, CapturePipelineState, ReviewCoordinator
from snatch.io import ClipboardReader, DatabaseManager
from snatch.services import (
    CandidateClassifier,
    HeuristicLanguageIdentifier,
    LangdetectLanguageIdentifier,
    LanguageIdentifier,
    Segmenter,
    Settings,
    SettingsManager,
    TesseractTextExtractor,
    TextExtractor,
    VocabularyService,
)
from snatch.services.settings_manager import LANGUAGE_FALLBACK_LANGDETECT

logger = logging.getLogger(__name__)


@dataclass
class Application:
    """Wired application components."""

    settings: Settings
    database: DatabaseManager
    vocabulary_service: VocabularyService
    classifier: CandidateClassifier
    capture: CaptureCoordinator
    review: ReviewCoordinator


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_language_identifier(settings: Settings) -> LanguageIdentifier:
    fallback = None
    if settings.language_fallback == LANGUAGE_FALLBACK_LANGDETECT:
        fallback = LangdetectLanguageIdentifier()
    return HeuristicLanguageIdentifier(fallback=fallback)


def build_application(
    settings: Settings,
    clipboard_reader: Optional[ClipboardReader] = None,
    text_extractor: Optional[TextExtractor] = None,
    run_inline: bool = False,
) -> Application:
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Persistence
    database = DatabaseManager(settings.db_path)
    database.ensure_schema()
    vocabulary_service = VocabularyService(database)

    # 2. Language pipeline
    segmenter = Segmenter(build_language_identifier(settings))
    classifier = CandidateClassifier(segmenter)

    # 3. External collaborators
    clipboard_reader = clipboard_reader or ClipboardReader()
    text_extractor = text_extractor or TesseractTextExtractor(
        languages=settings.ocr_languages,
        tesseract_cmd=settings.tesseract_cmd,
    )

    # 4. Coordinators
    capture = CaptureCoordinator(
        clipboard_reader=clipboard_reader,
        text_extractor=text_extractor,
        classifier=classifier,
        vocabulary_service=vocabulary_service,
        run_inline=run_inline,
    )
    review = ReviewCoordinator(vocabulary_service=vocabulary_service)

    return Application(
        settings=settings,
        database=database,
        vocabulary_service=vocabulary_service,
        classifier=classifier,
        capture=capture,
        review=review,
    )


def main():
    """Capture the current clipboard once and report the candidates found."""
    settings = SettingsManager().load()
    configure_logging(settings.log_level)

    app = QGuiApplication(sys.argv)
    app.setApplicationName("Snatch")
    app.setOrganizationName("Snatch")

    application = build_application(settings, run_inline=True)
    try:
        capture = application.capture
        capture.handle_paste()
        if capture.state is CapturePipelineState.ERROR:
            logger.error("Capture failed: %s", capture.error_message)
            return 1

        pair = application.vocabulary_service.get_language_pair()
        logger.info("Language pair: native=%s learning=%s", pair.native_code, pair.learning_code)
        for candidate in capture.candidates:
            logger.info(
                "[%s %s] %s",
                candidate.language_code,
                candidate.category,
                candidate.text,
            )
        due = application.vocabulary_service.due_entries()
        logger.info("%d cards due for review", len(due))
        return 0
    finally:
        application.database.close()


if __name__ == "__main__":
    sys.exit(main())
