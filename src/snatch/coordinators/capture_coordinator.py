"""Capture Coordinator - clipboard → OCR → classification → candidate confirmation."""

import logging
from enum import Enum
from typing import List, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from snatch.core import (
    EmptyClipboardError,
    ExtractionError,
    SnatchError,
    VocabularyEntry,
    VocabularyStoreError,
    WordCandidate,
)
from snatch.io import ClipboardKind, ClipboardReader
from snatch.services import (
    CandidateClassifier,
    ExtractionResult,
    Granularity,
    TextExtractionWorker,
    TextExtractor,
    VocabularyService,
)

logger = logging.getLogger(__name__)


class CapturePipelineState(Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    CLASSIFYING = "classifying"
    REVIEWING_CANDIDATES = "reviewing_candidates"
    ERROR = "error"


_BUSY_STATES = (CapturePipelineState.EXTRACTING, CapturePipelineState.CLASSIFYING)


class CaptureCoordinator(QObject):
    """
    Drives one capture at a time through an explicit pipeline state.

    Responsibilities:
    - Read the clipboard on explicit paste
    - Run OCR on pasted images in the background
    - Classify text against the stored language pair
    - Save or discard candidates as the user confirms them
    """

    state_changed = Signal(object)  # CapturePipelineState
    candidates_ready = Signal(list)  # List[WordCandidate]
    error_occurred = Signal(str)
    entry_saved = Signal(object)  # VocabularyEntry

    def __init__(
        self,
        clipboard_reader: ClipboardReader,
        text_extractor: TextExtractor,
        classifier: CandidateClassifier,
        vocabulary_service: VocabularyService,
        thread_pool: Optional[QThreadPool] = None,
        run_inline: bool = False,
        granularity: Granularity = Granularity.SENTENCE,
    ):
        super().__init__()

        if clipboard_reader is None:
            raise ValueError("ClipboardReader must not be None")
        if text_extractor is None:
            raise ValueError("TextExtractor must not be None")
        if classifier is None:
            raise ValueError("CandidateClassifier must not be None")
        if vocabulary_service is None:
            raise ValueError("VocabularyService must not be None")

        self.clipboard_reader = clipboard_reader
        self.text_extractor = text_extractor
        self.classifier = classifier
        self.vocabulary_service = vocabulary_service
        self.thread_pool = thread_pool or QThreadPool.globalInstance()
        self.run_inline = run_inline
        self.granularity = granularity

        # Capture session state
        self.state = CapturePipelineState.IDLE
        self.source_text = ""
        self.candidates: List[WordCandidate] = []
        self.error_message: Optional[str] = None
        self._active_worker: Optional[TextExtractionWorker] = None

    @property
    def is_busy(self) -> bool:
        return self.state in _BUSY_STATES

    @Slot()
    def handle_paste(self):
        """Read the clipboard and start the pipeline for whatever it holds."""
        if self.is_busy:
            logger.debug("Paste ignored while %s", self.state.value)
            return

        content = self.clipboard_reader.read()
        if content.kind is ClipboardKind.IMAGE:
            self.process_image(content.image_bytes)
        elif content.kind is ClipboardKind.TEXT:
            self.process_text(content.text)
        else:
            self._fail(EmptyClipboardError())

    def process_image(self, image_bytes: bytes):
        """Extract text from an image, then classify it."""
        self._reset_capture()
        self._set_state(CapturePipelineState.EXTRACTING)

        worker = TextExtractionWorker(self.text_extractor, image_bytes)
        worker.signals.extraction_result.connect(self._handle_extraction_result)
        worker.signals.error.connect(self._handle_extraction_error)
        self._active_worker = worker

        if self.run_inline:
            worker.run()
        else:
            self.thread_pool.start(worker)

    def process_text(self, text: str):
        """Classify text against the current language pair and present candidates."""
        self._active_worker = None
        self._reset_capture()
        self._set_state(CapturePipelineState.CLASSIFYING)

        try:
            config = self.vocabulary_service.get_language_pair()
        except VocabularyStoreError as e:
            logger.warning("Language pair unavailable, using defaults: %s", e)
            config = None

        self.source_text = text
        self.candidates = self.classifier.classify_with_config(text, config, self.granularity)
        logger.info("Capture produced %d candidates", len(self.candidates))

        self._set_state(CapturePipelineState.REVIEWING_CANDIDATES)
        self.candidates_ready.emit(list(self.candidates))

    def cancel(self):
        """Abandon a pending extraction and return to idle."""
        if self._active_worker is not None:
            self._active_worker.cancel()
            self._active_worker = None
        if self.state is CapturePipelineState.EXTRACTING:
            self._set_state(CapturePipelineState.IDLE)

    def accept_candidate(self, index: int) -> Optional[VocabularyEntry]:
        """
        Save the candidate at index and drop it from the pending list.

        A store failure is reported through error_occurred and the candidate
        stays pending so the user can retry.

        Raises:
            IndexError: If no candidate exists at index.
        """
        candidate = self._candidate_at(index)
        try:
            entry = self.vocabulary_service.accept_candidate(candidate)
        except VocabularyStoreError as e:
            logger.warning("Saving candidate failed: %s", e)
            self.error_occurred.emit(f"Could not save word: {e}")
            return None

        del self.candidates[index]
        self.entry_saved.emit(entry)
        self.candidates_ready.emit(list(self.candidates))
        return entry

    def reject_candidate(self, index: int) -> WordCandidate:
        candidate = self._candidate_at(index)
        del self.candidates[index]
        self.candidates_ready.emit(list(self.candidates))
        return candidate

    def clear(self):
        """Discard the current capture and accept input again."""
        self.cancel()
        self._reset_capture()
        self._set_state(CapturePipelineState.IDLE)

    @Slot(object)
    def _handle_extraction_result(self, result: ExtractionResult):
        if self.state is not CapturePipelineState.EXTRACTING:
            return
        self._active_worker = None
        try:
            text = result.raise_for_error()
        except ExtractionError as e:
            self._fail(e)
            return
        self.process_text(text)

    @Slot(str)
    def _handle_extraction_error(self, message: str):
        if self.state is not CapturePipelineState.EXTRACTING:
            return
        self._active_worker = None
        self._fail(ExtractionError(message))

    def _candidate_at(self, index: int) -> WordCandidate:
        if not (0 <= index < len(self.candidates)):
            raise IndexError(f"No candidate at index {index}")
        return self.candidates[index]

    def _reset_capture(self):
        self.source_text = ""
        self.candidates = []
        self.error_message = None

    def _fail(self, error: SnatchError):
        logger.warning("Capture failed: %s", error)
        self._reset_capture()
        self.error_message = str(error)
        self._set_state(CapturePipelineState.ERROR)
        self.error_occurred.emit(self.error_message)

    def _set_state(self, state: CapturePipelineState):
        if state is self.state:
            return
        self.state = state
        self.state_changed.emit(state)
