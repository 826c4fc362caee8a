"""Background worker running text extraction on Qt's thread pool."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from snatch.services.text_extraction.text_extractor import TextExtractor


class ExtractionSignals(QObject):
    """
    Signals for communicating results from the worker thread.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    extraction_result = Signal(object)  # ExtractionResult


class TextExtractionWorker(QRunnable):
    """
    Worker that runs OCR in a background thread.

    Emits extraction_result with the ExtractionResult (which may itself carry
    an error), or error if the extractor raised unexpectedly. After cancel()
    no result or error is emitted, only finished.
    """

    def __init__(self, extractor: TextExtractor, image_bytes: bytes):
        super().__init__()
        self.extractor = extractor
        self.image_bytes = image_bytes
        self.signals = ExtractionSignals()
        self._cancelled = False
        self.setAutoDelete(True)

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @Slot()
    def run(self):
        """Execute the extraction in the background thread."""
        try:
            result = self.extractor.extract_text(self.image_bytes)
            if not self._cancelled:
                self.signals.extraction_result.emit(result)
        except Exception as e:
            # Catch any unexpected exceptions not handled by the extractor
            if not self._cancelled:
                self.signals.error.emit(f"Unexpected text extraction error: {e}")
        finally:
            self.signals.finished.emit()
