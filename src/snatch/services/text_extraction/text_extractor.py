"""Text Extractor - abstract OCR capability turning screenshots into text."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from snatch.core import ExtractionError


@dataclass
class ExtractionResult:
    """Result of a text extraction request."""

    text: str
    engine: str
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if extraction failed."""
        return self.error is not None

    def raise_for_error(self) -> str:
        """Return the text, or raise ExtractionError if extraction failed."""
        if self.error is not None:
            raise ExtractionError(self.error)
        return self.text


class TextExtractor(ABC):
    """
    Abstract on-device OCR service.

    Implementations must run offline and recognize several scripts in one image.
    """

    @abstractmethod
    def extract_text(self, image_bytes: bytes) -> ExtractionResult:
        """
        Recognize all text in an encoded image.

        Args:
            image_bytes: PNG/JPEG/TIFF bytes, e.g. a pasted screenshot.

        Returns:
            ExtractionResult with recognized lines joined by newlines, or an error message.
        """
        pass
