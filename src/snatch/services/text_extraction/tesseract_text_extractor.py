"""Tesseract-backed text extraction for pasted screenshots."""

import logging
from io import BytesIO
from typing import Optional

import pytesseract
from PIL import Image, UnidentifiedImageError

from snatch.services.text_extraction.text_extractor import ExtractionResult, TextExtractor

logger = logging.getLogger(__name__)

DEFAULT_OCR_LANGUAGES = "eng+kor+jpn+chi_sim+rus+ara+hin+tha+heb+ell"


class TesseractTextExtractor(TextExtractor):
    """Runs the local Tesseract binary through pytesseract.

    Several traineddata packs are combined ("eng+kor+...") so mixed-script
    screenshots come back in one pass. The default covers every script the
    language identifier maps to a language; a missing pack makes Tesseract
    fail, so narrow SNATCH_OCR_LANGUAGES to the installed ones.
    """

    ENGINE_NAME = "tesseract"
    INVALID_IMAGE_MESSAGE = "Could not process the image for text recognition."
    NO_TEXT_MESSAGE = "No text found in image."

    def __init__(self, languages: str = DEFAULT_OCR_LANGUAGES, tesseract_cmd: Optional[str] = None):
        self.languages = languages
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def extract_text(self, image_bytes: bytes) -> ExtractionResult:
        if not image_bytes:
            return self._failure(self.INVALID_IMAGE_MESSAGE)

        try:
            with Image.open(BytesIO(image_bytes)) as image:
                rgb = image.convert("RGB")
        except (UnidentifiedImageError, OSError) as e:
            logger.warning("Unreadable image passed to OCR: %s", e)
            return self._failure(self.INVALID_IMAGE_MESSAGE)

        try:
            raw = pytesseract.image_to_string(rgb, lang=self.languages)
        except pytesseract.TesseractNotFoundError:
            return self._failure("Tesseract is not installed or not on PATH.")
        except pytesseract.TesseractError as e:
            logger.warning("Tesseract failed: %s", e)
            return self._failure(f"Text recognition failed: {e.message}")

        lines = [line.strip() for line in raw.splitlines() if line.strip()]
        if not lines:
            return self._failure(self.NO_TEXT_MESSAGE)

        logger.info("OCR recognized %d lines", len(lines))
        return ExtractionResult(text="\n".join(lines), engine=self.ENGINE_NAME)

    def _failure(self, message: str) -> ExtractionResult:
        return ExtractionResult(text="", engine=self.ENGINE_NAME, error=message)
