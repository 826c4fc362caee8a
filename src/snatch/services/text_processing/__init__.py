"""Text processing services - whitespace normalization."""

from snatch.services.text_processing.text_normalization import normalize_text

__all__ = [
    "normalize_text",
]
