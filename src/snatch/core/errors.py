"""Error taxonomy for capture, extraction and persistence failures."""


class SnatchError(Exception):
    """Base class for recoverable application errors."""


class ExtractionError(SnatchError):
    """The text extractor could not turn an image into text."""


class EmptyClipboardError(SnatchError):
    """The clipboard held neither text nor an image."""

    def __init__(self, message: str = "Clipboard is empty"):
        super().__init__(message)


class VocabularyStoreError(SnatchError):
    """The vocabulary store could not complete a read or write.

    Raised instead of the underlying sqlite3 error so callers can tell
    persistence failures apart from classification or extraction problems.
    """


class EntryNotFoundError(VocabularyStoreError):
    """The entry was deleted from the store; retrying cannot succeed."""
