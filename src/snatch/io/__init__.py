"""I/O layer - Vocabulary persistence and clipboard access."""

from .clipboard_reader import ClipboardContent, ClipboardKind, ClipboardReader, encode_png
from .database_manager import DatabaseManager

__all__ = ["DatabaseManager", "ClipboardReader", "ClipboardContent", "ClipboardKind", "encode_png"]
