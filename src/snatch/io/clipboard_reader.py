"""Clipboard capture adapter - reads text or screenshot bytes from the system clipboard."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PySide6.QtCore import QBuffer, QByteArray, QIODevice
from PySide6.QtGui import QClipboard, QGuiApplication, QImage


class ClipboardKind(Enum):
    TEXT = "text"
    IMAGE = "image"
    EMPTY = "empty"


@dataclass(frozen=True)
class ClipboardContent:
    """What was on the clipboard when the user pasted."""

    kind: ClipboardKind
    text: str = ""
    image_bytes: bytes = b""

    @classmethod
    def empty(cls) -> "ClipboardContent":
        return cls(kind=ClipboardKind.EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.kind is ClipboardKind.EMPTY


def encode_png(image: QImage) -> bytes:
    """Encode a QImage as PNG bytes.

    Raises:
        RuntimeError: if Qt fails to encode the image.
    """
    data = QByteArray()
    buffer = QBuffer(data)
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    try:
        if not image.save(buffer, "PNG"):
            raise RuntimeError("Failed to encode clipboard image as PNG")
    finally:
        buffer.close()
    return bytes(data.data())


class ClipboardReader:
    """
    Polls the clipboard on explicit user action.

    Images are checked first, since screenshots often carry a text
    representation as well; then non-empty text.
    """

    def __init__(self, clipboard: Optional[QClipboard] = None):
        self._clipboard = clipboard

    def read(self) -> ClipboardContent:
        clipboard = self._clipboard or QGuiApplication.clipboard()
        mime = clipboard.mimeData()

        if mime is not None and mime.hasImage():
            image = clipboard.image()
            if not image.isNull():
                return ClipboardContent(kind=ClipboardKind.IMAGE, image_bytes=encode_png(image))

        text = clipboard.text()
        if text:
            return ClipboardContent(kind=ClipboardKind.TEXT, text=text)

        return ClipboardContent.empty()
