from unittest.mock import MagicMock

import pytest
from PySide6.QtGui import QColor, QImage

from snatch.io import ClipboardContent, ClipboardKind, ClipboardReader, encode_png

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

pytestmark = pytest.mark.usefixtures("qt_app")


def make_image(width=8, height=4):
    image = QImage(width, height, QImage.Format.Format_RGB32)
    image.fill(QColor("white"))
    return image


def fake_clipboard(text="", image=None):
    clipboard = MagicMock()
    mime = MagicMock()
    mime.hasImage.return_value = image is not None
    clipboard.mimeData.return_value = mime
    clipboard.image.return_value = image if image is not None else QImage()
    clipboard.text.return_value = text
    return clipboard


def test_encode_png_produces_png_bytes():
    data = encode_png(make_image())
    assert data.startswith(PNG_SIGNATURE)


def test_reads_text():
    content = ClipboardReader(fake_clipboard(text="Hello world. 안녕하세요.")).read()

    assert content.kind is ClipboardKind.TEXT
    assert content.text == "Hello world. 안녕하세요."
    assert content.image_bytes == b""


def test_reads_image_as_png():
    content = ClipboardReader(fake_clipboard(image=make_image())).read()

    assert content.kind is ClipboardKind.IMAGE
    assert content.image_bytes.startswith(PNG_SIGNATURE)


def test_image_preferred_over_text():
    content = ClipboardReader(fake_clipboard(text="file.png", image=make_image())).read()
    assert content.kind is ClipboardKind.IMAGE


def test_null_image_falls_back_to_text():
    clipboard = fake_clipboard(text="caption")
    clipboard.mimeData.return_value.hasImage.return_value = True

    content = ClipboardReader(clipboard).read()

    assert content.kind is ClipboardKind.TEXT


def test_empty_clipboard():
    content = ClipboardReader(fake_clipboard()).read()

    assert content.is_empty
    assert content == ClipboardContent.empty()


def test_missing_mime_data_reads_text():
    clipboard = fake_clipboard(text="plain")
    clipboard.mimeData.return_value = None

    assert ClipboardReader(clipboard).read().text == "plain"
