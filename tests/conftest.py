"""Shared fixtures for the Snatch test suite."""

import os
from datetime import datetime, timezone

import pytest

# Qt objects are created without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtGui import QGuiApplication

from snatch.io import DatabaseManager
from snatch.services import CandidateClassifier, HeuristicLanguageIdentifier, Segmenter, VocabularyService


def ensure_qt_app():
    if QGuiApplication.instance() is None:
        QGuiApplication([])


@pytest.fixture
def qt_app():
    ensure_qt_app()
    return QGuiApplication.instance()


@pytest.fixture
def now():
    """A fixed reference time for scheduling tests."""
    return datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def db(tmp_path):
    """A fresh vocabulary database in a temp directory."""
    manager = DatabaseManager(tmp_path / "vocab.db")
    manager.ensure_schema()
    yield manager
    manager.close()


@pytest.fixture
def vocabulary_service(db):
    return VocabularyService(db)


@pytest.fixture
def segmenter():
    """Segmenter using the offline heuristic identifier with no fallback."""
    return Segmenter(HeuristicLanguageIdentifier())


@pytest.fixture
def classifier(segmenter):
    return CandidateClassifier(segmenter)
