"""Settings Manager - Handles storage paths, OCR and logging configuration."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from snatch.services.text_extraction import DEFAULT_OCR_LANGUAGES

LANGUAGE_FALLBACK_LANGDETECT = "langdetect"
LANGUAGE_FALLBACK_NONE = "none"


@dataclass(frozen=True)
class Settings:
    """Resolved application settings."""

    db_path: Path
    ocr_languages: str = DEFAULT_OCR_LANGUAGES
    tesseract_cmd: Optional[str] = None
    language_fallback: str = LANGUAGE_FALLBACK_LANGDETECT
    log_level: str = "INFO"


class SettingsManager:
    """
    Manages settings read from the environment.

    Values come from a .env file in the project root, overridden by the real
    environment. The language pair is not an env setting; it lives in the
    vocabulary database.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_db_path(self) -> Path:
        value = self._get("SNATCH_DB_PATH")
        if value:
            return Path(value).expanduser()
        return Path.home() / ".snatch" / "vocabulary.db"

    def get_ocr_languages(self) -> str:
        """Tesseract language packs, "+"-joined. Every pack listed must be installed."""
        return self._get("SNATCH_OCR_LANGUAGES") or DEFAULT_OCR_LANGUAGES

    def get_tesseract_cmd(self) -> Optional[str]:
        return self._get("SNATCH_TESSERACT_CMD")

    def get_language_fallback(self) -> str:
        """Which identifier settles ambiguous Latin text: "langdetect" or "none"."""
        value = (self._get("SNATCH_LANGUAGE_FALLBACK") or LANGUAGE_FALLBACK_LANGDETECT).lower()
        if value not in (LANGUAGE_FALLBACK_LANGDETECT, LANGUAGE_FALLBACK_NONE):
            raise ValueError(f"Unsupported SNATCH_LANGUAGE_FALLBACK: {value}")
        return value

    def get_log_level(self) -> str:
        return (self._get("SNATCH_LOG_LEVEL") or "INFO").upper()

    def load(self) -> Settings:
        return Settings(
            db_path=self.get_db_path(),
            ocr_languages=self.get_ocr_languages(),
            tesseract_cmd=self.get_tesseract_cmd(),
            language_fallback=self.get_language_fallback(),
            log_level=self.get_log_level(),
        )

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
