"""LanguagePairConfig entity - the user's native and learning languages."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .language_codes import DEFAULT_LEARNING_CODE, DEFAULT_NATIVE_CODE


@dataclass(frozen=True)
class LanguagePairConfig:
    """Which language the user already knows and which one they are learning."""

    native_code: str = DEFAULT_NATIVE_CODE
    learning_code: str = DEFAULT_LEARNING_CODE
    updated_at: Optional[datetime] = None

    @classmethod
    def defaults(cls) -> "LanguagePairConfig":
        return cls()
