"""Language Identifier - offline guesses of the language a text span is written in."""

import logging
import re
from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, FrozenSet, Optional

from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException

from snatch.core import UNDETERMINED, normalize_language_code

logger = logging.getLogger(__name__)


class LanguageIdentifier(ABC):
    """
    Abstract language identification capability.

    Implementations must be deterministic for identical input within a process,
    must never touch the network, and return "und" when unsure.
    """

    @abstractmethod
    def identify(self, text: str) -> str:
        """
        Guess the language of a text span.

        Args:
            text: Arbitrary text, possibly empty.

        Returns:
            A language code such as "en" or "ko", or "und".
        """
        pass


# Unicode blocks per script, checked in order.
_SCRIPT_RANGES = (
    ("hangul", 0xAC00, 0xD7AF),
    ("hangul", 0x1100, 0x11FF),
    ("hangul", 0x3130, 0x318F),
    ("kana", 0x3040, 0x309F),
    ("kana", 0x30A0, 0x30FF),
    ("kana", 0x31F0, 0x31FF),
    ("kana", 0xFF66, 0xFF9F),
    ("han", 0x4E00, 0x9FFF),
    ("han", 0x3400, 0x4DBF),
    ("han", 0xF900, 0xFAFF),
    ("cyrillic", 0x0400, 0x04FF),
    ("arabic", 0x0600, 0x06FF),
    ("arabic", 0x0750, 0x077F),
    ("hebrew", 0x0590, 0x05FF),
    ("greek", 0x0370, 0x03FF),
    ("thai", 0x0E00, 0x0E7F),
    ("devanagari", 0x0900, 0x097F),
    ("latin", 0x0041, 0x024F),
    ("latin", 0x1E00, 0x1EFF),
)

_SCRIPT_LANGUAGES = {
    "hangul": "ko",
    "japanese": "ja",
    "han": "zh",
    "cyrillic": "ru",
    "arabic": "ar",
    "hebrew": "he",
    "greek": "el",
    "thai": "th",
    "devanagari": "hi",
}

_LATIN_WORD = re.compile(r"[^\W\d_]+")


def script_of(char: str) -> Optional[str]:
    """Return the script name for a letter, or None for anything else."""
    if not char.isalpha():
        return None
    point = ord(char)
    for script, start, end in _SCRIPT_RANGES:
        if start <= point <= end:
            return script
    return None


def _profile(words: str) -> FrozenSet[str]:
    return frozenset(words.split())


# Frequent words per Latin-script language.
_LATIN_PROFILES: Dict[str, FrozenSet[str]] = {
    "en": _profile(
        "the an and or of to on at am is are was were be been it this that these those "
        "i you he she we they my your his her our their with for from by not do does "
        "did have has had will would can could should what which who when where why "
        "how there here hello hi world good thank thanks please yes very just about "
        "all some if but so me him them like know time people today"
    ),
    "fr": _profile(
        "le la les un une des du de et est sont je tu il elle nous vous ils elles ce "
        "cette ces que qui quoi pas ne pour avec dans sur mais ou où au aux mon ton son "
        "ma ta sa mes bonjour merci oui très être avoir suis bonsoir salut"
    ),
    "es": _profile(
        "el la los las un una unos y es son de del que en por para con no sí muy yo "
        "tú él ella nosotros ustedes pero como qué cómo está estoy hola gracias buenos "
        "días mi su al lo se"
    ),
    "de": _profile(
        "der die das und ist sind ich du er sie wir ihr nicht ein eine einen mit von "
        "zu auf für auch aber oder wie was wer hallo danke bitte ja nein sehr gut mein "
        "dein den dem des im es geht dir mir guten morgen"
    ),
    "it": _profile(
        "il lo la gli le un una e è di che per con non sono sei io tu lui lei noi voi "
        "loro ma come cosa ciao grazie molto bene questo quello del della nel alla"
    ),
    "pt": _profile(
        "o os a as um uma e é de do da dos das que em no na por para com não sim eu "
        "você ele ela nós eles mas como muito obrigado obrigada olá bom dia isso este esta"
    ),
    "nl": _profile(
        "de het een en is zijn ik jij je hij zij wij niet van met op voor dat die maar "
        "ook wat hoe hallo dank bedankt ja nee goed heel"
    ),
    "vi": _profile(
        "là của và không tôi bạn có được người này những các một cho với trong xin "
        "chào cảm ơn rất đã sẽ đang"
    ),
}

_LATIN_HINTS: Dict[str, Dict[str, int]] = {
    "ñ": {"es": 2},
    "¿": {"es": 2},
    "¡": {"es": 2},
    "ß": {"de": 2},
    "ä": {"de": 1},
    "ö": {"de": 1},
    "ü": {"de": 1},
    "œ": {"fr": 2},
    "ç": {"fr": 1, "pt": 1},
    "è": {"fr": 1},
    "ê": {"fr": 1},
    "â": {"fr": 1},
    "î": {"fr": 1},
    "û": {"fr": 1},
    "ù": {"fr": 1},
    "ë": {"fr": 1},
    "ï": {"fr": 1},
    "ã": {"pt": 2},
    "õ": {"pt": 2},
    "ò": {"it": 1},
    "ì": {"it": 1},
    "ư": {"vi": 2},
    "ơ": {"vi": 2},
    "đ": {"vi": 2},
    "ă": {"vi": 2},
}


class HeuristicLanguageIdentifier(LanguageIdentifier):
    """
    Script-based identifier with frequent-word scoring for Latin text.

    Non-Latin scripts map directly to a language (Hangul -> ko, any kana ->
    ja, Han without kana -> zh, ...). The dominant script by letter count
    wins, so a Korean sentence with one embedded English word stays "ko".
    Latin text is scored against small frequent-word profiles plus diacritic
    hints; when no language scores strictly highest the text is ambiguous and
    the optional fallback identifier decides.
    """

    def __init__(self, fallback: Optional[LanguageIdentifier] = None):
        self._fallback = fallback

    def identify(self, text: str) -> str:
        if not text or not text.strip():
            return UNDETERMINED

        scripts = Counter(s for s in map(script_of, text) if s is not None)
        if not scripts:
            return UNDETERMINED

        if scripts["kana"]:
            # Kanji inside Japanese text belongs to the Japanese run.
            scripts["japanese"] = scripts.pop("kana") + scripts.pop("han", 0)

        dominant = max(scripts.items(), key=lambda item: item[1])[0]
        if dominant != "latin":
            return _SCRIPT_LANGUAGES[dominant]

        return self._identify_latin(text)

    def _identify_latin(self, text: str) -> str:
        lowered = text.lower()
        scores: Counter = Counter()

        for word in _LATIN_WORD.findall(lowered):
            for language, profile in _LATIN_PROFILES.items():
                if word in profile:
                    scores[language] += 2

        for char in lowered:
            for language, weight in _LATIN_HINTS.get(char, {}).items():
                scores[language] += weight
            if 0x1EA0 <= ord(char) <= 0x1EF9:
                scores["vi"] += 2

        ranked = scores.most_common(2)
        if ranked and (len(ranked) == 1 or ranked[0][1] > ranked[1][1]):
            return ranked[0][0]

        if self._fallback is not None:
            guess = self._fallback.identify(text)
            logger.debug("Ambiguous Latin text %r resolved by fallback to %s", text[:40], guess)
            return guess
        return UNDETERMINED


class LangdetectLanguageIdentifier(LanguageIdentifier):
    """Identifier backed by the langdetect n-gram profiles.

    langdetect is randomized internally; the detector seed is pinned so the
    same text always yields the same answer.
    """

    def __init__(self, seed: int = 0):
        DetectorFactory.seed = seed

    def identify(self, text: str) -> str:
        if not text or not text.strip():
            return UNDETERMINED
        try:
            return normalize_language_code(detect(text))
        except LangDetectException:
            return UNDETERMINED
