"""Segmenter - splits captured text into language-tagged sentence or word spans."""

import logging
import re
import unicodedata
from typing import Iterator, List, Optional, Tuple

from snatch.core import Segment

from .language_identifier import LanguageIdentifier, script_of

logger = logging.getLogger(__name__)

_BOUNDARY = re.compile(
    r"(?P<latin>[.!?…]+[\"'’”)\]»]*)(?=\s|$)"
    r"|(?P<full>[。！？।॥؟۔]+[\"'’”」』）)]*)"
    r"|(?P<newline>\r?\n)"
)

_ABBREVIATIONS = frozenset(
    {"mr.", "mrs.", "ms.", "dr.", "prof.", "st.", "vs.", "etc.", "e.g.", "i.e.", "no.", "jr.", "sr."}
)

_WORD_JOINERS = frozenset("'’-")

# Kanji and kana share one word run so "食べる" is not cut in half.
_RUN_KEYS = {"kana": "cjk", "han": "cjk"}

_NON_SPACE = re.compile(r"\S+")

# Scripts written without spaces between words or sentence punctuation; a
# change into or out of them always ends a span.
_UNPUNCTUATED_SCRIPTS = frozenset({"thai"})

# Fewer words than this in a script run count as embedded foreign words.
_MIN_RUN_WORDS = 2


class Segmenter:
    """
    Produces ordered, non-overlapping spans of input text, each tagged with a language.

    Sentence granularity is the default: a span ends at terminal punctuation
    followed by whitespace, at full-width CJK, Devanagari or Arabic
    terminators, or at a line break. Inside a sentence, a span also ends where
    the writing script changes and both sides run for at least two words, or
    where Thai meets another script. A sentence that only embeds a foreign
    word or two keeps one span and one tag.
    Word granularity (extract_words) is an alternative view and is never
    merged with sentence results.
    """

    def __init__(self, identifier: LanguageIdentifier):
        self._identifier = identifier

    def segment(self, text: str) -> List[Segment]:
        """
        Split text at sentence-like boundaries and tag every span.

        Args:
            text: Raw captured text.

        Returns:
            Segments in their original left-to-right order. Spans are trimmed
            and blank spans are dropped.
        """
        if not text:
            return []

        segments = [
            self._tagged(text, run_start, run_end)
            for start, end in self._sentence_bounds(text)
            for run_start, run_end in self._script_run_bounds(text, start, end)
        ]
        segments = [segment for segment in segments if segment is not None]
        logger.debug("Segmented %d chars into %d sentences", len(text), len(segments))
        return segments

    def extract_words(self, text: str) -> List[Segment]:
        """
        Split text into single-script word runs and tag each one independently.

        Words of a single character are skipped.
        """
        if not text:
            return []

        words = []
        for start, end in self._word_bounds(text):
            if end - start <= 1:
                continue
            segment = self._tagged(text, start, end)
            if segment is not None:
                words.append(segment)
        return words

    def _tagged(self, text: str, start: int, end: int) -> Optional[Segment]:
        raw = text[start:end]
        stripped = raw.strip()
        if not stripped:
            return None
        offset = start + (len(raw) - len(raw.lstrip()))
        return Segment(
            text=stripped,
            language_code=self._identifier.identify(stripped),
            start_offset=offset,
            end_offset=offset + len(stripped),
        )

    def _sentence_bounds(self, text: str) -> Iterator[Tuple[int, int]]:
        start = 0
        for match in _BOUNDARY.finditer(text):
            if match.group("latin") == "." and self._ends_with_abbreviation(text[start:match.end()]):
                continue
            yield start, match.end()
            start = match.end()
        if start < len(text):
            yield start, len(text)

    def _script_run_bounds(self, text: str, start: int, end: int) -> Iterator[Tuple[int, int]]:
        # Each run is [start, end, script key, words in that script].
        runs = []
        for match in _NON_SPACE.finditer(text, start, end):
            key = self._word_script(match.group())
            if runs and (key is None or runs[-1][2] in (None, key)):
                run = runs[-1]
                run[1] = match.end()
                if key is not None:
                    run[2] = key
                    run[3] += 1
            else:
                runs.append([match.start(), match.end(), key, int(key is not None)])

        merged = []
        for run in runs:
            if merged and not self._splits_between(merged[-1], run):
                merged[-1][1] = run[1]
                merged[-1][3] += run[3]
            else:
                merged.append(run)

        for run_start, run_end, _, _ in merged:
            yield run_start, run_end

    @staticmethod
    def _word_script(word: str) -> Optional[str]:
        """Script key shared by every letter of word; None for mixed or letterless words."""
        keys = {_RUN_KEYS.get(script, script) for script in map(script_of, word) if script is not None}
        return keys.pop() if len(keys) == 1 else None

    @staticmethod
    def _splits_between(left: list, right: list) -> bool:
        if left[2] == right[2]:
            return False
        if _UNPUNCTUATED_SCRIPTS & {left[2], right[2]}:
            return True
        return left[3] >= _MIN_RUN_WORDS and right[3] >= _MIN_RUN_WORDS

    @staticmethod
    def _ends_with_abbreviation(sentence: str) -> bool:
        words = sentence.split()
        return bool(words) and words[-1].lower() in _ABBREVIATIONS

    @staticmethod
    def _word_bounds(text: str) -> Iterator[Tuple[int, int]]:
        run_key = None
        run_start = 0
        index = 0
        while index < len(text):
            char = text[index]
            script = script_of(char)
            key = _RUN_KEYS.get(script, script)

            if key is not None and key == run_key:
                index += 1
                continue

            if run_key is not None:
                if unicodedata.category(char).startswith("M"):
                    index += 1
                    continue
                if (
                    run_key == "latin"
                    and char in _WORD_JOINERS
                    and index + 1 < len(text)
                    and script_of(text[index + 1]) == "latin"
                ):
                    index += 1
                    continue
                yield run_start, index

            run_key = key
            run_start = index
            index += 1

        if run_key is not None:
            yield run_start, len(text)
