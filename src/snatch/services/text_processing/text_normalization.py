"""Canonical form for captured fragments and the queries that search them."""

import re
import unicodedata

# Zero-width spaces and BOMs copied along with text from web pages and PDFs.
# Joiners (U+200C, U+200D) are kept; scripts and emoji depend on them.
_INVISIBLE = re.compile("[\u200b\u2060\ufeff]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Bring text into the form it is stored and searched in.

    Hangul and accented Latin letters are composed (NFC), so a word pasted
    from a decomposed source still matches the same word typed by hand.
    Zero-width characters are removed and whitespace runs of any kind
    (tabs, line breaks, full-width spaces) become one space.

    Both saved entries and search queries go through this function; a query
    only matches when it has the same canonical form as the stored text.
    """
    text = unicodedata.normalize("NFC", text)
    text = _INVISIBLE.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()
