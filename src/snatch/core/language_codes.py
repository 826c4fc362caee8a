"""Language code constants and normalization to primary two-letter subtags."""

import re
from typing import Optional

UNDETERMINED = "und"
"""Sentinel code for text whose language could not be identified."""

DEFAULT_NATIVE_CODE = "ko"
DEFAULT_LEARNING_CODE = "en"

_SUBTAG_SEPARATOR = re.compile(r"[-_]")


def normalize_language_code(code: Optional[str]) -> str:
    """
    Reduce a language tag to its primary two-letter identifier.

    Region and script subtags are dropped ("zh-Hans" -> "zh", "en_US" -> "en").
    Blank input, primary subtags shorter than two letters and the "und"
    sentinel all normalize to "und". Applying the function twice gives the
    same result as applying it once.

    Args:
        code: A BCP-47 style tag, a bare code, or None.

    Returns:
        Lowercase primary code truncated to two characters, or "und".
    """
    if code is None:
        return UNDETERMINED
    primary = _SUBTAG_SEPARATOR.split(code.strip().lower(), maxsplit=1)[0]
    if len(primary) < 2 or primary == UNDETERMINED:
        return UNDETERMINED
    return primary[:2]
