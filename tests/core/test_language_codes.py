"""Unit tests for language code normalization."""

import pytest

from snatch.core import UNDETERMINED, normalize_language_code


class TestNormalizeLanguageCode:
    """Tests for normalize_language_code function."""

    @pytest.mark.parametrize(
        "code, expected",
        [
            ("en", "en"),
            ("en-US", "en"),
            ("en_GB", "en"),
            ("zh-Hans", "zh"),
            ("zh-Hant-TW", "zh"),
            ("KO", "ko"),
            ("  ja  ", "ja"),
            ("pt-BR", "pt"),
        ],
    )
    def test_drops_region_and_script_subtags(self, code, expected):
        assert normalize_language_code(code) == expected

    def test_und_stays_und(self):
        assert normalize_language_code("und") == UNDETERMINED

    def test_blank_and_none_are_undetermined(self):
        assert normalize_language_code("") == UNDETERMINED
        assert normalize_language_code("   ") == UNDETERMINED
        assert normalize_language_code(None) == UNDETERMINED

    def test_leading_separator_is_undetermined(self):
        assert normalize_language_code("-US") == UNDETERMINED

    @pytest.mark.parametrize("code", ["x", "x-US", "e_GB", " q "])
    def test_single_letter_primary_is_undetermined(self, code):
        assert normalize_language_code(code) == UNDETERMINED

    @pytest.mark.parametrize(
        "code",
        ["en", "en-US", "zh-Hans", "und", "", "KO", "fil", "x", "sr_Latn_RS", "-"],
    )
    def test_idempotent(self, code):
        once = normalize_language_code(code)
        assert normalize_language_code(once) == once

    @pytest.mark.parametrize("code", ["en-US", "zh-Hans", "fil", "ko", "und", "x", "x-US", ""])
    def test_result_is_two_letters_or_und(self, code):
        result = normalize_language_code(code)
        assert result == UNDETERMINED or len(result) == 2
