# tests\core\test_hangul.py
import pytest

from deinflector.core.languages.hangul import (
    SYLLABLE_BASE,
    SYLLABLE_LAST,
    compose_syllable,
    decompose_syllable,
    disassemble,
    reassemble,
)


class TestDisassemble:
    def test_simple_syllables(self):
        assert disassemble("한글") == "ㅎㅏㄴㄱㅡㄹ"

    def test_compound_vowel_is_split(self):
        assert disassemble("과") == "ㄱㅗㅏ"
        assert disassemble("의") == "ㅇㅡㅣ"

    def test_compound_tail_is_split(self):
        assert disassemble("닭") == "ㄷㅏㄹㄱ"
        assert disassemble("값") == "ㄱㅏㅂㅅ"

    def test_non_hangul_passes_through(self):
        assert disassemble("abc 123!") == "abc 123!"
        assert disassemble("ㅋㅋ") == "ㅋㅋ"

    def test_idempotent(self):
        once = disassemble("먹었어요")
        assert disassemble(once) == once


class TestReassemble:
    def test_compound_vowel_is_merged(self):
        assert reassemble("ㄱㅗㅏ") == "과"

    def test_compound_tail_at_end(self):
        assert reassemble("ㄷㅏㄹㄱ") == "닭"

    def test_compound_tail_before_silent_lead(self):
        assert reassemble("ㄷㅏㄹㄱㅇㅣ") == "닭이"

    def test_tail_pair_split_when_next_letter_is_vowel(self):
        """
        Scenario: "ㄹㄱ" could form a compound tail, but "ㄱ" is followed by a vowel.
        Expected: Only "ㄹ" closes the first block; "ㄱ" leads the next one.
        """
        assert reassemble("ㄱㅏㄹㄱㅏ") == "갈가"

    def test_consonant_before_vowel_leads_next_block(self):
        assert reassemble("ㅁㅓㄱㅓ") == "머거"

    def test_stray_letters_are_kept(self):
        assert reassemble("ㅏㄱ") == "ㅏㄱ"
        assert reassemble("ㅋㅋ") == "ㅋㅋ"

    def test_non_hangul_passes_through(self):
        assert reassemble("abc ㅎㅏㄴ") == "abc 한"


class TestRoundTrip:
    def test_every_syllable(self):
        for code in range(SYLLABLE_BASE, SYLLABLE_LAST + 1):
            syllable = chr(code)
            assert reassemble(disassemble(syllable)) == syllable

    @pytest.mark.parametrize(
        "text",
        ["한글이다", "먹었어요", "닭이 울었다", "값어치", "괜찮아요", "읽고 싶다", "Hello 세계"],
    )
    def test_text(self, text):
        assert reassemble(disassemble(text)) == text

    def test_compose_inverts_decompose(self):
        assert compose_syllable(*decompose_syllable("활")) == "활"
        assert decompose_syllable("가") == ("ㄱ", "ㅏ", "")
