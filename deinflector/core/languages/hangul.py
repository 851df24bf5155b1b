# deinflector/core/languages/hangul.py
"""
HANGUL LETTER CODEC
-------------------
Converts between precomposed Hangul syllables and decomposed letters
(compatibility jamo), so that Korean rule tables can be written over
letters while text arrives as syllable blocks.

Uses Unicode Hangul Syllables arithmetic:
- Range: AC00-D7A3
- index = code - 0xAC00
- lead = index // (21 * 28), vowel = (index // 28) % 21, tail = index % 28

Compound vowels (e.g. ㅘ) and compound tails (e.g. ㄺ) are split into their
two simple letters on disassembly and recombined on reassembly. Characters
outside the syllable block pass through unchanged in both directions.
"""

from typing import Dict, List, Optional, Tuple

SYLLABLE_BASE = 0xAC00
SYLLABLE_LAST = 0xD7A3
VOWEL_COUNT = 21
TAIL_COUNT = 28

LEADS = "ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ"
VOWELS = "ㅏㅐㅑㅒㅓㅔㅕㅖㅗㅘㅙㅚㅛㅜㅝㅞㅟㅠㅡㅢㅣ"
# Index 0 is "no tail".
TAILS = "\0ㄱㄲㄳㄴㄵㄶㄷㄹㄺㄻㄼㄽㄾㄿㅀㅁㅂㅄㅅㅆㅇㅈㅊㅋㅌㅍㅎ"

COMPOUND_VOWELS: Dict[str, Tuple[str, str]] = {
    "ㅘ": ("ㅗ", "ㅏ"),
    "ㅙ": ("ㅗ", "ㅐ"),
    "ㅚ": ("ㅗ", "ㅣ"),
    "ㅝ": ("ㅜ", "ㅓ"),
    "ㅞ": ("ㅜ", "ㅔ"),
    "ㅟ": ("ㅜ", "ㅣ"),
    "ㅢ": ("ㅡ", "ㅣ"),
}

COMPOUND_TAILS: Dict[str, Tuple[str, str]] = {
    "ㄳ": ("ㄱ", "ㅅ"),
    "ㄵ": ("ㄴ", "ㅈ"),
    "ㄶ": ("ㄴ", "ㅎ"),
    "ㄺ": ("ㄹ", "ㄱ"),
    "ㄻ": ("ㄹ", "ㅁ"),
    "ㄼ": ("ㄹ", "ㅂ"),
    "ㄽ": ("ㄹ", "ㅅ"),
    "ㄾ": ("ㄹ", "ㅌ"),
    "ㄿ": ("ㄹ", "ㅍ"),
    "ㅀ": ("ㄹ", "ㅎ"),
    "ㅄ": ("ㅂ", "ㅅ"),
}

_VOWEL_PAIRS = {pair: combined for combined, pair in COMPOUND_VOWELS.items()}
_TAIL_PAIRS = {pair: combined for combined, pair in COMPOUND_TAILS.items()}

_LEAD_INDEX = {ch: i for i, ch in enumerate(LEADS)}
_VOWEL_INDEX = {ch: i for i, ch in enumerate(VOWELS)}
_TAIL_INDEX = {ch: i for i, ch in enumerate(TAILS) if i > 0}


def is_syllable(ch: str) -> bool:
    return SYLLABLE_BASE <= ord(ch) <= SYLLABLE_LAST


def is_lead(ch: str) -> bool:
    return ch in _LEAD_INDEX


def is_vowel(ch: str) -> bool:
    return ch in _VOWEL_INDEX


def is_tail(ch: str) -> bool:
    return ch in _TAIL_INDEX


def decompose_syllable(ch: str) -> Tuple[str, str, str]:
    """
    Split one precomposed syllable into (lead, vowel, tail) letters.
    `tail` is "" when the syllable has no final consonant.
    """
    index = ord(ch) - SYLLABLE_BASE
    lead = LEADS[index // (VOWEL_COUNT * TAIL_COUNT)]
    vowel = VOWELS[(index // TAIL_COUNT) % VOWEL_COUNT]
    tail_index = index % TAIL_COUNT
    return lead, vowel, TAILS[tail_index] if tail_index else ""


def compose_syllable(lead: str, vowel: str, tail: str = "") -> str:
    index = (
        _LEAD_INDEX[lead] * VOWEL_COUNT * TAIL_COUNT
        + _VOWEL_INDEX[vowel] * TAIL_COUNT
        + (_TAIL_INDEX[tail] if tail else 0)
    )
    return chr(SYLLABLE_BASE + index)


def disassemble(text: str) -> str:
    """
    Decompose every Hangul syllable of `text` into simple letters.

    >>> disassemble("과")
    'ㄱㅗㅏ'
    """
    out: List[str] = []
    for ch in text:
        if not is_syllable(ch):
            out.append(ch)
            continue
        lead, vowel, tail = decompose_syllable(ch)
        out.append(lead)
        out.extend(COMPOUND_VOWELS.get(vowel, (vowel,)))
        if tail:
            out.extend(COMPOUND_TAILS.get(tail, (tail,)))
    return "".join(out)


def _vowel_at(chars: str, i: int) -> bool:
    return i < len(chars) and is_vowel(chars[i])


def _take_tail(chars: str, i: int) -> Tuple[Optional[str], int]:
    """
    Decide the tail of the block whose vowel ended right before `i`.

    A consonant is a tail only if the letter after it is not a vowel;
    otherwise it leads the next block. A compound tail is taken only if the
    letter after the pair is not a vowel, else only its first letter is
    considered.

    Returns (tail letter or None, letters consumed).
    """
    if i >= len(chars) or not is_tail(chars[i]):
        return None, 0

    first = chars[i]
    if i + 1 < len(chars):
        combined = _TAIL_PAIRS.get((first, chars[i + 1]))
        if combined is not None and not _vowel_at(chars, i + 2):
            return combined, 2

    if _vowel_at(chars, i + 1):
        return None, 0
    return first, 1


def reassemble(text: str) -> str:
    """
    Recompose letters into syllable blocks.

    Letters that cannot start a block (no lead consonant, or a lead not
    followed by a vowel) are emitted unchanged.

    >>> reassemble("ㄱㅗㅏ")
    '과'
    """
    out: List[str] = []
    i = 0
    n = len(text)

    while i < n:
        lead = text[i]
        if not (is_lead(lead) and _vowel_at(text, i + 1)):
            out.append(lead)
            i += 1
            continue

        vowel = text[i + 1]
        consumed = 2
        if _vowel_at(text, i + 2):
            combined = _VOWEL_PAIRS.get((vowel, text[i + 2]))
            if combined is not None:
                vowel = combined
                consumed = 3

        tail, tail_len = _take_tail(text, i + consumed)
        out.append(compose_syllable(lead, vowel, tail or ""))
        i += consumed + tail_len

    return "".join(out)


__all__ = [
    "disassemble",
    "reassemble",
    "decompose_syllable",
    "compose_syllable",
    "is_syllable",
    "is_lead",
    "is_vowel",
    "is_tail",
]
