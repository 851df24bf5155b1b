# tests\core\test_korean.py
import pytest

from deinflector.core.languages import KoreanDeinflector, get_language_spec
from deinflector.core.languages.hangul import disassemble, reassemble


@pytest.fixture(scope="module")
def korean(table_source):
    return get_language_spec("ko").factory(table_source)


def test_factory_builds_korean_deinflector(korean):
    assert isinstance(korean, KoreanDeinflector)
    assert korean.language == "ko"


def test_table_affixes_are_decomposed_on_load(korean):
    copula = korean.descriptor.transform("copula").rules[0]
    assert copula.kind.inflected == disassemble("이다")


@pytest.mark.parametrize(
    "surface, lemma",
    [
        ("한글이다", "한글"),
        ("먹었다", "먹다"),
        ("먹었어요", "먹다"),
        ("먹습니다", "먹다"),
        ("갑니다", "가다"),
        ("갔다", "가다"),
        ("왔어요", "오다"),
        ("마셨다", "마시다"),
        ("공부했다", "공부하다"),
        ("먹지 않았다", "먹다"),
        ("먹고", "먹다"),
        ("책을", "책"),
        ("학생입니다", "학생"),
    ],
)
def test_lemma_is_reachable(korean, surface, lemma):
    assert lemma in korean.deinflect(surface)


def test_input_is_first_and_unchanged(korean):
    keys = korean.deinflect("한글이다")
    assert keys[0] == "한글이다"
    assert len(keys) == len(set(keys))


def test_candidates_are_recomposed(korean):
    texts = [c.text for c in korean.candidates("먹었어요")]
    assert "먹다" in texts
    assert disassemble("먹다") not in texts


def test_unmatched_text_returns_input_only(korean):
    assert korean.deinflect("abc") == ["abc"]


@pytest.mark.parametrize("surface", ["한글이다", "먹었다"])
def test_results_round_trip(korean, surface):
    for key in korean.deinflect(surface):
        assert reassemble(disassemble(key)) == key
