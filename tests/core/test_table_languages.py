# tests\core\test_table_languages.py
import pytest

from deinflector.core.languages import Deinflector, get_language_spec


@pytest.fixture(scope="module")
def japanese(table_source):
    return get_language_spec("ja").factory(table_source)


@pytest.fixture(scope="module")
def spanish(table_source):
    return get_language_spec("es").factory(table_source)


class TestJapanese:
    def test_is_table_driven(self, japanese):
        assert type(japanese) is Deinflector
        assert japanese.language == "ja"

    @pytest.mark.parametrize(
        "surface, lemma",
        [
            ("食べました", "食べる"),
            ("食べなかった", "食べる"),
            ("食べません", "食べる"),
            ("食べませんでした", "食べる"),
            ("書いた", "書く"),
            ("書きます", "書く"),
            ("行った", "行く"),
            ("読んでいる", "読む"),
            ("読まない", "読む"),
            ("飲みたい", "飲む"),
            ("高かった", "高い"),
            ("高くない", "高い"),
            ("来た", "来る"),
            ("勉強した", "勉強する"),
            ("食べれば", "食べる"),
            ("食べたら", "食べる"),
            ("食べさせる", "食べる"),
            ("食べよう", "食べる"),
            ("話しちゃう", "話す"),
        ],
    )
    def test_lemma_is_reachable(self, japanese, surface, lemma):
        assert lemma in japanese.deinflect(surface)

    def test_negative_past_goes_through_adjective_form(self, japanese):
        by_text = {c.text: c for c in japanese.candidates("食べなかった")}
        assert by_text["食べない"].conditions == frozenset({"adj-i"})
        assert [s.transform for s in by_text["食べる"].trace] == ["past", "negative"]


class TestSpanish:
    @pytest.mark.parametrize(
        "surface, lemma",
        [
            ("hablé", "hablar"),
            ("gatos", "gato"),
            ("hablamos", "hablar"),
            ("hablaba", "hablar"),
            ("hablaría", "hablar"),
            ("hablaremos", "hablar"),
            ("hablando", "hablar"),
            ("comiendo", "comer"),
            ("vivieron", "vivir"),
            ("luces", "luz"),
            ("canciones", "canción"),
            ("levantarse", "levantar"),
        ],
    )
    def test_lemma_is_reachable(self, spanish, surface, lemma):
        assert lemma in spanish.deinflect(surface)

    def test_singular_is_not_pluralized_again(self, spanish):
        for candidate in spanish.candidates("meses"):
            transforms = [step.transform for step in candidate.trace]
            assert transforms.count("plural") <= 1
