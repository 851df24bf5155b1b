# deinflector/core/languages/english.py
"""
ENGLISH DEINFLECTION MODULE
---------------------------
Programmatic descriptor for English.

English inflection is regular enough to be generated rather than listed:

- Each inflection family (past, -ing, comparative, ...) is a handful of
  literal suffix pairs.
- Doubled final consonants ("stopped" -> "stop") are generated per family
  from a consonant alphabet.
- Phrasal-verb variants ("looked up" -> "look up") are derived from the
  plain verb suffix rules by retagging them.

Two structural rule kinds are contributed to the engine:

- `PhrasalSuffixRule`: undo a suffix on the first word of "verb particle".
- `PhrasalInterposedObjectRule`: drop the object of "verb OBJECT particle".
"""

from __future__ import annotations

import re
from functools import lru_cache
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from ..domain.conditions import condition
from ..domain.descriptor import LanguageDescriptor
from ..domain.rules import (
    RuleDefinition,
    StructuralRule,
    SuffixRule,
    TransformGroup,
    prefix_rule,
    suffix_rule,
    transform,
)
from ..domain.exceptions import InvalidRuleError
from ..engine.transformer import register_rule_handler
from ..ports.descriptor_source import IDescriptorSource
from .base import Deinflector, register_language


# ---------------------------------------------------------------------------
# Phrasal verb vocabulary
# ---------------------------------------------------------------------------

PHRASAL_VERB_PARTICLES = (
    "aboard", "about", "above", "across", "ahead", "alongside", "apart",
    "around", "aside", "astray", "away", "back", "before", "behind", "below",
    "beneath", "besides", "between", "beyond", "by", "close", "down", "east",
    "west", "north", "south", "eastward", "westward", "northward",
    "southward", "forward", "free", "home", "in", "inside", "instead",
    "loose", "low", "off", "on", "open", "out", "outside", "over",
    "overhead", "past", "round", "since", "through", "throughout",
    "together", "underneath", "up", "upon", "upside", "within", "without",
)

PHRASAL_VERB_PREPOSITIONS = (
    "aback", "about", "above", "across", "after", "against", "ahead",
    "along", "among", "apart", "around", "as", "aside", "at", "away", "back",
    "before", "behind", "below", "between", "beyond", "by", "down", "even",
    "for", "forth", "forward", "from", "in", "into", "of", "off", "on",
    "onto", "open", "out", "over", "past", "round", "through", "to",
    "together", "toward", "towards", "under", "up", "upon", "with",
    "without",
)


def _disjunction(words: Iterable[str]) -> str:
    # Longest first so "into" is tried before "in".
    return "|".join(re.escape(w) for w in sorted(set(words), key=lambda w: (-len(w), w)))


_PARTICLES = _disjunction(PHRASAL_VERB_PARTICLES)
_PHRASAL_WORDS = _disjunction(PHRASAL_VERB_PARTICLES + PHRASAL_VERB_PREPOSITIONS)

_INTERPOSED_OBJECT_RE = re.compile(
    rf"^(\w+) (?:(?!\b(?:{_PHRASAL_WORDS})\b).)+ (?=(?:{_PARTICLES})\b)"
)


# ---------------------------------------------------------------------------
# Structural rule kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PhrasalSuffixRule(StructuralRule):
    """
    Suffix rule applied to the verb of a phrasal verb.

    Matches when the first word ends with `inflected` and is directly
    followed by a particle or preposition.
    """

    inflected: str
    deinflected: str = ""

    def __post_init__(self) -> None:
        if not self.inflected:
            raise InvalidRuleError("phrasal suffix rule with an empty inflected suffix")

    @property
    def pattern(self) -> "re.Pattern[str]":
        return _phrasal_suffix_pattern(self.inflected)


@dataclass(frozen=True)
class PhrasalInterposedObjectRule(StructuralRule):
    """Removes an object placed between verb and particle ("take it off" -> "take off")."""


@lru_cache(maxsize=None)
def _phrasal_suffix_pattern(inflected: str) -> "re.Pattern[str]":
    return re.compile(rf"^(\w*){re.escape(inflected)}(?= (?:{_PHRASAL_WORDS})\b)")


@register_rule_handler(PhrasalSuffixRule)
def _apply_phrasal_suffix(kind: PhrasalSuffixRule, text: str) -> Optional[str]:
    match = kind.pattern.match(text)
    if match is None:
        return None
    return match.group(1) + kind.deinflected + text[match.end():]


@register_rule_handler(PhrasalInterposedObjectRule)
def _apply_interposed_object(kind: PhrasalInterposedObjectRule, text: str) -> Optional[str]:
    match = _INTERPOSED_OBJECT_RE.match(text)
    if match is None:
        return None
    return f"{match.group(1)} {text[match.end():]}"


# ---------------------------------------------------------------------------
# Rule generators
# ---------------------------------------------------------------------------


def doubled_consonant_inflection(
    consonants: str,
    suffix: str,
    conditions_in: Sequence[str],
    conditions_out: Sequence[str],
) -> List[RuleDefinition]:
    """One rule per consonant: "bbed" -> "b", "dded" -> "d", ..."""
    return [
        suffix_rule(f"{c}{c}{suffix}", c, conditions_in, conditions_out)
        for c in consonants
    ]


def phrasal_verb_inflections(rules: Iterable[RuleDefinition]) -> List[RuleDefinition]:
    """Retag every suffix rule as a phrasal-verb rule (v -> v_phr)."""
    return [
        RuleDefinition(
            kind=PhrasalSuffixRule(rule.kind.inflected, rule.kind.deinflected),
            conditions_in=("v",),
            conditions_out=("v_phr",),
        )
        for rule in rules
        if isinstance(rule.kind, SuffixRule)
    ]


def _with_phrasal(id: str, rules: List[RuleDefinition], description: str) -> TransformGroup:
    return transform(id, [*rules, *phrasal_verb_inflections(rules)], description)


# ---------------------------------------------------------------------------
# Descriptor
# ---------------------------------------------------------------------------


def build_descriptor() -> LanguageDescriptor:
    """Build the English descriptor."""
    conditions = [
        condition("v", "v_phr", description="Verb"),
        condition("v_phr", description="Phrasal verb"),
        condition("n", "np", "ns", description="Noun"),
        condition("np", description="Noun plural"),
        condition("ns", description="Noun singular"),
        condition("adj", description="Adjective"),
        condition("adv", description="Adverb"),
    ]

    past = [
        suffix_rule("ed", "", ["v"], ["v"]),
        suffix_rule("ed", "e", ["v"], ["v"]),
        suffix_rule("ied", "y", ["v"], ["v"]),
        suffix_rule("cked", "c", ["v"], ["v"]),
        *doubled_consonant_inflection("bdgklmnprstz", "ed", ["v"], ["v"]),
        suffix_rule("laid", "lay", ["v"], ["v"]),
        suffix_rule("paid", "pay", ["v"], ["v"]),
        suffix_rule("said", "say", ["v"], ["v"]),
    ]

    ing = [
        suffix_rule("ing", "", ["v"], ["v"]),
        suffix_rule("ing", "e", ["v"], ["v"]),
        suffix_rule("ying", "ie", ["v"], ["v"]),
        suffix_rule("cking", "c", ["v"], ["v"]),
        *doubled_consonant_inflection("bdgklmnprstz", "ing", ["v"], ["v"]),
    ]

    third_person = [
        suffix_rule("s", "", ["v"], ["v"]),
        suffix_rule("es", "", ["v"], ["v"]),
        suffix_rule("ies", "y", ["v"], ["v"]),
    ]

    transforms = [
        transform("plural", [
            suffix_rule("s", "", ["np"], ["ns"]),
            suffix_rule("es", "", ["np"], ["ns"]),
            suffix_rule("ies", "y", ["np"], ["ns"]),
            suffix_rule("ves", "fe", ["np"], ["ns"]),
            suffix_rule("ves", "f", ["np"], ["ns"]),
        ], "Plural noun"),
        transform("possessive", [
            suffix_rule("'s", "", ["n"], ["n"]),
            suffix_rule("s'", "s", ["n"], ["n"]),
        ], "Possessive"),
        _with_phrasal("past", past, "Simple past / past participle"),
        _with_phrasal("ing", ing, "Present participle"),
        _with_phrasal("3rd pers. sing. pres", third_person, "Third person singular present"),
        transform("interposed object", [
            RuleDefinition(
                kind=PhrasalInterposedObjectRule(),
                conditions_in=(),
                conditions_out=("v_phr",),
            ),
        ], "Phrasal verb with interposed object"),
        transform("archaic", [
            suffix_rule("'d", "ed", ["v"], ["v"]),
        ], "Archaic contracted past"),
        transform("adverb", [
            suffix_rule("ly", "", ["adv"], ["adj"]),
            suffix_rule("ily", "y", ["adv"], ["adj"]),
            suffix_rule("ly", "le", ["adv"], ["adj"]),
        ], "Adverb formed from adjective"),
        transform("comparative", [
            suffix_rule("er", "", ["adj"], ["adj"]),
            suffix_rule("er", "e", ["adj"], ["adj"]),
            suffix_rule("ier", "y", ["adj"], ["adj"]),
            *doubled_consonant_inflection("bdgmnt", "er", ["adj"], ["adj"]),
        ], "Comparative"),
        transform("superlative", [
            suffix_rule("est", "", ["adj"], ["adj"]),
            suffix_rule("est", "e", ["adj"], ["adj"]),
            suffix_rule("iest", "y", ["adj"], ["adj"]),
            *doubled_consonant_inflection("bdgmnt", "est", ["adj"], ["adj"]),
        ], "Superlative"),
        transform("dropped g", [
            suffix_rule("in'", "ing", ["v"], ["v"]),
        ], "Dropped g (-in')"),
        transform("-y", [
            suffix_rule("y", "", ["adj"], ["n", "v"]),
            suffix_rule("y", "e", ["adj"], ["n", "v"]),
            *doubled_consonant_inflection("glmnprst", "y", [], ["n", "v"]),
        ], "Adjective in -y"),
        transform("un-", [
            prefix_rule("un", "", ["adj", "adv", "v"], ["adj", "adv", "v"]),
        ], "Negative prefix un-"),
        transform("going-to future", [
            prefix_rule("going to ", "", ["v"], ["v"]),
        ], "Going-to future"),
        transform("will future", [
            prefix_rule("will ", "", ["v"], ["v"]),
        ], "Will future"),
        transform("imperative negative", [
            prefix_rule("don't ", "", ["v"], ["v"]),
            prefix_rule("do not ", "", ["v"], ["v"]),
        ], "Negated imperative"),
        transform("-able", [
            suffix_rule("able", "", ["v"], ["adj"]),
            suffix_rule("able", "e", ["v"], ["adj"]),
            suffix_rule("iable", "y", ["v"], ["adj"]),
            *doubled_consonant_inflection("bdgklmnprstz", "able", ["v"], ["adj"]),
        ], "Adjective in -able"),
    ]

    return LanguageDescriptor.build("en", conditions, transforms)


@register_language("en", "English")
def create_deinflector(source: IDescriptorSource) -> Deinflector:
    return Deinflector(build_descriptor())
