# deinflector/core/engine/transformer.py
"""
core/engine/transformer.py

The language-agnostic deinflection search.

Given a descriptor and surface text, enumerate every form reachable by
repeatedly undoing rules. The search is breadth-first:

1. Seed with the untouched input (no conditions, empty trace). It is always
   part of the result, since the input may already be a dictionary form.
2. For each popped candidate, try every rule of every transform group. A
   rule applies when its `conditions_in` accept the candidate's conditions
   and its handler rewrites the text to something non-empty.
3. The new candidate carries the rule's `conditions_out` and the extended
   trace.
4. A `(text, conditions)` pair is produced at most once per search. This is
   the only termination guard: equal-length affix pairs ("in'" <-> "ing")
   make length useless as a measure, but the set of reachable pairs is
   finite.

There is no depth cutoff and no ranking: results come in discovery order.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Set, Tuple, FrozenSet

from ..domain.conditions import conditions_match
from ..domain.descriptor import LanguageDescriptor
from ..domain.models import DeinflectionCandidate
from ..domain.rules import register_rule_handler


def deinflect(descriptor: LanguageDescriptor, text: str) -> List[DeinflectionCandidate]:
    """
    Enumerate all candidates reachable from `text` under `descriptor`.

    Returns:
        Distinct candidates (by text and conditions) in discovery order,
        the identity candidate first.
    """
    seed = DeinflectionCandidate(text=text)
    results: List[DeinflectionCandidate] = [seed]
    seen: Set[Tuple[str, FrozenSet[str]]] = {(seed.text, seed.conditions)}
    queue: Deque[DeinflectionCandidate] = deque([seed])

    while queue:
        current = queue.popleft()
        current_cover = descriptor.expand(current.conditions)

        for rule in descriptor.compiled_rules:
            if not conditions_match(current_cover, rule.required):
                continue
            new_text = rule.apply(current.text)
            if not new_text:
                continue

            key = (new_text, rule.produced)
            if key in seen:
                continue
            seen.add(key)

            candidate = DeinflectionCandidate(
                text=new_text,
                conditions=rule.produced,
                trace=current.trace + (rule.step,),
            )
            results.append(candidate)
            queue.append(candidate)

    return results


def unique_texts(candidates: List[DeinflectionCandidate]) -> List[str]:
    """Distinct candidate strings, first occurrence wins."""
    seen: Set[str] = set()
    out: List[str] = []
    for candidate in candidates:
        if candidate.text not in seen:
            seen.add(candidate.text)
            out.append(candidate.text)
    return out


def deinflect_terms(descriptor: LanguageDescriptor, text: str) -> List[str]:
    """Distinct candidate strings for `text`, the input itself first."""
    return unique_texts(deinflect(descriptor, text))


__all__ = ["deinflect", "deinflect_terms", "unique_texts", "register_rule_handler"]
