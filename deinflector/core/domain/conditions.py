# deinflector/core/domain/conditions.py
"""
core/domain/conditions.py

Condition tags gate which rules may chain together.

A tag may *cover* other tags (its sub-conditions). Coverage is transitive:
"v" covering "v_phr" means a candidate tagged "v" also counts as "v_phr"
and vice versa when a rule asks for either one.

The empty condition set is unconstrained: an empty requirement matches every
candidate, and an empty candidate set (the untouched input) satisfies every
requirement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ConditionTag:
    """
    A single grammatical-class label.

    Attributes:
        name:
            Tag name as referenced by rules (e.g. "v", "np", "adj-i").
        sub_conditions:
            Names of narrower tags this tag covers.
        description:
            Optional human-readable label.
    """

    name: str
    sub_conditions: Tuple[str, ...] = ()
    description: Optional[str] = None


def condition(name: str, *sub_conditions: str, description: Optional[str] = None) -> ConditionTag:
    """Convenience constructor used by programmatic descriptors."""
    return ConditionTag(name=name, sub_conditions=tuple(sub_conditions), description=description)


def undefined_sub_conditions(conditions: Mapping[str, ConditionTag]) -> Dict[str, Tuple[str, ...]]:
    """Return {tag: missing sub-condition names} for every tag with dangling edges."""
    missing: Dict[str, Tuple[str, ...]] = {}
    for name, tag in conditions.items():
        dangling = tuple(sub for sub in tag.sub_conditions if sub not in conditions)
        if dangling:
            missing[name] = dangling
    return missing


def compute_coverage(conditions: Mapping[str, ConditionTag]) -> Dict[str, FrozenSet[str]]:
    """
    Compute, for every tag, the set of tags it covers (itself included).

    Sub-condition references must already be validated. A cycle in the
    coverage graph is tolerated: reachability is collected with a visited set.
    """
    coverage: Dict[str, FrozenSet[str]] = {}
    for name in conditions:
        reached = {name}
        stack = [name]
        while stack:
            current = stack.pop()
            for sub in conditions[current].sub_conditions:
                if sub not in reached:
                    reached.add(sub)
                    stack.append(sub)
        coverage[name] = frozenset(reached)
    return coverage


def expand(coverage: Mapping[str, FrozenSet[str]], tags: Iterable[str]) -> FrozenSet[str]:
    """Union of the coverage of every tag in `tags`."""
    out: set = set()
    for tag in tags:
        out |= coverage[tag]
    return frozenset(out)


def conditions_match(current: AbstractSet[str], required: AbstractSet[str]) -> bool:
    """
    True if a candidate with (expanded) tags `current` may feed a rule that
    requires (expanded) tags `required`.
    """
    if not required or not current:
        return True
    return not current.isdisjoint(required)


__all__ = [
    "ConditionTag",
    "condition",
    "undefined_sub_conditions",
    "compute_coverage",
    "expand",
    "conditions_match",
]
