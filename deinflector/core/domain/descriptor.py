# deinflector/core/domain/descriptor.py
"""
core/domain/descriptor.py

The per-language descriptor: conditions plus ordered transform groups.

A descriptor is built once (by a programmatic builder or from a static
table) and is read-only afterwards. Building validates every reference and
precomputes what the engine needs per rule:

- the expanded requirement set of `conditions_in`,
- the replacement tag set `conditions_out`,
- the handler for the rule's variant.

Any validation problem raises a `DescriptorBuildError` subclass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Tuple

from .conditions import ConditionTag, compute_coverage, expand, undefined_sub_conditions
from .exceptions import InvalidRuleError, UnknownConditionError
from .models import TraceStep
from .rules import RuleDefinition, RuleHandler, TransformGroup, handler_for


@dataclass(frozen=True)
class CompiledRule:
    """A rule resolved against its descriptor, ready for the engine."""

    step: TraceStep
    rule: RuleDefinition
    handler: RuleHandler
    required: FrozenSet[str]
    produced: FrozenSet[str]

    def apply(self, text: str) -> Optional[str]:
        return self.handler(self.rule.kind, text)


@dataclass(frozen=True)
class LanguageDescriptor:
    """
    Immutable description of one language's inflectional grammar.

    Use `LanguageDescriptor.build(...)`; the constructor does not validate.
    """

    language: str
    conditions: Mapping[str, ConditionTag]
    transforms: Tuple[TransformGroup, ...]
    coverage: Mapping[str, FrozenSet[str]] = field(repr=False, compare=False)
    compiled_rules: Tuple[CompiledRule, ...] = field(repr=False, compare=False)

    @classmethod
    def build(
        cls,
        language: str,
        conditions: Iterable[ConditionTag],
        transforms: Iterable[TransformGroup],
    ) -> "LanguageDescriptor":
        """
        Validate and freeze a descriptor.

        Raises:
            UnknownConditionError: a rule or sub-condition names an undefined tag.
            InvalidRuleError: duplicate tag/transform ids or a rule kind without handler.
        """
        cond_map = {}
        for tag in conditions:
            if tag.name in cond_map:
                raise InvalidRuleError(f"duplicate condition '{tag.name}' in '{language}'")
            cond_map[tag.name] = tag

        dangling = undefined_sub_conditions(cond_map)
        if dangling:
            owner = sorted(dangling)[0]
            raise UnknownConditionError(language, dangling[owner], f"condition '{owner}'")

        coverage = compute_coverage(cond_map)
        groups = tuple(transforms)

        seen_ids = set()
        compiled = []
        for group in groups:
            if group.id in seen_ids:
                raise InvalidRuleError(f"duplicate transform id '{group.id}' in '{language}'")
            seen_ids.add(group.id)

            for index, rule in enumerate(group.rules):
                where = f"transform '{group.id}' rule #{index}"
                missing = [t for t in (*rule.conditions_in, *rule.conditions_out) if t not in cond_map]
                if missing:
                    raise UnknownConditionError(language, missing, where)
                compiled.append(
                    CompiledRule(
                        step=TraceStep(transform=group.id, rule_index=index),
                        rule=rule,
                        handler=handler_for(rule.kind),
                        required=expand(coverage, rule.conditions_in),
                        produced=frozenset(rule.conditions_out),
                    )
                )

        return cls(
            language=language,
            conditions=MappingProxyType(cond_map),
            transforms=groups,
            coverage=MappingProxyType(coverage),
            compiled_rules=tuple(compiled),
        )

    def expand(self, tags: Iterable[str]) -> FrozenSet[str]:
        """Expand tags by transitive coverage."""
        return expand(self.coverage, tags)

    def transform(self, transform_id: str) -> TransformGroup:
        for group in self.transforms:
            if group.id == transform_id:
                return group
        raise KeyError(transform_id)

    def rule(self, step: TraceStep) -> RuleDefinition:
        """Resolve a trace step back to its rule definition."""
        return self.transform(step.transform).rules[step.rule_index]

    @property
    def rule_count(self) -> int:
        return len(self.compiled_rules)

    def summary(self) -> Mapping[str, Any]:
        return {
            "language": self.language,
            "conditions": len(self.conditions),
            "transforms": len(self.transforms),
            "rules": self.rule_count,
        }


__all__ = ["CompiledRule", "LanguageDescriptor"]
