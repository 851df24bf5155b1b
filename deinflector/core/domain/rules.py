# deinflector/core/domain/rules.py
"""
core/domain/rules.py

Rule vocabulary shared by every language.

A rule is a `RuleDefinition` whose `kind` is one of a closed set of frozen
variant records. The core vocabulary is the literal affix pair:

    SuffixRule("ied", "y")     "studied"  -> "study"
    PrefixRule("will ", "")    "will go"  -> "go"

Language modules that need positional rewrites (e.g. English phrasal verbs)
subclass `StructuralRule` and register a matching handler with the
engine (see `core.engine.transformer.register_rule_handler`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple, Type, Union

from .exceptions import InvalidRuleError


@dataclass(frozen=True)
class SuffixRule:
    """Replace a trailing `inflected` with `deinflected`."""

    inflected: str
    deinflected: str = ""

    def __post_init__(self) -> None:
        if not self.inflected:
            raise InvalidRuleError("suffix rule with an empty inflected suffix")


@dataclass(frozen=True)
class PrefixRule:
    """Replace a leading `inflected` with `deinflected`."""

    inflected: str
    deinflected: str = ""

    def __post_init__(self) -> None:
        if not self.inflected:
            raise InvalidRuleError("prefix rule with an empty inflected prefix")


@dataclass(frozen=True)
class StructuralRule:
    """Base for language-specific variants that rewrite by position rather than by affix."""


RuleKind = Union[SuffixRule, PrefixRule, StructuralRule]


@dataclass(frozen=True)
class RuleDefinition:
    """
    One rule inside a transform group.

    Attributes:
        kind:
            The variant record carrying the match/rewrite data.
        conditions_in:
            Tags required of the *current* candidate. Empty means unconstrained.
        conditions_out:
            Tags assigned to the resulting candidate (replacing the old set).
    """

    kind: RuleKind
    conditions_in: Tuple[str, ...] = ()
    conditions_out: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TransformGroup:
    """A named bundle of rules implementing one grammatical phenomenon."""

    id: str
    rules: Tuple[RuleDefinition, ...]
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidRuleError("transform group with an empty id")


def suffix_rule(
    inflected: str,
    deinflected: str,
    conditions_in: Sequence[str],
    conditions_out: Sequence[str],
) -> RuleDefinition:
    return RuleDefinition(
        kind=SuffixRule(inflected, deinflected),
        conditions_in=tuple(conditions_in),
        conditions_out=tuple(conditions_out),
    )


def prefix_rule(
    inflected: str,
    deinflected: str,
    conditions_in: Sequence[str],
    conditions_out: Sequence[str],
) -> RuleDefinition:
    return RuleDefinition(
        kind=PrefixRule(inflected, deinflected),
        conditions_in=tuple(conditions_in),
        conditions_out=tuple(conditions_out),
    )


def transform(id: str, rules: Iterable[RuleDefinition], description: Optional[str] = None) -> TransformGroup:
    return TransformGroup(id=id, rules=tuple(rules), description=description)


# ---------------------------------------------------------------------------
# Rule handlers
# ---------------------------------------------------------------------------

RuleHandler = Callable[[RuleKind, str], Optional[str]]
"""A handler takes (kind, text) and returns the rewritten text, or None if the rule does not apply."""

RULE_HANDLERS: Dict[Type[RuleKind], RuleHandler] = {}
"""
Registry mapping rule variant type -> handler.

Populated at import time by this module (affix rules) and by language
modules that contribute structural variants.
"""


def register_rule_handler(kind_type: Type[RuleKind]):
    """
    Function decorator registering the handler for one rule variant.

    Usage:

        @register_rule_handler(PhrasalSuffixRule)
        def _apply_phrasal_suffix(kind, text):
            ...
    """

    def decorator(func: RuleHandler) -> RuleHandler:
        if kind_type in RULE_HANDLERS:
            raise ValueError(f"Handler already registered for rule kind '{kind_type.__name__}'")
        RULE_HANDLERS[kind_type] = func
        return func

    return decorator


def handler_for(kind: RuleKind) -> RuleHandler:
    """
    Return the handler for a rule variant instance.

    Raises:
        InvalidRuleError: if no handler is registered for the variant type.
    """
    try:
        return RULE_HANDLERS[type(kind)]
    except KeyError as exc:
        raise InvalidRuleError(f"no handler registered for rule kind '{type(kind).__name__}'") from exc


@register_rule_handler(SuffixRule)
def _apply_suffix(kind: SuffixRule, text: str) -> Optional[str]:
    if not text.endswith(kind.inflected):
        return None
    return text[: len(text) - len(kind.inflected)] + kind.deinflected


@register_rule_handler(PrefixRule)
def _apply_prefix(kind: PrefixRule, text: str) -> Optional[str]:
    if not text.startswith(kind.inflected):
        return None
    return kind.deinflected + text[len(kind.inflected):]


__all__ = [
    "SuffixRule",
    "PrefixRule",
    "StructuralRule",
    "RuleKind",
    "RuleDefinition",
    "TransformGroup",
    "suffix_rule",
    "prefix_rule",
    "transform",
    "RuleHandler",
    "RULE_HANDLERS",
    "register_rule_handler",
    "handler_for",
]
