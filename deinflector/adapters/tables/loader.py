# deinflector/adapters/tables/loader.py
"""
adapters/tables/loader.py
=========================

Load static rule tables and turn them into language descriptors.

Tables live in the package (`deinflector/data/transforms/<name>.json`) or,
when `tables_dir` is set, in an override directory with the same file
names. Loading is all-or-nothing per table:

- unreadable file              -> TableNotFoundError
- invalid JSON / schema errors -> TableSchemaError
- undefined condition names    -> UnknownConditionError

so a malformed table is rejected before any lookup happens.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from pydantic import ValidationError

from deinflector.core.domain.conditions import ConditionTag
from deinflector.core.domain.descriptor import LanguageDescriptor
from deinflector.core.domain.exceptions import TableNotFoundError, TableSchemaError
from deinflector.core.domain.rules import (
    PrefixRule,
    RuleDefinition,
    SuffixRule,
    TransformGroup,
)

from .schema import RuleSpec, TransformTable

logger = logging.getLogger(__name__)

PACKAGE_TABLES = "deinflector.data.transforms"


def _identity(value: str) -> str:
    return value


def _read_table_text(name: str, tables_dir: Optional[Path]) -> Tuple[str, str]:
    """Return (location, raw text) for a table name."""
    filename = f"{name}.json"
    if tables_dir is not None:
        path = tables_dir / filename
        try:
            return str(path), path.read_text(encoding="utf-8")
        except OSError as e:
            raise TableNotFoundError(name, str(path)) from e

    location = f"{PACKAGE_TABLES}/{filename}"
    try:
        return location, resources.files(PACKAGE_TABLES).joinpath(filename).read_text(encoding="utf-8")
    except (OSError, ModuleNotFoundError) as e:
        raise TableNotFoundError(name, location) from e


def parse_table(raw: str, location: str = "<memory>") -> TransformTable:
    """
    Parse and validate a table from its JSON text.

    Raises:
        TableSchemaError: invalid JSON or schema violation.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise TableSchemaError(location, f"JSON decode error: {e}") from e

    try:
        return TransformTable.model_validate(data)
    except ValidationError as e:
        raise TableSchemaError(location, str(e)) from e


def _rule_from_spec(spec: RuleSpec, normalize: Callable[[str], str]) -> RuleDefinition:
    kind_cls = SuffixRule if spec.type == "suffix" else PrefixRule
    return RuleDefinition(
        kind=kind_cls(normalize(spec.inflected), normalize(spec.deinflected)),
        conditions_in=tuple(spec.conditions_in),
        conditions_out=tuple(spec.conditions_out),
    )


def descriptor_from_table(
    table: TransformTable,
    normalize: Optional[Callable[[str], str]] = None,
) -> LanguageDescriptor:
    """
    Convert a validated table into a descriptor.

    Raises:
        UnknownConditionError: a rule or condition names an undefined tag.
        InvalidRuleError: an affix becomes empty after normalization.
    """
    norm = normalize or _identity
    conditions = [
        ConditionTag(name=name, sub_conditions=tuple(spec.sub_conditions), description=spec.description)
        for name, spec in table.conditions.items()
    ]
    transforms = [
        TransformGroup(
            id=spec.id,
            rules=tuple(_rule_from_spec(rule, norm) for rule in spec.rules),
            description=spec.description,
        )
        for spec in table.transforms
    ]
    return LanguageDescriptor.build(table.language, conditions, transforms)


class JsonTableSource:
    """
    Descriptor source backed by JSON tables.

    Each call re-reads and re-validates the table; callers keep the
    resulting descriptor for the process lifetime.
    """

    def __init__(self, tables_dir: Optional[Union[str, Path]] = None):
        self.tables_dir: Optional[Path] = Path(tables_dir).expanduser() if tables_dir else None

    def load_table(self, name: str) -> TransformTable:
        location, raw = _read_table_text(name, self.tables_dir)
        table = parse_table(raw, location)
        logger.debug(
            "Loaded table %s from %s (%d transforms).", name, location, len(table.transforms)
        )
        return table

    def load_descriptor(
        self,
        name: str,
        normalize: Optional[Callable[[str], str]] = None,
    ) -> LanguageDescriptor:
        return descriptor_from_table(self.load_table(name), normalize=normalize)


__all__ = ["JsonTableSource", "parse_table", "descriptor_from_table", "PACKAGE_TABLES"]
