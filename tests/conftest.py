# tests\conftest.py
import json
from pathlib import Path

import pytest
import structlog
from unittest.mock import MagicMock

from deinflector.adapters.tables.loader import JsonTableSource
from deinflector.core.domain.conditions import condition
from deinflector.core.domain.descriptor import LanguageDescriptor
from deinflector.core.domain.rules import suffix_rule, transform
from deinflector.core.languages import english
from deinflector.core.ports.descriptor_source import IDescriptorSource
from deinflector.core.use_cases.load_languages import LanguageRegistry


@pytest.fixture(autouse=True)
def reset_logging():
    """Drops any structlog configuration a test (e.g. the CLI) installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def english_descriptor():
    """The programmatic English descriptor, built once per session."""
    return english.build_descriptor()


@pytest.fixture(scope="session")
def table_source():
    """Descriptor source reading the packaged tables."""
    return JsonTableSource()


@pytest.fixture
def registry(table_source):
    """A registry with every shipped language built eagerly."""
    return LanguageRegistry(table_source)


@pytest.fixture
def mock_source():
    """A descriptor source that loads nothing unless told to."""
    return MagicMock(spec=IDescriptorSource)


@pytest.fixture
def toy_descriptor():
    """
    Factory for small ad-hoc descriptors.

    Rules are given as (inflected, deinflected, conditions_in, conditions_out)
    tuples, each in its own transform group named "t0", "t1", ...
    """

    def build(rules, conditions=None):
        conds = conditions or [condition("n"), condition("v"), condition("c")]
        groups = [
            transform(f"t{i}", [suffix_rule(*rule)])
            for i, rule in enumerate(rules)
        ]
        return LanguageDescriptor.build("xx", conds, groups)

    return build


@pytest.fixture
def write_table(tmp_path):
    """Writes a table file into a temporary override directory."""

    def write(name, content):
        path = Path(tmp_path) / f"{name}.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return path

    return write


@pytest.fixture
def minimal_table():
    """A valid one-rule table, as a dict ready to be serialized."""
    return {
        "language": "xx",
        "conditions": {
            "v": {"sub_conditions": ["v1"]},
            "v1": {},
        },
        "transforms": [
            {
                "id": "past",
                "rules": [
                    {
                        "type": "suffix",
                        "inflected": "ta",
                        "deinflected": "ru",
                        "conditions_in": [],
                        "conditions_out": ["v1"],
                    }
                ],
            }
        ],
    }
