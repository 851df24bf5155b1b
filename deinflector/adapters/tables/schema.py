# deinflector/adapters/tables/schema.py
"""
adapters/tables/schema.py
=========================

Pydantic schema for static rule tables.

A table is a JSON object:

    {
      "language": "ja",
      "version": "1",
      "conditions": {
        "v":  {"sub_conditions": ["v1", "v5"], "description": "Verb"},
        "v1": {"description": "Ichidan verb"}
      },
      "transforms": [
        {
          "id": "past",
          "description": "Past tense",
          "rules": [
            {"type": "suffix", "inflected": "た", "deinflected": "る",
             "conditions_in": ["-ta"], "conditions_out": ["v1"]}
          ]
        }
      ]
    }

Unknown keys are rejected so that typos fail at load time rather than
silently dropping rules. Cross-references between rules and conditions are
checked when the descriptor is built.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConditionSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    sub_conditions: List[str] = Field(default_factory=list)
    description: Optional[str] = None


class RuleSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["suffix", "prefix"]
    inflected: str = Field(..., min_length=1)
    deinflected: str = ""
    conditions_in: List[str] = Field(default_factory=list)
    conditions_out: List[str] = Field(default_factory=list)


class TransformSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    description: Optional[str] = None
    rules: List[RuleSpec] = Field(..., min_length=1)


class TransformTable(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    language: str = Field(..., min_length=1)
    version: Optional[str] = None
    description: Optional[str] = None
    conditions: Dict[str, ConditionSpec]
    transforms: List[TransformSpec] = Field(..., min_length=1)

    @field_validator("transforms")
    @classmethod
    def _unique_transform_ids(cls, value: List[TransformSpec]) -> List[TransformSpec]:
        seen = set()
        for spec in value:
            if spec.id in seen:
                raise ValueError(f"duplicate transform id '{spec.id}'")
            seen.add(spec.id)
        return value


__all__ = ["ConditionSpec", "RuleSpec", "TransformSpec", "TransformTable"]
