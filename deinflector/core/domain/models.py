# deinflector/core/domain/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, Field

# --- Engine Output ---

@dataclass(frozen=True)
class TraceStep:
    """Identifies one applied rule: its transform group and position inside it."""
    transform: str
    rule_index: int

    def __str__(self) -> str:
        return f"{self.transform}#{self.rule_index}"


@dataclass(frozen=True)
class DeinflectionCandidate:
    """
    One reachable form produced by the engine.

    `conditions` is the tag set asserted by the last applied rule (empty for
    the untouched input). `trace` lists the applied rules, oldest first.
    """
    text: str
    conditions: FrozenSet[str] = frozenset()
    trace: Tuple[TraceStep, ...] = field(default_factory=tuple)

    @property
    def is_identity(self) -> bool:
        return not self.trace

# --- Enums ---

class LanguageStatus(str, Enum):
    """Lifecycle status of a language descriptor in the registry."""
    PENDING = "pending"   # Registered, not built yet (lazy loading)
    READY = "ready"       # Descriptor built and usable
    ERROR = "error"       # Build failed; other languages are unaffected

# --- Health Reporting ---

class LanguageHealth(BaseModel):
    """Startup/health record for one language."""
    code: str = Field(..., description="Language code (e.g., 'en', 'ko')")
    name: str = Field(..., description="English name of the language")
    status: LanguageStatus = LanguageStatus.PENDING

    transform_count: int = 0
    rule_count: int = 0
    load_time_ms: float = 0.0
    error: Optional[str] = None


class HealthReport(BaseModel):
    """Aggregated health of every registered language."""
    languages: List[LanguageHealth] = Field(default_factory=list)

    @property
    def healthy(self) -> bool:
        return all(lang.status != LanguageStatus.ERROR for lang in self.languages)

    @property
    def failed(self) -> List[str]:
        return [lang.code for lang in self.languages if lang.status == LanguageStatus.ERROR]
