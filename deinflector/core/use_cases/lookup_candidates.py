# deinflector/core/use_cases/lookup_candidates.py
from typing import List

import structlog

from deinflector.core.domain.models import DeinflectionCandidate
from deinflector.core.use_cases.load_languages import LanguageRegistry
from deinflector.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class LookupCandidates:
    """
    Use Case: Turns selected surface text into dictionary lookup keys.

    The returned strings are used by the caller as additional exact-match
    keys against dictionary storage. The input itself is always the first
    key. No normalization is applied: callers pass text already folded the
    way their index expects.
    """

    def __init__(self, registry: LanguageRegistry):
        self.registry = registry

    def execute(self, lang_code: str, text: str) -> List[str]:
        """
        Returns:
            Distinct candidate strings in discovery order.

        Raises:
            LanguageNotFoundError: If the language is not enabled.
            LanguageUnavailableError: If the language failed to load.
        """
        with tracer.start_as_current_span("use_case.lookup_candidates") as span:
            span.set_attribute("app.lang_code", lang_code)
            deinflector = self.registry.get(lang_code)
            keys = deinflector.deinflect(text)
            span.set_attribute("app.candidate_count", len(keys))
            logger.debug("lookup_completed", lang=lang_code, text=text, candidates=len(keys))
            return keys

    def trace(self, lang_code: str, text: str) -> List[DeinflectionCandidate]:
        """Same search, keeping conditions and rule traces (debugging aid)."""
        with tracer.start_as_current_span("use_case.trace_candidates") as span:
            span.set_attribute("app.lang_code", lang_code)
            return self.registry.get(lang_code).candidates(text)
