# deinflector/core/use_cases/load_languages.py
import threading
import time
from typing import Dict, Iterable, List, Optional

import structlog

from deinflector.core.domain.exceptions import (
    DomainError,
    LanguageNotFoundError,
    LanguageUnavailableError,
)
from deinflector.core.domain.models import HealthReport, LanguageHealth, LanguageStatus
from deinflector.core.languages import Deinflector, get_language_spec, list_registered_languages
from deinflector.core.ports.descriptor_source import IDescriptorSource
from deinflector.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class LanguageRegistry:
    """
    Per-language deinflectors, built once and shared read-only.

    Responsibilities:
    1. Builds each enabled language's descriptor, eagerly or on first use.
    2. Isolates failures: a language that fails to build is recorded as
       `error` and never retried; the others are unaffected.
    3. Reports per-language health for startup and readiness checks.

    Built deinflectors are immutable; the lock only guards the lazy
    population of the internal maps.
    """

    def __init__(
        self,
        source: IDescriptorSource,
        languages: Optional[Iterable[str]] = None,
        eager: bool = True,
    ):
        self.source = source
        codes = list(languages) if languages is not None else list(list_registered_languages())
        for code in codes:
            # Unknown codes in configuration are a startup bug, not a per-language failure.
            get_language_spec(code)
        self._codes: List[str] = list(dict.fromkeys(codes))
        self._deinflectors: Dict[str, Deinflector] = {}
        self._health: Dict[str, LanguageHealth] = {
            code: LanguageHealth(code=code, name=get_language_spec(code).name)
            for code in self._codes
        }
        self._lock = threading.RLock()

        if eager:
            self.preload()

    @property
    def languages(self) -> List[str]:
        """Enabled language codes, in configuration order."""
        return list(self._codes)

    def get(self, code: str) -> Deinflector:
        """
        Return the deinflector for `code`, building it if needed.

        Raises:
            LanguageNotFoundError: `code` is not enabled.
            LanguageUnavailableError: the language failed to build.
        """
        if code not in self._health:
            raise LanguageNotFoundError(code)

        existing = self._deinflectors.get(code)
        if existing is not None:
            return existing

        with self._lock:
            existing = self._deinflectors.get(code)
            if existing is not None:
                return existing
            health = self._health[code]
            if health.status == LanguageStatus.PENDING:
                self._build(code)
                health = self._health[code]
            if health.status == LanguageStatus.ERROR:
                raise LanguageUnavailableError(code, health.error or "descriptor build failed")
            return self._deinflectors[code]

    def preload(self, codes: Optional[Iterable[str]] = None) -> HealthReport:
        """Build every pending language in `codes` (default: all enabled)."""
        targets = list(codes) if codes is not None else self._codes
        with self._lock:
            for code in targets:
                if code not in self._health:
                    raise LanguageNotFoundError(code)
                if self._health[code].status == LanguageStatus.PENDING:
                    self._build(code)
        return self.report()

    def available(self) -> List[str]:
        """Codes of languages that are built and usable."""
        return [c for c in self._codes if self._health[c].status == LanguageStatus.READY]

    def report(self) -> HealthReport:
        with self._lock:
            return HealthReport(languages=[self._health[c].model_copy() for c in self._codes])

    def _build(self, code: str) -> None:
        spec = get_language_spec(code)
        started = time.perf_counter()

        with tracer.start_as_current_span("registry.build_language") as span:
            span.set_attribute("app.lang_code", code)
            try:
                deinflector = spec.factory(self.source)
                descriptor = deinflector.descriptor
                elapsed = (time.perf_counter() - started) * 1000
                health = self._health[code].model_copy(
                    update={
                        "status": LanguageStatus.READY,
                        "transform_count": len(descriptor.transforms),
                        "rule_count": descriptor.rule_count,
                        "load_time_ms": elapsed,
                        "error": None,
                    }
                )
                span.set_attribute("app.rule_count", descriptor.rule_count)
                logger.info(
                    "language_loaded",
                    lang=code,
                    transforms=len(descriptor.transforms),
                    rules=descriptor.rule_count,
                    load_time_ms=round(elapsed, 2),
                )
            except DomainError as e:
                self._record_failure(code, started, e.message)
                logger.error("language_load_failed", lang=code, error=e.message)
                return
            except Exception as e:
                # Any other failure is still confined to this language.
                self._record_failure(code, started, f"Unexpected build failure: {e}")
                logger.error("language_load_failed", lang=code, error=str(e), exc_info=True)
                return

            # Published only once every step above has succeeded.
            self._health[code] = health
            self._deinflectors[code] = deinflector

    def _record_failure(self, code: str, started: float, message: str) -> None:
        self._health[code] = self._health[code].model_copy(
            update={
                "status": LanguageStatus.ERROR,
                "load_time_ms": (time.perf_counter() - started) * 1000,
                "error": message,
            }
        )


class LoadLanguages:
    """
    Use Case: Startup sequence for descriptors.

    Builds every enabled language and returns the health report instead of
    aborting on the first failure, so each language's outcome is observable.
    """

    def __init__(self, registry: LanguageRegistry):
        self.registry = registry

    def execute(self, codes: Optional[Iterable[str]] = None) -> HealthReport:
        report = self.registry.preload(codes)
        if report.healthy:
            logger.info("languages_ready", languages=self.registry.available())
        else:
            logger.warning(
                "languages_degraded",
                ready=self.registry.available(),
                failed=report.failed,
            )
        return report
