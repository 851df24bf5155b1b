# deinflector/core/languages/base.py
"""
core/languages/base.py

Shared abstractions for language modules.

This module defines:
- `Deinflector`, the object callers hold per language.
- `LanguageSpec` and a registry so language modules announce themselves
  by code, together with a factory that builds their deinflector.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from ..domain.descriptor import LanguageDescriptor
from ..domain.models import DeinflectionCandidate
from ..engine.transformer import deinflect, unique_texts
from ..ports.descriptor_source import IDescriptorSource


class Deinflector:
    """
    Binds the generic engine to one language descriptor.

    Subclasses adapt the text representation around the engine (Korean
    works on decomposed letters) but never change the search itself.
    """

    def __init__(self, descriptor: LanguageDescriptor):
        self.descriptor = descriptor

    @property
    def language(self) -> str:
        return self.descriptor.language

    def candidates(self, text: str) -> List[DeinflectionCandidate]:
        """All reachable candidates with their conditions and traces."""
        return deinflect(self.descriptor, text)

    def deinflect(self, text: str) -> List[str]:
        """Distinct candidate strings in discovery order, the input first."""
        return unique_texts(self.candidates(text))


DeinflectorFactory = Callable[[IDescriptorSource], Deinflector]


@dataclass(frozen=True)
class LanguageSpec:
    """
    Registration record of a language module.

    Attributes:
        code: Short language code used by callers (e.g. "en").
        name: English name, for reporting.
        factory: Builds the language's deinflector. Programmatic languages
            ignore the descriptor source; table-driven ones load through it.
    """

    code: str
    name: str
    factory: DeinflectorFactory


LANGUAGE_REGISTRY: Dict[str, LanguageSpec] = {}
"""
Registry mapping language code -> LanguageSpec.

This holds *builders* only; built descriptors live in the
`LanguageRegistry` instance created at startup.
"""


def register_language(code: str, name: str):
    """
    Function decorator to register a deinflector factory under a code.

    Usage:

        @register_language("en", "English")
        def create_deinflector(source):
            return Deinflector(build_descriptor())
    """

    def decorator(factory: DeinflectorFactory) -> DeinflectorFactory:
        if code in LANGUAGE_REGISTRY:
            raise ValueError(f"Language already registered for code '{code}'")
        LANGUAGE_REGISTRY[code] = LanguageSpec(code=code, name=name, factory=factory)
        return factory

    return decorator


def get_language_spec(code: str) -> LanguageSpec:
    """
    Raises:
        KeyError: if no language is registered under `code`.
    """
    try:
        return LANGUAGE_REGISTRY[code]
    except KeyError as exc:
        raise KeyError(f"No language registered for code '{code}'") from exc


def list_registered_languages() -> Dict[str, LanguageSpec]:
    """Return a snapshot of the language registry."""
    return dict(LANGUAGE_REGISTRY)


__all__ = [
    "Deinflector",
    "DeinflectorFactory",
    "LanguageSpec",
    "LANGUAGE_REGISTRY",
    "register_language",
    "get_language_spec",
    "list_registered_languages",
]
