"""
Language modules.

Importing this package registers every shipped language:

    en  English   (programmatic descriptor)
    ja  Japanese  (static table)
    es  Spanish   (static table)
    ko  Korean    (static table over decomposed letters)
"""

from . import english, japanese, korean, spanish  # noqa: F401  (registration side effects)
from .base import (
    Deinflector,
    LanguageSpec,
    get_language_spec,
    list_registered_languages,
    register_language,
)
from .korean import KoreanDeinflector

__all__ = [
    "Deinflector",
    "KoreanDeinflector",
    "LanguageSpec",
    "get_language_spec",
    "list_registered_languages",
    "register_language",
]
