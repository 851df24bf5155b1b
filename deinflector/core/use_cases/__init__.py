from .load_languages import LanguageRegistry, LoadLanguages
from .lookup_candidates import LookupCandidates

__all__ = ["LanguageRegistry", "LoadLanguages", "LookupCandidates"]
