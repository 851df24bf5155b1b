"""
Deinflection engine.

    from deinflector.core.engine import deinflect, deinflect_terms

    deinflect_terms(descriptor, "studied")  # ["studied", "study", ...]
"""

from .transformer import deinflect, deinflect_terms, register_rule_handler, unique_texts

__all__ = ["deinflect", "deinflect_terms", "register_rule_handler", "unique_texts"]
