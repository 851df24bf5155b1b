"""
deinflector - Rule-driven morphological deinflection for dictionary lookups.

This package follows a Ports & Adapters layout:
- core: conditions, rules, descriptors, the search engine and language modules.
- adapters: static rule tables (JSON) and the command-line interface.
- shared: configuration, structured logging, tracing and DI wiring.
"""

__version__ = "1.0.0"
