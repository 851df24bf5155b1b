# tests\__init__.py
"""
Test Suite for the deinflector.

Organization:
- `core`: Conditions, descriptors, the search engine, language modules and use cases.
- `adapters`: Static table loading and the command-line interface.
"""
