# deinflector/core/domain/exceptions.py
from typing import Iterable, Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Descriptor Build Errors ---

class DescriptorBuildError(DomainError):
    """Raised when a language descriptor cannot be built. Fatal for that language only."""


class UnknownConditionError(DescriptorBuildError):
    """Raised when a rule or condition references a tag missing from the condition map."""
    def __init__(self, language: str, names: Iterable[str], where: str):
        self.language = language
        self.names = tuple(sorted(set(names)))
        self.where = where
        super().__init__(
            f"Descriptor '{language}': undefined condition(s) {', '.join(self.names)} referenced by {where}."
        )


class InvalidRuleError(DescriptorBuildError):
    """Raised for structurally invalid rules (empty affix, unknown rule kind, duplicate ids)."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid rule: {reason}")


class TableNotFoundError(DescriptorBuildError):
    """Raised when no static rule table exists for the requested name."""
    def __init__(self, name: str, location: str):
        self.name = name
        self.location = location
        super().__init__(f"Rule table '{name}' not found at '{location}'.")


class TableSchemaError(DescriptorBuildError):
    """
    Raised when a static rule table does not match the expected schema.

    Examples:
        - Invalid JSON
        - Missing required keys
        - Empty inflected affixes
    """
    def __init__(self, path: str, detail: Optional[str] = None):
        msg = f"Invalid rule table '{path}'."
        if detail:
            msg += f" Detail: {detail}"
        self.path = path
        self.detail = detail
        super().__init__(msg)

# --- Registry Errors ---

class LanguageNotFoundError(DomainError):
    """Raised when an operation is requested for a language code that is not registered."""
    def __init__(self, lang_code: str):
        self.lang_code = lang_code
        super().__init__(f"Language '{lang_code}' is not supported or not found in the registry.")


class LanguageUnavailableError(DomainError):
    """Raised when a registered language failed to build its descriptor."""
    def __init__(self, lang_code: str, reason: str):
        self.lang_code = lang_code
        self.reason = reason
        super().__init__(f"Language '{lang_code}' is unavailable: {reason}")
