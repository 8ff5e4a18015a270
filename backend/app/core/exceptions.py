"""
Core Exceptions
Standardized base exceptions for the application.
"""

from typing import Any, Optional


class VocabVideoError(Exception):
    """Base exception for all application errors."""
    pass


class ValidationError(VocabVideoError):
    """Bad input shape or range. Raised before any network call, never retried."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class UnsupportedLanguageError(ValidationError):
    """A language code has no voice in the catalog."""

    def __init__(self, language_code: str, field: Optional[str] = None):
        self.language_code = language_code
        label = field.replace("_", " ").capitalize() if field else "Language"
        super().__init__(f"{label} '{language_code}' is not supported", field=field)


class CollaboratorError(VocabVideoError):
    """Network/HTTP failure or non-success answer from an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ):
        self.service = service
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    @property
    def is_retryable(self) -> bool:
        if self.status_code is None:
            return True
        return self.status_code == 429 or self.status_code >= 500


class CollaboratorTimeoutError(CollaboratorError):
    """An external call exceeded its allotted time."""

    @property
    def is_retryable(self) -> bool:
        return True


class ParseError(VocabVideoError):
    """Malformed or missing data in a collaborator response."""

    def __init__(self, message: str, content: Optional[str] = None):
        self.content = content
        super().__init__(message)
