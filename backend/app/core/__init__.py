"""
Core Module - Cross-cutting concerns and shared infrastructure

This module contains foundational utilities used across the entire application.
These are not business logic, but rather infrastructure and common patterns.

Organization:
    - logging.py: Structured logging configuration and utilities
    - exceptions.py: Application exception hierarchy
    - retry.py: Retry decorator for collaborator transport calls
    - http_logging.py: Request/response logging for external HTTP services
    - constants.py: Language tables
    - voice_catalog.py: Language -> narration voice resolution

Usage:
    from app.core import get_logger, resolve_voice, ValidationError
"""

# Logging
from .logging import (
    setup_logging,
    get_logger,
    set_request_id,
    set_project_id,
    clear_context,
    LogTimer,
)

# Exceptions
from .exceptions import (
    VocabVideoError,
    ValidationError,
    UnsupportedLanguageError,
    CollaboratorError,
    CollaboratorTimeoutError,
    ParseError,
)

# Retry
from .retry import with_retry

# HTTP exchange logging
from .http_logging import (
    mask_api_key,
    new_exchange_id,
    log_outgoing_request,
    log_incoming_response,
)

# Constants
from .constants import (
    LANGUAGE_NAMES,
    get_language_name,
    get_supported_languages,
)

# Voice catalog
from .voice_catalog import (
    VOICES_BY_LANGUAGE,
    DEFAULT_VOICE,
    resolve_voice,
    is_supported,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "set_request_id",
    "set_project_id",
    "clear_context",
    "LogTimer",
    # Exceptions
    "VocabVideoError",
    "ValidationError",
    "UnsupportedLanguageError",
    "CollaboratorError",
    "CollaboratorTimeoutError",
    "ParseError",
    # Retry
    "with_retry",
    # HTTP exchange logging
    "mask_api_key",
    "new_exchange_id",
    "log_outgoing_request",
    "log_incoming_response",
    # Constants
    "LANGUAGE_NAMES",
    "get_language_name",
    "get_supported_languages",
    # Voice catalog
    "VOICES_BY_LANGUAGE",
    "DEFAULT_VOICE",
    "resolve_voice",
    "is_supported",
]
