"""
Use Cases package - Business logic layer.

Following Clean Architecture principles:
- Each use case is ONE business operation
- Use cases are independent of HTTP
- Use cases are fully testable with injected collaborators

Modules:
- base: Base use case abstract class
- generation_use_case: Request -> word pairs -> submitted render job
- status_use_case: Project id -> mapped render status
"""

from .base import UseCase
from .generation_use_case import (
    GenerationUseCase,
    GenerationResult,
    ErrorCategory,
    validate_request,
)
from .status_use_case import (
    StatusUseCase,
    StatusResult,
    StatusOutcome,
    validate_project_id,
)

__all__ = [
    "UseCase",
    "GenerationUseCase",
    "GenerationResult",
    "ErrorCategory",
    "validate_request",
    "StatusUseCase",
    "StatusResult",
    "StatusOutcome",
    "validate_project_id",
]
