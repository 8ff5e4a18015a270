"""
Routes module - contains all API route handlers
"""

from .generation import router as generation_router
from .status import router as status_router

__all__ = [
    "generation_router",
    "status_router",
]
