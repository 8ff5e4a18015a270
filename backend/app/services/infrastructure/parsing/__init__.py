"""
Parsing Module

Provides utilities for parsing JSON from LLM responses.

Usage:
    from app.services.infrastructure.parsing import parse_json_array
"""

from .json_parser import (
    remove_markdown_fences,
    extract_bracketed_array,
    parse_json_array,
    get_case_insensitive,
)

__all__ = [
    "remove_markdown_fences",
    "extract_bracketed_array",
    "parse_json_array",
    "get_case_insensitive",
]
