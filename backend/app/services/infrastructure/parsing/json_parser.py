"""
JSON parsing utilities for LLM responses.

Models often wrap the requested JSON in prose or markdown fences, so the
helpers here cut the payload out of the surrounding text before decoding.
"""

import json
from typing import Any, Dict, List, Optional

from app.core.exceptions import ParseError


def remove_markdown_fences(text: str) -> str:
    """Drop ``` fence lines while keeping their content."""
    text = text.strip()
    if "```" not in text:
        return text
    lines = [line for line in text.split("\n") if not line.strip().startswith("```")]
    return "\n".join(lines).strip()


def extract_bracketed_array(text: str) -> Optional[str]:
    """Return the substring from the first '[' to the last ']', or None.

    Args:
        text: Source text potentially containing a JSON array.
    """
    if not text:
        return None
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end == -1 or end < start:
        return None
    return text[start:end + 1]


def parse_json_array(text: str) -> List[Any]:
    """Parse the JSON array embedded in an LLM response.

    Raises:
        ParseError: No bracketed region, invalid JSON, or a non-array value
    """
    candidate = extract_bracketed_array(remove_markdown_fences(text or ""))
    if candidate is None:
        raise ParseError("Response does not contain a JSON array", content=text)

    try:
        result = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ParseError(f"Response contains invalid JSON: {e.msg}", content=text) from e

    if not isinstance(result, list):
        raise ParseError("Response JSON is not an array", content=text)
    return result


def get_case_insensitive(item: Dict[str, Any], key: str) -> Any:
    """Look up `key` in a JSON object ignoring key case."""
    if key in item:
        return item[key]
    lowered = key.lower()
    for candidate, value in item.items():
        if isinstance(candidate, str) and candidate.lower() == lowered:
            return value
    return None
