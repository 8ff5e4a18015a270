"""
Request/response logging for external HTTP collaborators.

Every outgoing call to the text-generation or rendering service is logged
with its full context (method, URL, masked credentials, body) and every
response with status, timing, headers and body, correlated by a short
exchange id.
"""

import json
import uuid
from typing import Any, Mapping, Optional

import httpx

from .logging import get_logger

logger = get_logger(__name__, component="http")

MASK_MIN_LENGTH = 12


def mask_api_key(api_key: Optional[str]) -> str:
    """Show the first and last 4 characters of a key, or *** for short keys."""
    if not api_key or len(api_key) < MASK_MIN_LENGTH:
        return "***"
    return f"{api_key[:4]}...{api_key[-4:]}"


def new_exchange_id() -> str:
    return uuid.uuid4().hex[:8]


def format_headers(headers: Mapping[str, str]) -> str:
    return "\n".join(f"  {key}: {value}" for key, value in headers.items())


def _render_body(body: Any) -> str:
    if body is None:
        return ""
    if isinstance(body, (dict, list)):
        return json.dumps(body, ensure_ascii=False, indent=2)
    return str(body)


def log_outgoing_request(
    service: str,
    exchange_id: str,
    method: str,
    url: str,
    api_key: Optional[str] = None,
    body: Any = None,
) -> None:
    logger.info(
        f"[{service}] [{exchange_id}] ==> {method} {url}\n"
        f"Credential: {mask_api_key(api_key)}\n"
        f"Body:\n{_render_body(body)}",
        extra={"service": service, "exchange_id": exchange_id, "method": method, "url": url},
    )


def log_incoming_response(
    service: str,
    exchange_id: str,
    response: httpx.Response,
    duration_ms: float,
) -> None:
    level_method = logger.info if response.is_success else logger.error
    level_method(
        f"[{service}] [{exchange_id}] <== {response.status_code} "
        f"({duration_ms:.0f}ms)\n"
        f"Headers:\n{format_headers(response.headers)}\n"
        f"Body:\n{response.text}",
        extra={
            "service": service,
            "exchange_id": exchange_id,
            "status_code": response.status_code,
            "duration_ms": round(duration_ms, 1),
        },
    )
