"""
Async HTTP client for the Json2Video rendering API.

Submits movie documents and reads back render status. Every exchange is
logged in full with the API key masked; transport failures, timeouts and
non-success statuses become CollaboratorError.

Usage::

    async with Json2VideoClient(api_key="...") as client:
        handle = await client.create_movie(document)
        status = await client.get_movie_status(handle.job_id)
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.config import (
    JSON2VIDEO_API_KEY,
    JSON2VIDEO_BASE_URL,
    JSON2VIDEO_TIMEOUT_SECONDS,
    HTTP_MAX_RETRIES,
    HTTP_RETRY_BASE_DELAY,
)
from app.core.exceptions import CollaboratorError, CollaboratorTimeoutError, ParseError
from app.core.http_logging import log_incoming_response, log_outgoing_request, new_exchange_id
from app.core.logging import get_logger
from app.core.retry import with_retry
from app.services.timeline import CompositionDocument

from .models import MovieCreatedPayload, MovieStatusPayload, RenderJobHandle, RenderStatus

logger = get_logger(__name__, component="json2video")

SERVICE_NAME = "json2video"


class Json2VideoClient:
    """Async client for the Json2Video v2 API"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = JSON2VIDEO_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else JSON2VIDEO_API_KEY
        self.base_url = (base_url or JSON2VIDEO_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=10.0),
        )

    async def __aenter__(self) -> "Json2VideoClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _headers(self) -> Dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        exchange_id = new_exchange_id()
        log_outgoing_request(
            SERVICE_NAME, exchange_id, method, url,
            api_key=self.api_key, body=kwargs.get("json"),
        )

        start = time.perf_counter()
        try:
            response = await self._client.request(method, url, headers=self._headers(), **kwargs)
        except httpx.TimeoutException as exc:
            raise CollaboratorTimeoutError(
                f"Json2Video request timed out after {self.timeout:g}s",
                service=SERVICE_NAME,
            ) from exc
        except httpx.TransportError as exc:
            raise CollaboratorError(
                f"Json2Video request failed: {exc}",
                service=SERVICE_NAME,
            ) from exc

        log_incoming_response(SERVICE_NAME, exchange_id, response, (time.perf_counter() - start) * 1000)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CollaboratorError(
                f"Json2Video returned HTTP {exc.response.status_code}",
                service=SERVICE_NAME,
                status_code=exc.response.status_code,
                body=exc.response.text,
            ) from exc
        return response

    @with_retry(max_attempts=HTTP_MAX_RETRIES, base_delay=HTTP_RETRY_BASE_DELAY)
    async def _get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Idempotent GET with retries; movie submissions are sent once."""
        return await self._request("GET", path, **kwargs)

    @staticmethod
    def _decode(response: httpx.Response, model: Any) -> Any:
        try:
            return model.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            raise ParseError(
                f"Unexpected Json2Video response: {exc}",
                content=response.text,
            ) from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def create_movie(self, document: CompositionDocument) -> RenderJobHandle:
        """Submit a movie for rendering.

        Raises:
            CollaboratorError: Transport failure, error status, or success=false
            ParseError: Response is not the expected JSON shape
        """
        response = await self._request("POST", "movies", json=document.to_payload())
        created = self._decode(response, MovieCreatedPayload)

        if not created.success or not created.project:
            raise CollaboratorError(
                f"Json2Video rejected the movie: {created.message or 'no project id returned'}",
                service=SERVICE_NAME,
                status_code=response.status_code,
                body=response.text,
            )

        logger.info(
            "Movie submitted",
            extra={"project_id": created.project, "scene_count": len(document.scenes)},
        )
        return RenderJobHandle(
            job_id=created.project,
            submitted_at=created.timestamp or datetime.now(timezone.utc).isoformat(),
        )

    async def get_movie_status(self, project_id: str) -> RenderStatus:
        """Fetch the render status of a submitted movie."""
        response = await self._get("movies", params={"project": project_id})
        payload = self._decode(response, MovieStatusPayload)
        status = RenderStatus.from_payload(payload)

        logger.info(
            f"Movie status: {status.state.value}",
            extra={"project_id": project_id, "found": status.found},
        )
        return status
