"""
StatusUseCase - looks up the render status of a submitted project.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.core.exceptions import CollaboratorError, ParseError, ValidationError
from app.core.logging import get_logger, set_project_id
from app.services.rendering import Json2VideoClient, RenderStatus

from .base import UseCase

logger = get_logger(__name__, component="status_use_case")

PROJECT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class StatusOutcome(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    FAILED = "failed"


@dataclass
class StatusResult:
    outcome: StatusOutcome
    status: Optional[RenderStatus] = None
    message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome == StatusOutcome.FOUND


def validate_project_id(project_id: Optional[str]) -> str:
    if not project_id or not PROJECT_ID_PATTERN.match(project_id):
        raise ValidationError(
            "Project id must be 1-64 characters of letters, digits, '-' or '_'",
            field="project_id",
        )
    return project_id


class StatusUseCase(UseCase[str, StatusResult]):
    """Map a render service status answer to a StatusResult"""

    def __init__(self, render_client: Json2VideoClient):
        self.render_client = render_client

    async def execute(self, request: str) -> StatusResult:
        try:
            project_id = validate_project_id(request)
        except ValidationError as e:
            logger.warning(f"Rejected status request: {e}", extra={"project": request})
            return StatusResult(outcome=StatusOutcome.INVALID, message=str(e))

        set_project_id(project_id)
        logger.info(f"Checking status for project: {project_id}")

        try:
            status = await self.render_client.get_movie_status(project_id)
        except CollaboratorError as e:
            if e.status_code == 404:
                logger.info(f"Render service has no project {project_id}")
                return StatusResult(outcome=StatusOutcome.NOT_FOUND, message=f"Project '{project_id}' not found")
            logger.error(
                f"Error getting video status: {e}",
                extra={"service": e.service, "status_code": e.status_code},
                exc_info=True,
            )
            return StatusResult(outcome=StatusOutcome.FAILED, message=f"Failed to get video status: {e}")
        except ParseError as e:
            logger.error(f"Could not parse status response: {e}", exc_info=True)
            return StatusResult(outcome=StatusOutcome.FAILED, message=f"Failed to get video status: {e}")

        if not status.found:
            return StatusResult(
                outcome=StatusOutcome.NOT_FOUND,
                status=status,
                message=status.message or f"Project '{project_id}' not found",
            )
        return StatusResult(outcome=StatusOutcome.FOUND, status=status, message=status.message)


__all__ = [
    "StatusUseCase",
    "StatusResult",
    "StatusOutcome",
    "validate_project_id",
    "PROJECT_ID_PATTERN",
]
