"""
Render status and language routes
"""

from fastapi import APIRouter, Depends, Response

from ..core import get_logger, get_supported_languages
from ..models import LanguageInfo, LanguagesResponse, VideoStatusResponse
from ..services.use_cases import StatusOutcome, StatusUseCase
from .dependencies import get_status_use_case

router = APIRouter(prefix="/api/videogenerator", tags=["status"])
logger = get_logger(__name__, component="status_routes")

_STATUS_CODES = {
    StatusOutcome.FOUND: 200,
    StatusOutcome.INVALID: 400,
    StatusOutcome.NOT_FOUND: 404,
    StatusOutcome.FAILED: 500,
}


@router.get("/status/{project_id}", response_model=VideoStatusResponse)
async def get_video_status(
    project_id: str,
    response: Response,
    use_case: StatusUseCase = Depends(get_status_use_case),
):
    """Get the render status of a submitted project"""
    result = await use_case.execute(project_id)
    response.status_code = _STATUS_CODES[result.outcome]

    status = result.status
    if status is None:
        return VideoStatusResponse(
            success=False,
            status="error" if result.outcome == StatusOutcome.FAILED else "unknown",
            message=result.message,
        )

    return VideoStatusResponse(
        success=result.success,
        status=status.state.value,
        video_url=status.url,
        subtitles_url=status.subtitles_url,
        message=result.message,
        created_at=status.created_at,
        ended_at=status.ended_at,
        duration=status.duration,
        size=status.size,
        width=status.width,
        height=status.height,
        rendering_time=status.rendering_time,
    )


@router.get("/languages", response_model=LanguagesResponse)
async def get_languages():
    """List supported language codes with display names"""
    return LanguagesResponse(
        languages=[LanguageInfo(**language) for language in get_supported_languages()]
    )
