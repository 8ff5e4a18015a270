"""
Video generation routes
"""

from fastapi import APIRouter, Depends, Response

from ..core import get_logger
from ..models import VideoGenerationRequest, VideoGenerationResponse, WordPairSchema
from ..services.use_cases import ErrorCategory, GenerationUseCase
from .dependencies import get_generation_use_case

router = APIRouter(prefix="/api/videogenerator", tags=["generation"])
logger = get_logger(__name__, component="generation_routes")


@router.post("/generate", response_model=VideoGenerationResponse)
async def generate_video(
    request: VideoGenerationRequest,
    response: Response,
    use_case: GenerationUseCase = Depends(get_generation_use_case),
):
    """Generate word pairs for a topic and submit the video for rendering"""
    logger.info(
        f"Received video generation request for topic '{request.topic}' with {request.word_count} words"
    )

    result = await use_case.execute(request)

    if not result.success:
        response.status_code = 400 if result.error_category == ErrorCategory.VALIDATION else 500
        return VideoGenerationResponse(success=False, message=result.message)

    return VideoGenerationResponse(
        success=True,
        project_id=result.job.job_id,
        message=result.message,
        timestamp=result.job.submitted_at,
        generated_words=[
            WordPairSchema(source_word=p.source_word, target_word=p.target_word)
            for p in result.word_pairs
        ],
    )
