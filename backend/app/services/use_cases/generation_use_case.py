"""
GenerationUseCase - turns a video request into a submitted render job.

validate -> (derive word count) -> word pairs -> timeline -> composition
-> submit. Collaborator, parse and timeout failures are logged and returned
as failure results; nothing is retried at this layer.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from app.config import MIN_WORD_COUNT, MAX_WORD_COUNT
from app.core.exceptions import (
    CollaboratorError,
    CollaboratorTimeoutError,
    ParseError,
    UnsupportedLanguageError,
    ValidationError,
)
from app.core.constants import get_language_name
from app.core.logging import get_logger, set_project_id
from app.core.voice_catalog import is_supported
from app.models import VideoGenerationRequest
from app.services.rendering import Json2VideoClient, RenderJobHandle
from app.services.timeline import (
    RenderSettings,
    TimingConfig,
    VoiceAssignment,
    WordPair,
    assemble,
    build_timeline,
    derive_word_count,
)
from app.services.words import WordGenerator

from .base import UseCase

logger = get_logger(__name__, component="generation_use_case")


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    COLLABORATOR = "collaborator"
    TIMEOUT = "timeout"
    PARSE = "parse"


@dataclass
class GenerationResult:
    success: bool
    message: str
    job: Optional[RenderJobHandle] = None
    word_pairs: List[WordPair] = field(default_factory=list)
    error_category: Optional[ErrorCategory] = None

    @classmethod
    def failure(cls, category: ErrorCategory, message: str) -> "GenerationResult":
        return cls(success=False, message=message, error_category=category)


def _validate_language(code: Optional[str], field_name: str) -> str:
    code = (code or "").strip()
    if not code:
        label = field_name.replace("_", " ").capitalize()
        raise ValidationError(f"{label} is required", field=field_name)
    if not is_supported(code):
        raise UnsupportedLanguageError(code, field=field_name)
    return code


def validate_request(request: VideoGenerationRequest) -> TimingConfig:
    """
    Check a generation request before any network call.

    Returns:
        The TimingConfig described by the request

    Raises:
        ValidationError: On the first invalid field
    """
    if not request.topic or not request.topic.strip():
        raise ValidationError("Topic is required", field="topic")

    if not (MIN_WORD_COUNT <= request.word_count <= MAX_WORD_COUNT):
        raise ValidationError(
            f"Word count must be between {MIN_WORD_COUNT} and {MAX_WORD_COUNT}",
            field="word_count",
        )

    duration = request.duration_minutes
    if duration is not None and (not math.isfinite(duration) or duration <= 0):
        raise ValidationError("Duration must be a positive number of minutes", field="duration_minutes")

    _validate_language(request.source_language, "source_language")
    _validate_language(request.target_language, "target_language")

    timing = TimingConfig(
        pause_between_words=request.pause_between_words,
        use_secondary_repeat=request.use_secondary_repeat,
    )
    timing.validate()
    return timing


class GenerationUseCase(UseCase[VideoGenerationRequest, GenerationResult]):
    """Generate word pairs and submit the resulting video for rendering"""

    def __init__(self, word_generator: WordGenerator, render_client: Json2VideoClient):
        self.word_generator = word_generator
        self.render_client = render_client

    async def execute(self, request: VideoGenerationRequest) -> GenerationResult:
        try:
            timing = validate_request(request)
        except ValidationError as e:
            logger.warning(
                f"Rejected generation request: {e}",
                extra={"field": e.field, "topic": request.topic},
            )
            return GenerationResult.failure(ErrorCategory.VALIDATION, str(e))

        topic = request.topic.strip()
        source_language = request.source_language.strip()
        target_language = request.target_language.strip()

        word_count = request.word_count
        if request.duration_minutes is not None:
            word_count = derive_word_count(request.duration_minutes, timing)
            logger.info(
                f"Derived {word_count} words from {request.duration_minutes:g} minutes",
                extra={"pair_duration": timing.pair_duration},
            )

        logger.info(
            f"Starting video generation for topic '{topic}' with {word_count} words",
            extra={
                "source_language": source_language,
                "target_language": target_language,
                "pause_between_words": timing.pause_between_words,
                "use_secondary_repeat": timing.use_secondary_repeat,
            },
        )

        try:
            pairs = await self.word_generator.generate_word_pairs(
                topic, word_count, source_language, target_language,
            )

            voices = VoiceAssignment.for_languages(source_language, target_language)
            timeline = build_timeline(pairs, timing, voices)
            settings = RenderSettings(
                resolution=request.resolution,
                background_color=request.background_color,
                comment=(
                    f"Vocabulary: {topic} "
                    f"({get_language_name(source_language)} -> {get_language_name(target_language)})"
                ),
            )
            document = assemble(
                timeline,
                settings,
                scene_comment="All words: " + ", ".join(p.source_word for p in pairs),
            )

            job = await self.render_client.create_movie(document)
        except ValidationError as e:
            logger.warning(f"Rejected generation request: {e}", extra={"field": e.field})
            return GenerationResult.failure(ErrorCategory.VALIDATION, str(e))
        except CollaboratorTimeoutError as e:
            logger.error(f"Generation timed out: {e}", extra={"service": e.service}, exc_info=True)
            return GenerationResult.failure(ErrorCategory.TIMEOUT, f"Failed to generate video: {e}")
        except CollaboratorError as e:
            logger.error(
                f"Collaborator failure during generation: {e}",
                extra={"service": e.service, "status_code": e.status_code},
                exc_info=True,
            )
            return GenerationResult.failure(ErrorCategory.COLLABORATOR, f"Failed to generate video: {e}")
        except ParseError as e:
            logger.error(f"Could not parse collaborator response: {e}", exc_info=True)
            return GenerationResult.failure(ErrorCategory.PARSE, f"Failed to generate video: {e}")

        set_project_id(job.job_id)
        logger.info(
            "Video generation started",
            extra={"word_count": len(pairs), "total_duration": timeline.total_duration},
        )
        return GenerationResult(
            success=True,
            message="Video generation started successfully",
            job=job,
            word_pairs=list(pairs),
        )
