"""
Route dependencies

Use cases are built per request from the collaborators created in the app
lifespan, so tests can swap them through app.dependency_overrides.
"""

from fastapi import Request

from ..services.use_cases import GenerationUseCase, StatusUseCase


def get_generation_use_case(request: Request) -> GenerationUseCase:
    state = request.app.state
    return GenerationUseCase(state.word_generator, state.render_client)


def get_status_use_case(request: Request) -> StatusUseCase:
    return StatusUseCase(request.app.state.render_client)
