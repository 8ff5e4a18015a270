"""
API tests through FastAPI's TestClient

Use cases are built around AsyncMock collaborators and injected with
app.dependency_overrides; the lifespan is not started, so no real
clients are created.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.core.exceptions import CollaboratorError, CollaboratorTimeoutError
from app.main import app
from app.routes.dependencies import get_generation_use_case, get_status_use_case
from app.services.rendering import RenderJobHandle, RenderState, RenderStatus
from app.services.timeline import WordPair
from app.services.use_cases import GenerationUseCase, StatusUseCase

client = TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def word_generator():
    generator = AsyncMock()
    generator.generate_word_pairs.return_value = [WordPair("cat", "قطة"), WordPair("dog", "كلب")]
    return generator


@pytest.fixture
def render_client():
    render = AsyncMock()
    render.create_movie.return_value = RenderJobHandle(job_id="abc123", submitted_at="2024-05-01T10:00:00Z")
    return render


@pytest.fixture(autouse=True)
def overrides(word_generator, render_client):
    app.dependency_overrides[get_generation_use_case] = lambda: GenerationUseCase(word_generator, render_client)
    app.dependency_overrides[get_status_use_case] = lambda: StatusUseCase(render_client)
    yield
    app.dependency_overrides.clear()


# --- Service endpoints ---
def test_root():
    response = client.get("/")

    assert response.status_code == 200
    assert "version" in response.json()


def test_health():
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "1.0.0"
    assert data["timestamp"]


def test_request_id_echoed():
    response = client.get("/health", headers={"X-Request-ID": "req-42"})

    assert response.headers["X-Request-ID"] == "req-42"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_languages():
    response = client.get("/api/videogenerator/languages")

    assert response.status_code == 200
    languages = response.json()["languages"]
    assert {"code": "en", "name": "English"} in languages
    assert {"code": "ar", "name": "Arabic"} in languages


# --- Generation ---
def test_generate_success(word_generator):
    response = client.post("/api/videogenerator/generate", json={
        "topic": "animals",
        "wordCount": 2,
        "sourceLanguage": "en",
        "targetLanguage": "ar",
        "pauseBetweenWords": 1.5,
    })

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "projectId": "abc123",
        "message": "Video generation started successfully",
        "timestamp": "2024-05-01T10:00:00Z",
        "generatedWords": [
            {"sourceWord": "cat", "targetWord": "قطة"},
            {"sourceWord": "dog", "targetWord": "كلب"},
        ],
    }
    word_generator.generate_word_pairs.assert_awaited_once_with("animals", 2, "en", "ar")


def test_generate_missing_topic(render_client):
    response = client.post("/api/videogenerator/generate", json={"topic": "", "wordCount": 2})

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "Topic is required"
    assert data["projectId"] is None
    render_client.create_movie.assert_not_awaited()


def test_generate_unsupported_language():
    response = client.post("/api/videogenerator/generate", json={"topic": "food", "targetLanguage": "xx"})

    assert response.status_code == 400
    assert "not supported" in response.json()["message"]


def test_generate_malformed_body():
    response = client.post("/api/videogenerator/generate", json={"topic": "food", "wordCount": "many"})

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert "wordCount" in data["message"]


@pytest.mark.parametrize("error", [
    CollaboratorError("Json2Video returned HTTP 502", service="json2video", status_code=502),
    CollaboratorTimeoutError("Json2Video request timed out after 1000s", service="json2video"),
])
def test_generate_render_failure(render_client, error):
    render_client.create_movie.side_effect = error

    response = client.post("/api/videogenerator/generate", json={"topic": "animals"})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["message"].startswith("Failed to generate video:")


def test_generate_body_too_large():
    response = client.post(
        "/api/videogenerator/generate",
        content=b"{}",
        headers={"Content-Type": "application/json", "Content-Length": str(10 * 1024 * 1024)},
    )

    assert response.status_code == 413


def test_unexpected_error_returns_500(word_generator):
    word_generator.generate_word_pairs.side_effect = RuntimeError("boom")

    response = client.post("/api/videogenerator/generate", json={"topic": "animals"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "An unexpected error occurred"}


# --- Status ---
def test_status_done(render_client):
    render_client.get_movie_status.return_value = RenderStatus(
        found=True,
        state=RenderState.DONE,
        url="https://cdn.test/abc123.mp4",
        subtitles_url=None,
        created_at="2024-05-01T10:00:00Z",
        ended_at="2024-05-01T10:01:00Z",
        duration=10.0,
        size=2048,
        width=1920,
        height=1080,
        rendering_time=41.0,
    )

    response = client.get("/api/videogenerator/status/abc123")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["status"] == "done"
    assert data["videoUrl"] == "https://cdn.test/abc123.mp4"
    assert data["subtitlesUrl"] is None
    assert data["renderingTime"] == 41.0
    render_client.get_movie_status.assert_awaited_once_with("abc123")


def test_status_not_found(render_client):
    render_client.get_movie_status.return_value = RenderStatus(
        found=False, state=RenderState.UNKNOWN, message="Project not found",
    )

    response = client.get("/api/videogenerator/status/missing")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_status_invalid_id(render_client):
    response = client.get("/api/videogenerator/status/bad%20id")

    assert response.status_code == 400
    render_client.get_movie_status.assert_not_awaited()


def test_status_service_failure(render_client):
    render_client.get_movie_status.side_effect = CollaboratorError(
        "Json2Video returned HTTP 500", service="json2video", status_code=500,
    )

    response = client.get("/api/videogenerator/status/abc123")

    assert response.status_code == 500
    data = response.json()
    assert data["status"] == "error"
    assert data["message"].startswith("Failed to get video status:")
