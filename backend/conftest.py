import os

import pytest

# Settings are read once when app.config is imported, so they must be in
# place before any test module imports the app.
os.environ["LLM_PROVIDER"] = "openai"
os.environ["OPENAI_API_KEY"] = "sk-test-openai-key-0000"
os.environ["JSON2VIDEO_API_KEY"] = "j2v-test-render-key-0000"
os.environ["JSON2VIDEO_BASE_URL"] = "https://render.test/v2"
os.environ["OPENAI_BASE_URL"] = "https://llm.test/v1"
os.environ["HTTP_MAX_RETRIES"] = "3"
os.environ["HTTP_RETRY_BASE_DELAY"] = "0"
os.environ["LOG_LEVEL"] = "DEBUG"


@pytest.fixture(autouse=True)
def reset_log_context():
    """Correlation ids are context-local; start every test without them"""
    from app.core.logging import clear_context

    clear_context()
    yield
    clear_context()
