"""
Pytest configuration and fixtures for test isolation.
"""
import os

import pytest

from stockmeta.llm.providers.base import BaseVisionProvider, VisionResponse


SAMPLE_RESPONSE = (
    "TITLE: Erupting volcano with lava flow at night\n"
    "KEYWORDS: volcan, eruptio, smok, lava, volcanic, night, mountain, fire, ash\n"
    "CATEGORY: Landscapes\n"
    "DESCRIPTION: A volcano erupting at night, glowing lava running down the slope.\n"
)


class ScriptedProvider(BaseVisionProvider):
    """In-memory vision provider returning queued outcomes.

    A queued exception is raised instead of returned.
    """

    provider_id = "scripted"

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests = []

    def describe_image(self, request):
        self.requests.append(request)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return VisionResponse(content=outcome, model_used="scripted-1")

    def get_capabilities(self):
        return {"provider": self.provider_id}

    def validate_requirements(self):
        return True


@pytest.fixture(autouse=True)
def isolate_tests(tmp_path, monkeypatch):
    """
    Automatically isolate each test by:
    1. Running from a temporary working directory (no stray ./.stockmeta or .env)
    2. Pointing HOME at an empty directory (no ~/.stockmeta/config.yaml)
    3. Removing provider credentials and STOCKMETA_* variables
    """
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)

    for name in list(os.environ):
        if name.startswith(("STOCKMETA_", "OPENAI_", "ANTHROPIC_", "OLLAMA_", "GEMINI_", "GOOGLE_")):
            monkeypatch.delenv(name, raising=False)

    yield


@pytest.fixture
def sample_response():
    """A well-formed metadata-mode model response."""
    return SAMPLE_RESPONSE


@pytest.fixture
def scripted_provider():
    """Factory for in-memory providers: ``scripted_provider(response, error, ...)``."""
    return ScriptedProvider
