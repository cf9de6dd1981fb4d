"""Tests for REST API endpoints."""

import base64

import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.dependencies import get_provider_factory
from stockmeta.llm.errors import ConfigurationError, RateLimitError


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def factory(scripted_provider):
    """Replace the provider factory with one handing out a scripted provider."""

    class Factory:
        provider = scripted_provider()
        requested = []
        error = None

        def create_provider(self, provider_id="auto"):
            self.requested.append(provider_id)
            if self.error:
                raise self.error
            return self.provider

    instance = Factory()
    app.dependency_overrides[get_provider_factory] = lambda: instance
    yield instance
    app.dependency_overrides.pop(get_provider_factory, None)


def image_payload(**overrides):
    payload = {
        "image_base64": base64.b64encode(b"fake image bytes").decode("ascii"),
        "mime_type": "image/png",
        "filename": "volcano.png",
    }
    payload.update(overrides)
    return payload


class TestHealthEndpoints:
    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Stockmeta API"
        assert "version" in data

    def test_health(self, client):
        resp = client.get("/api/v1/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["categories"] == 21

    def test_version(self, client):
        resp = client.get("/api/v1/version")
        assert resp.status_code == 200
        assert "version" in resp.json()


class TestCategoryEndpoints:
    def test_list(self, client):
        resp = client.get("/api/v1/categories")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 21
        assert data[10]["name"] == "Landscapes"

    @pytest.mark.parametrize("name,code", [("Landscapes", 11), ("portraits", 13), ("  ICONS ", 8)])
    def test_resolve(self, client, name, code):
        resp = client.get("/api/v1/categories/resolve", params={"name": name})
        assert resp.status_code == 200
        assert resp.json()["code"] == code

    def test_resolve_unknown(self, client):
        resp = client.get("/api/v1/categories/resolve", params={"name": "Scenery"})
        assert resp.status_code == 404


class TestProcessEndpoints:
    def test_process(self, client, sample_response):
        resp = client.post("/api/v1/process", json={"text": sample_response, "filename": "volcano.jpg"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["category_code"] == 11
        assert data["title"] == "Erupting volcano with lava flow at night"
        assert data["keywords"][0] == "volcano"

    def test_process_garbage(self, client):
        resp = client.post("/api/v1/process", json={"text": "I cannot help with that."})
        assert resp.status_code == 200
        assert resp.json()["category_code"] == 0

    def test_process_missing_text(self, client):
        resp = client.post("/api/v1/process", json={})
        assert resp.status_code == 422

    def test_prompt_process(self, client):
        resp = client.post("/api/v1/prompt/process", json={"text": "PROMPT: A foggy harbor"})
        assert resp.status_code == 200
        assert resp.json() == {"prompt": "A foggy harbor"}


class TestMetadataEndpoint:
    def test_metadata(self, client, factory, sample_response):
        factory.provider.outcomes.append(sample_response)

        resp = client.post("/api/v1/metadata", json=image_payload(provider="openai"))

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "completed"
        assert data["filename"] == "volcano.png"
        assert data["metadata"]["category_name"] == "Landscapes"
        assert factory.requested[-1] == "cloud-openai"
        assert factory.provider.requests[-1].mime_type == "image/png"

    def test_prompt_mode(self, client, factory):
        factory.provider.outcomes.append("A volcano erupting under the stars")

        resp = client.post("/api/v1/metadata", json=image_payload(mode="prompt"))

        assert resp.status_code == 200
        assert resp.json()["prompt"] == {"prompt": "A volcano erupting under the stars"}

    def test_provider_error_is_result(self, client, factory):
        factory.provider.outcomes.append(RateLimitError("quota"))

        resp = client.post("/api/v1/metadata", json=image_payload())

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "error"
        assert "quota" in data["error"].lower()

    def test_unsupported_mime_type(self, client, factory):
        resp = client.post("/api/v1/metadata", json=image_payload(mime_type="image/tiff"))
        assert resp.status_code == 422

    def test_provider_unavailable(self, client, factory):
        factory.error = ConfigurationError("ANTHROPIC_API_KEY not set")

        resp = client.post("/api/v1/metadata", json=image_payload(provider="cloud-anthropic"))

        assert resp.status_code == 503
        assert "ANTHROPIC_API_KEY" in resp.json()["detail"]


class TestExportEndpoint:
    def test_export(self, client):
        results = [
            {
                "filename": "fox.jpg",
                "status": "completed",
                "metadata": {
                    "title": 'A "red" fox',
                    "keywords": ["fox", "snow"],
                    "category_code": 1,
                    "category_name": "Animals",
                },
            },
            {"filename": "lake.jpg", "status": "error", "error": "quota"},
        ]

        resp = client.post("/api/v1/export", json={"results": results, "target_extension": ".eps"})

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        assert 'filename="eps_metadata.csv"' in resp.headers["content-disposition"]
        assert resp.text == (
            '"Filename","Title","Keywords","Category"\n'
            '"fox.eps","A ""red"" fox","fox, snow","1"\n'
        )

    def test_export_invalid_extension(self, client):
        resp = client.post("/api/v1/export", json={"results": [], "target_extension": ".bmp"})
        assert resp.status_code == 422
