"""
Shared pytest fixtures for the learning mentor API.

The FastAPI app is exercised through ``TestClient`` without entering its
lifespan; the chat model, HTTP client and settings are swapped in through
``app.dependency_overrides``.
"""

import json
from typing import Callable, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from app.main import app, get_http_client, get_llm
from config.settings import Settings, get_settings


# ===== SETTINGS =====


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at fake upstream hosts with known keys."""
    s = Settings()
    s.google_api_key = "test-google-key"
    s.youtube_api_key = "test-youtube-key"
    s.youtube_api_url = "https://youtube.test/v3"
    s.github_api_key = "test-github-key"
    s.github_api_url = "https://github.test"
    return s


# ===== LLM DOUBLES =====


def fake_llm(*responses: str) -> FakeListChatModel:
    return FakeListChatModel(responses=list(responses))


def failing_llm(error: Optional[Exception] = None) -> MagicMock:
    llm = MagicMock()
    llm.ainvoke = AsyncMock(side_effect=error or RuntimeError("provider unavailable"))
    return llm


# ===== UPSTREAM PAYLOADS =====


def make_video(
    video_id: str,
    title: str = "Python tutorial",
    description: str = "",
    duration: str = "PT10M",
    views: Optional[str] = "100",
) -> Dict:
    statistics = {} if views is None else {"viewCount": views}
    return {
        "id": video_id,
        "snippet": {
            "title": title,
            "description": description,
            "thumbnails": {"medium": {"url": f"https://img.test/{video_id}.jpg"}},
        },
        "contentDetails": {"duration": duration},
        "statistics": statistics,
    }


def make_repo(name: str, stars: int = 10, language: Optional[str] = "Python") -> Dict:
    return {
        "name": name,
        "full_name": f"octo/{name}",
        "description": f"{name} examples",
        "html_url": f"https://github.test/octo/{name}",
        "stargazers_count": stars,
        "language": language,
        "owner": {"login": "octo", "avatar_url": "https://avatars.test/octo.png"},
    }


def json_transport(routes: Dict[str, Callable[[httpx.Request], httpx.Response]]) -> httpx.MockTransport:
    """Dispatch requests on URL path to per-route handlers."""

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        return route(request)

    return httpx.MockTransport(handler)


# ===== APP CLIENT =====


@pytest.fixture
def client_factory(settings):
    """Build a TestClient with the given LLM and upstream transport."""

    def build(llm=None, transport: Optional[httpx.MockTransport] = None) -> TestClient:
        http_client = httpx.AsyncClient(
            transport=transport or httpx.MockTransport(lambda r: httpx.Response(500))
        )
        app.dependency_overrides[get_llm] = lambda: llm
        app.dependency_overrides[get_http_client] = lambda: http_client
        app.dependency_overrides[get_settings] = lambda: settings
        return TestClient(app)

    yield build
    app.dependency_overrides.clear()


@pytest.fixture
def roadmap_json() -> str:
    return json.dumps({"roadmap": ["Variables", "Functions", "Classes"]})
