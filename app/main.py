from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Optional

import httpx
from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
import logging
from langchain_core.language_models.chat_models import BaseChatModel

from config.settings import Settings, get_settings
from mentor.chat import run_chat
from mentor.curriculum import generate_articles, generate_projects, generate_roadmap
from mentor.llm import build_llm
from mentor.tools import search_github, search_youtube


logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("mentor")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "Config: env=%s model=%s key_set=%s",
        settings.app_env,
        settings.gemini_model,
        bool(settings.google_api_key),
    )
    app.state.llm = build_llm(settings)
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        app.state.http_client = client
        yield
    app.state.llm = None


app = FastAPI(title="Learning Mentor API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allowed_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


def get_llm(request: Request) -> Optional[BaseChatModel]:
    return getattr(request.app.state, "llm", None)


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client
def _field(body: Any, name: str) -> Any:
    """Read one key from a JSON body; non-object bodies have no fields."""
    if isinstance(body, dict):
        return body.get(name)
    return None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Server is running"


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/api/roadmap")
async def roadmap(
    body: Any = Body(None),
    llm: Optional[BaseChatModel] = Depends(get_llm),
):
    topic = _field(body, "topic")
    if not topic:
        return _error(400, "Topic required")
    topic = str(topic)
    logger.info("Incoming roadmap: topic_len=%s", len(topic))
    return await generate_roadmap(llm, topic)


@app.post("/api/articles")
async def articles(
    body: Any = Body(None),
    llm: Optional[BaseChatModel] = Depends(get_llm),
):
    topic = _field(body, "topic")
    if not topic:
        return _error(400, "Topic required")
    topic = str(topic)
    logger.info("Incoming articles: topic_len=%s", len(topic))
    return await generate_articles(llm, topic)


@app.post("/api/projects")
async def projects(
    body: Any = Body(None),
    llm: Optional[BaseChatModel] = Depends(get_llm),
):
    topic = _field(body, "topic")
    if not topic:
        return _error(400, "Topic required")
    topic = str(topic)
    logger.info("Incoming projects: topic_len=%s", len(topic))
    return await generate_projects(llm, topic)


@app.post("/api/chat")
async def chat(
    body: Any = Body(None),
    llm: Optional[BaseChatModel] = Depends(get_llm),
):
    message = _field(body, "message")
    if not message:
        return _error(400, "Message is required")
    message = str(message)

    # Forwarded as sent; entries the model client cannot take end in the 500 fallback
    history: Any = _field(body, "history") or []
    logger.info(
        "Incoming chat: message_len=%s history_turns=%s",
        len(message),
        len(history) if isinstance(history, list) else "n/a",
    )
    result = await run_chat(llm, message, history)
    if result["error"]:
        return JSONResponse(status_code=500, content={"reply": result["reply"]})
    return {"reply": result["reply"]}


@app.post("/api/youtube")
async def youtube(
    body: Any = Body(None),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    query = _field(body, "query")
    if not query:
        return _error(400, "Query required")
    query = str(query)

    logger.info("Incoming youtube search: query_len=%s", len(query))
    try:
        return await search_youtube(client, settings, query)
    except Exception as exc:
        logger.error("YouTube Error: %s", exc)
        return _error(500, "YouTube API failed")


@app.post("/api/github")
async def github(
    body: Any = Body(None),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    query = _field(body, "query")
    if not query:
        return _error(400, "Query required")
    query = str(query)

    logger.info("Incoming github search: query_len=%s", len(query))
    try:
        return await search_github(client, settings, query)
    except Exception as exc:
        logger.error("GitHub Error: %s", exc)
        return _error(500, "GitHub API failed")
