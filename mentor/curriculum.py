"""Topic-driven generators for the roadmap, articles and projects endpoints.

Each generator asks the model for JSON, decodes it and checks its shape.
Any failure along the way is logged and replaced by the endpoint's static
fallback, so these functions always return a payload.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from pydantic import BaseModel, ValidationError, field_validator

from mentor.core import fallbacks
from mentor.core.prompt import (
    ARTICLES_PROMPT,
    ARTICLES_SYSTEM_PROMPT,
    PROJECTS_PROMPT,
    PROJECTS_SYSTEM_PROMPT,
    ROADMAP_PROMPT,
    ROADMAP_SYSTEM_PROMPT,
)
from mentor.llm import complete_prompt
from mentor.parsing import DecodeResult, decode_model_json


logger = logging.getLogger("mentor")


class Article(BaseModel):
    title: str = ""
    description: str = ""
    author: str = ""
    url: str = ""

    @field_validator("title", "description", "author", "url", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _check_roadmap(value: Any) -> Optional[Dict[str, Any]]:
    if isinstance(value, dict) and _is_string_list(value.get("roadmap")):
        return value
    return None


def _check_articles(value: Any) -> Optional[List[Dict[str, str]]]:
    if not isinstance(value, list):
        return None
    try:
        return [Article.model_validate(item).model_dump() for item in value]
    except ValidationError:
        return None


def _check_projects(value: Any) -> Optional[List[str]]:
    return value if _is_string_list(value) else None


async def _generate(
    label: str,
    llm: Optional[BaseChatModel],
    system_prompt: str,
    user_template: str,
    topic: str,
    check: Callable[[Any], Any],
    fallback: Callable[[], Any],
) -> Any:
    try:
        raw = await complete_prompt(llm, system_prompt, user_template, topic=topic)
    except Exception as exc:
        logger.error("%s Error: %s", label, exc)
        return fallback()

    decoded: DecodeResult = decode_model_json(raw)
    if not decoded.ok:
        logger.error("%s Error: %s", label, decoded.error)
        return fallback()

    payload = check(decoded.value)
    if payload is None:
        logger.error("%s Error: unexpected payload shape", label)
        return fallback()
    return payload


async def generate_roadmap(llm: Optional[BaseChatModel], topic: str) -> Dict[str, Any]:
    return await _generate(
        "Roadmap",
        llm,
        ROADMAP_SYSTEM_PROMPT,
        ROADMAP_PROMPT,
        topic,
        _check_roadmap,
        fallbacks.roadmap_fallback,
    )


async def generate_articles(llm: Optional[BaseChatModel], topic: str) -> List[Dict[str, str]]:
    return await _generate(
        "Articles",
        llm,
        ARTICLES_SYSTEM_PROMPT,
        ARTICLES_PROMPT,
        topic,
        _check_articles,
        fallbacks.articles_fallback,
    )


async def generate_projects(llm: Optional[BaseChatModel], topic: str) -> List[str]:
    return await _generate(
        "Projects",
        llm,
        PROJECTS_SYSTEM_PROMPT,
        PROJECTS_PROMPT,
        topic,
        _check_projects,
        fallbacks.projects_fallback,
    )
