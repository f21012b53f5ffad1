from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder
from langchain_google_genai import ChatGoogleGenerativeAI

from config.settings import Settings


logger = logging.getLogger("mentor")


class LLMUnavailableError(RuntimeError):
    """Raised when a prompt is sent without a configured chat model."""


def build_llm(settings: Settings) -> Optional[BaseChatModel]:
    """Create the chat model used by every LLM-backed endpoint.

    Returns ``None`` when no API key is configured so the application can
    still start; the affected endpoints then answer with their fallbacks.
    """
    if not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY not set; LLM endpoints will use fallbacks")
        return None

    return ChatGoogleGenerativeAI(
        model=settings.gemini_model,
        google_api_key=settings.google_api_key,
        temperature=settings.temperature,
        top_p=settings.top_p,
    )


def to_lc_messages(history: Sequence[Dict[str, Any]]) -> List[BaseMessage]:
    messages: List[BaseMessage] = []
    for item in history or []:
        role = (item.get("role") or "").lower()
        content = item.get("content")
        if content is None:
            content = ""
        elif not isinstance(content, (str, list)):
            content = str(content)
        if role in ("user", "human"):
            messages.append(HumanMessage(content=content))
        elif role in ("assistant", "ai", "bot"):
            messages.append(AIMessage(content=content))
        elif role == "system":
            messages.append(SystemMessage(content=content))
        else:
            # Unknown roles are sent as the user speaking
            messages.append(HumanMessage(content=content))
    return messages


def message_text(message: Any) -> str:
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text") or "")
        return "".join(parts)
    return str(content or "")


async def complete_prompt(
    llm: Optional[BaseChatModel],
    system_prompt: str,
    user_template: str,
    **variables: Any,
) -> str:
    """Render a system/user prompt pair and return the model's raw text."""
    if llm is None:
        raise LLMUnavailableError("LLM client not configured")

    prompt = ChatPromptTemplate.from_messages(
        [
            ("system", system_prompt),
            ("human", user_template),
        ]
    )
    response = await llm.ainvoke(prompt.format_messages(**variables))
    return message_text(response)


async def complete_chat(
    llm: Optional[BaseChatModel],
    system_prompt: str,
    message: str,
    history: Sequence[Dict[str, Any]],
) -> str:
    if llm is None:
        raise LLMUnavailableError("LLM client not configured")

    prompt = ChatPromptTemplate.from_messages(
        [
            SystemMessage(content=system_prompt),
            MessagesPlaceholder("history", optional=True),
            ("human", "{message}"),
        ]
    )
    response = await llm.ainvoke(
        prompt.format_messages(history=to_lc_messages(history), message=message)
    )
    return message_text(response)
