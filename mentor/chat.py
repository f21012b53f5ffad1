from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel

from mentor.core.fallbacks import CHAT_FALLBACK_REPLY
from mentor.core.prompt import CHAT_SYSTEM_PROMPT
from mentor.llm import complete_chat


logger = logging.getLogger("mentor")


async def run_chat(
    llm: Optional[BaseChatModel],
    message: str,
    history: Sequence[Dict[str, Any]],
) -> Dict[str, Optional[str]]:
    """Answer one mentor chat turn.

    Returns ``{"reply": ..., "error": None}`` on success. On failure the reply
    is the static fallback and ``error`` holds the cause.
    """
    try:
        reply = await complete_chat(llm, CHAT_SYSTEM_PROMPT, message, history)
    except Exception as exc:
        logger.error("Chatbot Error: %s", exc)
        return {"reply": CHAT_FALLBACK_REPLY, "error": str(exc)}

    return {"reply": reply.strip(), "error": None}
