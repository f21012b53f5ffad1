"""Static payloads returned when an upstream call fails.

Callers receive fresh copies so a handler can never mutate the shared data.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List


_ROADMAP: Dict[str, List[str]] = {
    "roadmap": [
        "Learn fundamentals",
        "Understand core concepts",
        "Practice with examples",
        "Build projects",
        "Advanced topics",
    ]
}

_ARTICLES: List[Dict[str, str]] = [
    {
        "title": "Getting Started Guide",
        "description": "Beginner friendly introduction",
        "author": "freeCodeCamp",
        "url": "#",
    }
]

_PROJECTS: List[str] = [
    "Build a simple app",
    "Create a small game",
    "Develop a portfolio project",
    "Automate a task",
    "Open-source contribution",
]

CHAT_FALLBACK_REPLY = (
    "I am unable to respond right now. Please ask an education-related question again."
)


def roadmap_fallback() -> Dict[str, Any]:
    return copy.deepcopy(_ROADMAP)


def articles_fallback() -> List[Dict[str, str]]:
    return copy.deepcopy(_ARTICLES)


def projects_fallback() -> List[str]:
    return list(_PROJECTS)
