"""Decoding of JSON payloads embedded in model output.

Models often wrap JSON in markdown fences or add a sentence before it. The
helpers here never raise: ``decode_model_json`` reports the outcome as a
``DecodeResult`` and the caller decides what to do on failure.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional


_FENCE = "```"


def _strip_code_fences(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith(_FENCE):
        stripped = stripped[3:]
        if stripped.startswith("json"):
            stripped = stripped[len("json"):].lstrip()
        stripped = stripped.rstrip()
        if stripped.endswith(_FENCE):
            stripped = stripped[:-3]
    # Stray fences elsewhere in the text
    return stripped.replace("```json", "").replace(_FENCE, "").strip()


def _extract_json_segment(text: str) -> Optional[str]:
    starts = [idx for idx in (text.find("{"), text.find("[")) if idx != -1]
    if not starts:
        return None
    start = min(starts)
    opener = text[start]
    closer = "}" if opener == "{" else "]"
    stack = 0
    in_string = False
    escaped = False
    for idx in range(start, len(text)):
        ch = text[idx]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == opener:
            stack += 1
        elif ch == closer:
            stack -= 1
            if stack == 0:
                return text[start: idx + 1]
    return None


@dataclass(frozen=True)
class DecodeResult:
    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "DecodeResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "DecodeResult":
        return cls(ok=False, error=error)


def decode_model_json(text: Any) -> DecodeResult:
    if not isinstance(text, str):
        return DecodeResult.failure(f"expected text, got {type(text).__name__}")

    cleaned = _strip_code_fences(text)
    if not cleaned:
        return DecodeResult.failure("empty model output")

    try:
        return DecodeResult.success(json.loads(cleaned))
    except json.JSONDecodeError as exc:
        first_error = str(exc)

    segment = _extract_json_segment(cleaned)
    if segment:
        try:
            return DecodeResult.success(json.loads(segment))
        except json.JSONDecodeError:
            pass
    return DecodeResult.failure(f"invalid JSON in model output: {first_error}")
