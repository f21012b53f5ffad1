from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

from config.settings import Settings


MIN_DURATION_SECONDS = 300
MAX_RESULTS = 10
SEARCH_PAGE_SIZE = 15
QUERY_SUFFIX = " tutorial OR course OR learn"

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")
_KEYWORD_RE = re.compile(r"tutorial|course|learn", re.IGNORECASE)


class YouTubeSearchError(RuntimeError):
    pass


class VideoRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: str = ""
    description: str = ""
    thumbnail: Optional[str] = None
    duration: str = ""
    duration_sec: int = Field(0, alias="durationSec")
    views: int = 0


def iso_duration_to_seconds(value: Any) -> int:
    """Decode an ISO-8601 ``PT#H#M#S`` duration; anything unparseable is 0."""
    if not isinstance(value, str):
        return 0
    match = _DURATION_RE.search(value)
    if not match:
        return 0
    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def _to_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _video_record(item: Dict[str, Any]) -> VideoRecord:
    snippet = item.get("snippet") or {}
    details = item.get("contentDetails") or {}
    statistics = item.get("statistics") or {}
    thumbnails = snippet.get("thumbnails") or {}
    duration = details.get("duration") or ""
    return VideoRecord(
        id=item.get("id"),
        title=snippet.get("title") or "",
        description=snippet.get("description") or "",
        thumbnail=(thumbnails.get("medium") or {}).get("url"),
        duration=duration,
        duration_sec=iso_duration_to_seconds(duration),
        views=_to_int(statistics.get("viewCount")),
    )


def rank_videos(videos: Iterable[VideoRecord]) -> List[VideoRecord]:
    """Keep long, learning-oriented videos, most viewed first.

    ``sorted`` is stable, so videos with equal view counts keep their
    input order.
    """
    kept = [
        video
        for video in videos
        if video.duration_sec >= MIN_DURATION_SECONDS
        and _KEYWORD_RE.search(video.title + video.description)
    ]
    return sorted(kept, key=lambda video: video.views, reverse=True)[:MAX_RESULTS]


async def _get_json(client: httpx.AsyncClient, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
    try:
        response = await client.get(url, params=params)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as exc:
        raise YouTubeSearchError(f"YouTube API call failed: {exc}") from exc
    except ValueError as exc:
        raise YouTubeSearchError(f"YouTube API returned invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise YouTubeSearchError("YouTube API returned an unexpected payload")
    return data


async def search_youtube(
    client: httpx.AsyncClient, settings: Settings, query: str
) -> List[Dict[str, Any]]:
    base_url = settings.youtube_api_url.rstrip("/")
    search_data = await _get_json(
        client,
        f"{base_url}/search",
        {
            "part": "snippet",
            "type": "video",
            "maxResults": SEARCH_PAGE_SIZE,
            "q": query + QUERY_SUFFIX,
            "key": settings.youtube_api_key or "",
        },
    )
    ids = [
        (item.get("id") or {}).get("videoId")
        for item in search_data.get("items") or []
    ]
    ids = [video_id for video_id in ids if video_id]
    if not ids:
        return []

    details_data = await _get_json(
        client,
        f"{base_url}/videos",
        {
            "part": "contentDetails,statistics,snippet",
            "id": ",".join(ids),
            "key": settings.youtube_api_key or "",
        },
    )
    videos = [_video_record(item) for item in details_data.get("items") or []]
    return [video.model_dump(by_alias=True) for video in rank_videos(videos)]
