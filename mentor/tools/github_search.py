from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel

from config.settings import Settings


QUERY_SUFFIX = " tutorial example learning"
PER_PAGE = 10


class GitHubSearchError(RuntimeError):
    pass


class RepoRecord(BaseModel):
    name: Optional[str] = None
    full_name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    stars: int = 0
    language: Optional[str] = None
    owner: Optional[str] = None
    avatar: Optional[str] = None


def _repo_record(item: Dict[str, Any]) -> RepoRecord:
    owner = item.get("owner") or {}
    return RepoRecord(
        name=item.get("name"),
        full_name=item.get("full_name"),
        description=item.get("description"),
        url=item.get("html_url"),
        stars=item.get("stargazers_count") or 0,
        language=item.get("language"),
        owner=owner.get("login"),
        avatar=owner.get("avatar_url"),
    )


def _headers(settings: Settings) -> Dict[str, str]:
    headers = {"Accept": "application/vnd.github+json"}
    if settings.github_api_key:
        headers["Authorization"] = f"token {settings.github_api_key}"
    return headers


async def search_github(
    client: httpx.AsyncClient, settings: Settings, query: str
) -> List[Dict[str, Any]]:
    url = f"{settings.github_api_url.rstrip('/')}/search/repositories"
    params = {
        "q": query + QUERY_SUFFIX,
        "sort": "stars",
        "order": "desc",
        "per_page": PER_PAGE,
    }

    try:
        response = await client.get(url, params=params, headers=_headers(settings))
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as exc:
        raise GitHubSearchError(f"GitHub API call failed: {exc}") from exc
    except ValueError as exc:
        raise GitHubSearchError(f"GitHub API returned invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise GitHubSearchError("GitHub API returned an unexpected payload")

    return [_repo_record(item).model_dump() for item in data.get("items") or []]
