import asyncio

import httpx
import pytest

from mentor.tools.github_search import GitHubSearchError, search_github
from tests.conftest import json_transport, make_repo


def _search(settings, transport, query="flask"):
    async def go():
        async with httpx.AsyncClient(transport=transport) as client:
            return await search_github(client, settings, query)

    return asyncio.run(go())


def test_items_are_mapped_field_for_field(settings):
    seen = []

    def repos(request):
        seen.append(request)
        return httpx.Response(200, json={"items": [make_repo("mega-tutorial", stars=42)]})

    result = _search(settings, json_transport({"/search/repositories": repos}))

    assert result == [
        {
            "name": "mega-tutorial",
            "full_name": "octo/mega-tutorial",
            "description": "mega-tutorial examples",
            "url": "https://github.test/octo/mega-tutorial",
            "stars": 42,
            "language": "Python",
            "owner": "octo",
            "avatar": "https://avatars.test/octo.png",
        }
    ]
    request = seen[0]
    assert request.url.params["q"] == "flask tutorial example learning"
    assert request.url.params["sort"] == "stars"
    assert request.url.params["order"] == "desc"
    assert request.url.params["per_page"] == "10"
    assert request.headers["Authorization"] == "token test-github-key"


def test_order_is_preserved_without_ranking(settings):
    items = [make_repo("a", stars=1), make_repo("b", stars=99), make_repo("c", stars=5)]
    transport = json_transport(
        {"/search/repositories": lambda r: httpx.Response(200, json={"items": items})}
    )
    assert [repo["name"] for repo in _search(settings, transport)] == ["a", "b", "c"]


def test_null_language_and_description_pass_through(settings):
    item = make_repo("bare", language=None)
    item["description"] = None
    transport = json_transport(
        {"/search/repositories": lambda r: httpx.Response(200, json={"items": [item]})}
    )
    repo = _search(settings, transport)[0]
    assert repo["language"] is None
    assert repo["description"] is None


def test_authorization_header_is_omitted_without_key(settings):
    settings.github_api_key = None
    seen = []

    def repos(request):
        seen.append(request)
        return httpx.Response(200, json={"items": []})

    assert _search(settings, json_transport({"/search/repositories": repos})) == []
    assert "Authorization" not in seen[0].headers


def test_missing_items_is_an_empty_result(settings):
    transport = json_transport(
        {"/search/repositories": lambda r: httpx.Response(200, json={"total_count": 0})}
    )
    assert _search(settings, transport) == []


def test_unauthorized_response_raises(settings):
    transport = json_transport(
        {"/search/repositories": lambda r: httpx.Response(401, json={"message": "Bad credentials"})}
    )
    with pytest.raises(GitHubSearchError, match="GitHub API call failed"):
        _search(settings, transport)


def test_transport_error_raises(settings):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GitHubSearchError):
        _search(settings, httpx.MockTransport(boom))
