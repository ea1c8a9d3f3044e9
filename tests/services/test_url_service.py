import httpx
import pytest

from recipe_bank.core.exceptions import InvalidInputError
from recipe_bank.services.url_service import ensure_url_reachable


def handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/moved":
        return httpx.Response(301, headers={"Location": "https://example.com/recipe"})
    if request.url.path == "/recipe":
        return httpx.Response(200)
    if request.url.path == "/down":
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Response(404)


@pytest.fixture
async def client():
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        yield client


@pytest.mark.asyncio
class TestEnsureURLReachable:
    async def test_reachable(self, client):
        await ensure_url_reachable("https://example.com/recipe", client)

    async def test_follows_redirects(self, client):
        await ensure_url_reachable("https://example.com/moved", client)

    async def test_uses_head(self):
        methods = []

        def record(request: httpx.Request) -> httpx.Response:
            methods.append(request.method)
            return httpx.Response(200)

        async with httpx.AsyncClient(transport=httpx.MockTransport(record)) as client:
            await ensure_url_reachable("http://example.com/", client)

        assert methods == ["HEAD"]

    @pytest.mark.parametrize(
        "url, message",
        [
            ("", "URL cannot be empty"),
            ("example.com/recipe", "absolute http"),
            ("ftp://example.com/recipe", "absolute http"),
            ("https://example.com/gone", "not accessible"),
            ("https://example.com/down", "not accessible"),
        ],
    )
    async def test_unreachable(self, client, url, message):
        with pytest.raises(InvalidInputError, match=message):
            await ensure_url_reachable(url, client)
