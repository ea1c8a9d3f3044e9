import httpx
import pytest

from recipe_bank.ai.webpage import fetch_webpage, text_from_html


def test_text_from_html_keeps_readable_content():
    html = """
    <html>
      <head><style>h1 { color: red; }</style></head>
      <body>
        <header>Site header</header>
        <!-- ad slot -->
        <h1>Lemon Cake</h1>
        <ul><li>2 lemons</li><li>200 g sugar</li></ul>
        <form><input value="search"><button>Go</button></form>
        <script>console.log("x")</script>
        <footer>Copyright</footer>
      </body>
    </html>
    """

    assert text_from_html(html) == "Lemon Cake\n2 lemons\n200 g sugar"


def test_text_from_html_without_body():
    assert text_from_html("<p>Just   a fragment</p>") == "Just   a fragment"


def test_text_from_html_is_truncated():
    text = text_from_html(f"<body><p>{'a' * 100}</p></body>", max_chars=10)
    assert text == "a" * 10


@pytest.mark.asyncio
class TestFetchWebpage:
    async def test_html_page(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                text="<body><h1>Stew</h1></body>",
                headers={"Content-Type": "text/html; charset=utf-8"},
            )

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            page = await fetch_webpage("https://example.com/stew", client)

        assert page.content_type == "text/html"
        assert not page.is_image
        assert page.text == "Stew"

    async def test_image(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"\x89PNG", headers={"Content-Type": "image/PNG"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            page = await fetch_webpage("https://example.com/stew.png", client)

        assert page.is_image
        assert page.text == ""

    async def test_error_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await fetch_webpage("https://example.com/stew", client)
