import bs4
import httpx
from pydantic import BaseModel

MAX_PAGE_CHARS = 20000

NON_CONTENT_TAGS = [
    "script",
    "style",
    "svg",
    "iframe",
    "nav",
    "footer",
    "header",
    "button",
    "noscript",
    "input",
    "textarea",
    "select",
    "form",
]


class Webpage(BaseModel):
    url: str
    content_type: str
    text: str = ""

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")


def text_from_html(html: str, max_chars: int = MAX_PAGE_CHARS) -> str:
    """Reduce an HTML document to the readable text of its body."""
    soup = bs4.BeautifulSoup(html, features="html.parser")
    root = soup.body or soup

    for tag in root.find_all(NON_CONTENT_TAGS):
        tag.decompose()
    for comment in root.find_all(string=lambda s: isinstance(s, bs4.Comment)):
        comment.extract()

    lines = (line.strip() for line in root.get_text(separator="\n").splitlines())
    return "\n".join(line for line in lines if line)[:max_chars]


async def fetch_webpage(url: str, client: httpx.AsyncClient) -> Webpage:
    resp = await client.get(url, follow_redirects=True)
    resp.raise_for_status()

    content_type = resp.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type.startswith("image/"):
        return Webpage(url=url, content_type=content_type)
    return Webpage(url=url, content_type=content_type, text=text_from_html(resp.text))
