import logging
from urllib.parse import urlparse

import httpx

from recipe_bank.core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


async def ensure_url_reachable(url: str, client: httpx.AsyncClient) -> None:
    """Probe ``url`` with a HEAD request and require a 2xx answer."""
    if not url:
        raise InvalidInputError("URL cannot be empty")

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidInputError(f"URL must be an absolute http(s) URL: {url}")

    try:
        response = await client.head(url, follow_redirects=True)
    except httpx.HTTPError as ex:
        logger.info(f"URL check failed for {url}: {ex}")
        raise InvalidInputError("URL could not be found or is not accessible") from ex

    if not response.is_success:
        logger.info(f"URL check for {url} answered {response.status_code}")
        raise InvalidInputError("URL could not be found or is not accessible")
