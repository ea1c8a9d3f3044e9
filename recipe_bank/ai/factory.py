import logging

import httpx
import openai

from recipe_bank.core.config import Settings

from .base import RecipeExtractor
from .openai_extractor import OpenAIRecipeExtractor

logger = logging.getLogger(__name__)


def build_extractor(settings: Settings) -> RecipeExtractor | None:
    provider = settings.AI_PROVIDER.lower()

    if provider == "openai":
        logger.info(f"AI recipe extraction enabled with model {settings.AI_MODEL}")
        client = openai.AsyncOpenAI(
            api_key=settings.AI_API_KEY,
            timeout=settings.AI_TIMEOUT_SECONDS,
            max_retries=0,
        )
        return OpenAIRecipeExtractor(
            client,
            model=settings.AI_MODEL,
            http_client=httpx.AsyncClient(
                timeout=settings.WEBPAGE_FETCH_TIMEOUT_SECONDS, follow_redirects=True
            ),
            max_tokens=settings.AI_MAX_TOKENS,
        )

    logger.warning(
        f"Empty or unsupported AI provider {settings.AI_PROVIDER!r}, running without AI"
    )
    return None
