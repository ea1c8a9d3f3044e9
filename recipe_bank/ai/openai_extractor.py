import base64
import logging

import httpx
import openai
from openai.types.chat import (
    ChatCompletionContentPartParam,
    ChatCompletionMessageParam,
)
from pydantic import ValidationError

from recipe_bank.core.config import DEFAULT_AI_MAX_TOKENS, DEFAULT_AI_MODEL
from recipe_bank.core.exceptions import AIError

from .base import ImageContentType
from .models import RECIPE_JSON_SCHEMA, RecipeAnalysisResult
from .prompts import EXTRACT_RECIPE_PROMPT, image_instruction, url_instruction
from .webpage import fetch_webpage

logger = logging.getLogger(__name__)


class OpenAIRecipeExtractor:
    def __init__(
        self,
        openai_client: openai.AsyncOpenAI,
        *,
        model: str = "",
        http_client: httpx.AsyncClient | None = None,
        max_tokens: int = DEFAULT_AI_MAX_TOKENS,
    ) -> None:
        self.openai_client = openai_client
        self.model = model or DEFAULT_AI_MODEL
        self.http_client = (
            httpx.AsyncClient(timeout=10, follow_redirects=True)
            if http_client is None
            else http_client
        )
        self.max_tokens = max_tokens

    async def analyze_image(
        self, image: bytes, content_type: ImageContentType
    ) -> RecipeAnalysisResult:
        data_uri = f"data:{content_type.value};base64,{base64.b64encode(image).decode('utf-8')}"
        content: list[ChatCompletionContentPartParam] = [
            {"type": "text", "text": image_instruction()},
            {"type": "image_url", "image_url": {"url": data_uri}},
        ]
        return await self._complete(content)

    async def analyze_url(self, url: str) -> RecipeAnalysisResult:
        try:
            page = await fetch_webpage(url, self.http_client)
        except httpx.HTTPError as ex:
            raise AIError(f"failed to fetch webpage {url}: {ex}") from ex

        if page.is_image:
            content: list[ChatCompletionContentPartParam] = [
                {"type": "text", "text": url_instruction(url)},
                {"type": "image_url", "image_url": {"url": url}},
            ]
            return await self._complete(content)

        return await self._complete(url_instruction(url, page.text))

    async def close(self) -> None:
        await self.http_client.aclose()
        await self.openai_client.close()

    async def _complete(
        self, content: str | list[ChatCompletionContentPartParam]
    ) -> RecipeAnalysisResult:
        messages: list[ChatCompletionMessageParam] = [
            {"role": "system", "content": EXTRACT_RECIPE_PROMPT},
            {"role": "user", "content": content},
        ]

        try:
            resp = await self.openai_client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_completion_tokens=self.max_tokens,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "recipe",
                        "strict": True,
                        "schema": RECIPE_JSON_SCHEMA,
                    },
                },
            )
        except openai.OpenAIError as ex:
            raise AIError(f"model request failed: {ex}") from ex

        if not resp.choices or not resp.choices[0].message.content:
            raise AIError("model returned no content")

        try:
            return RecipeAnalysisResult.model_validate_json(resp.choices[0].message.content)
        except ValidationError as ex:
            logger.warning(f"Could not decode model answer: {resp.choices[0].message.content!r}")
            raise AIError(f"failed to decode model answer: {ex}") from ex
