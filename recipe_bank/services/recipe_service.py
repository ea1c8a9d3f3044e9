import logging
from datetime import datetime, timezone
from typing import Callable

import httpx

from recipe_bank.ai import RecipeExtractor
from recipe_bank.core.exceptions import AIUnsupportedError, InvalidInputError
from recipe_bank.repositories.base import RecipeRepository
from recipe_bank.schemas import (
    Recipe,
    RecipeBase,
    RecipeCreate,
    RecipeFilter,
    RecipePage,
    RecipeUpdate,
)

from .image_service import decode_image
from .url_service import ensure_url_reachable
from .validation import validate_recipe

logger = logging.getLogger(__name__)

URL_CHECK_TIMEOUT = 5.0


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_recipe(recipe_in: RecipeBase, **timestamps: datetime) -> Recipe:
    fields = recipe_in.model_dump(include=set(RecipeBase.model_fields))
    # tags are a set, first occurrence wins
    fields["tags"] = list(dict.fromkeys(fields["tags"]))
    return Recipe(**fields, **timestamps)


def _require_id(recipe_id: str) -> None:
    if not recipe_id or not recipe_id.strip():
        raise InvalidInputError("recipe ID cannot be empty")


class RecipeService:
    """
    Validation and bookkeeping in front of a RecipeRepository.

    AI extraction is only available when an extractor is given. Extraction
    never stores anything by itself: ``create_recipe_from_image`` and
    ``create_recipe_from_url`` hand the extracted draft to ``create_recipe``.
    """

    def __init__(
        self,
        repository: RecipeRepository,
        extractor: RecipeExtractor | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        url_check_timeout: float = URL_CHECK_TIMEOUT,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.repository = repository
        self.extractor = extractor
        self.http_client = http_client
        self.url_check_timeout = url_check_timeout
        self.clock = clock

    async def get_recipe(self, recipe_id: str) -> Recipe:
        _require_id(recipe_id)
        return await self.repository.get_by_id(recipe_id)

    async def get_recipes(self, recipe_filter: RecipeFilter, page: int, limit: int) -> RecipePage:
        return await self.repository.list(recipe_filter, page, limit)

    async def create_recipe(self, recipe_in: RecipeBase | None) -> Recipe:
        validate_recipe(recipe_in)

        now = self.clock()
        recipe = _to_recipe(recipe_in, created_at=now, updated_at=now)
        created = await self.repository.create(recipe)
        logger.info(f"Created recipe {created.id}")
        return created

    async def update_recipe(self, recipe_id: str, recipe_in: RecipeUpdate | None) -> Recipe:
        _require_id(recipe_id)
        validate_recipe(recipe_in)

        recipe = _to_recipe(recipe_in, updated_at=self.clock())
        return await self.repository.update(recipe_id, recipe)

    async def delete_recipe(self, recipe_id: str) -> None:
        _require_id(recipe_id)
        await self.repository.delete(recipe_id)
        logger.info(f"Deleted recipe {recipe_id}")

    async def extract_recipe_from_image(self, image: str, image_type: str) -> RecipeCreate:
        extractor = self._require_extractor()
        data, content_type = decode_image(image, image_type)

        result = await extractor.analyze_image(data, content_type)
        return RecipeCreate(**result.model_dump())

    async def extract_recipe_from_url(self, url: str) -> RecipeCreate:
        extractor = self._require_extractor()
        url = url.strip()

        if self.http_client is not None:
            await ensure_url_reachable(url, self.http_client)
        else:
            async with httpx.AsyncClient(timeout=self.url_check_timeout) as client:
                await ensure_url_reachable(url, client)

        result = await extractor.analyze_url(url)
        return RecipeCreate(**result.model_dump())

    async def create_recipe_from_image(self, image: str, image_type: str) -> Recipe:
        draft = await self.extract_recipe_from_image(image, image_type)
        return await self.create_recipe(draft)

    async def create_recipe_from_url(self, url: str) -> Recipe:
        draft = await self.extract_recipe_from_url(url)
        return await self.create_recipe(draft)

    def _require_extractor(self) -> RecipeExtractor:
        if self.extractor is None:
            raise AIUnsupportedError("no AI provider is configured")
        return self.extractor
