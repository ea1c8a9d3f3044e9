import uuid

from recipe_bank.core.exceptions import NotFoundError
from recipe_bank.schemas import Recipe, RecipeFilter, RecipePage

from .base import parse_recipe_id
from .query import RecipeQuery


class InMemoryRecipeRepository:
    """Process-local repository for development and tests."""

    def __init__(self) -> None:
        self._recipes: dict[str, Recipe] = {}

    async def create(self, recipe: Recipe) -> Recipe:
        recipe_id = str(uuid.uuid4())
        stored = recipe.model_copy(update={"id": recipe_id}, deep=True)
        self._recipes[recipe_id] = stored
        return stored.model_copy(deep=True)

    async def get_by_id(self, recipe_id: str) -> Recipe:
        return self._get(recipe_id).model_copy(deep=True)

    async def list(self, recipe_filter: RecipeFilter, page: int, limit: int) -> RecipePage:
        query = RecipeQuery.build(recipe_filter, page, limit)

        matching = [r for r in self._recipes.values() if query.matches(r)]
        # newest first; among equal timestamps the latest insert wins
        matching = sorted(reversed(matching), key=lambda r: r.created_at, reverse=True)

        window = matching[query.offset:query.offset + query.limit]
        return RecipePage(
            recipes=[r.model_copy(deep=True) for r in window],
            total=len(matching),
            page=query.page,
            limit=query.limit,
            total_pages=query.total_pages(len(matching)),
        )

    async def update(self, recipe_id: str, recipe: Recipe) -> Recipe:
        existing = self._get(recipe_id)
        stored = recipe.model_copy(
            update={"id": existing.id, "created_at": existing.created_at}, deep=True
        )
        self._recipes[existing.id] = stored
        return stored.model_copy(deep=True)

    async def delete(self, recipe_id: str) -> None:
        existing = self._get(recipe_id)
        del self._recipes[existing.id]

    async def close(self) -> None:
        self._recipes.clear()

    def _get(self, recipe_id: str) -> Recipe:
        key = str(parse_recipe_id(recipe_id))
        recipe = self._recipes.get(key)
        if recipe is None:
            raise NotFoundError("recipe", recipe_id)
        return recipe
