import uuid
from typing import Protocol

from recipe_bank.core.exceptions import InvalidIDError
from recipe_bank.schemas import Recipe, RecipeFilter, RecipePage


class RecipeRepository(Protocol):
    """Storage contract the service layer relies on."""

    async def create(self, recipe: Recipe) -> Recipe:
        """Store ``recipe`` under a new id and return the stored record."""

    async def get_by_id(self, recipe_id: str) -> Recipe:
        """Return a recipe, raising ``NotFoundError`` or ``InvalidIDError``."""

    async def list(self, recipe_filter: RecipeFilter, page: int, limit: int) -> RecipePage:
        """Return one page of matching recipes, newest first."""

    async def update(self, recipe_id: str, recipe: Recipe) -> Recipe:
        """Replace every field but ``id`` and ``created_at``."""

    async def delete(self, recipe_id: str) -> None:
        """Remove a recipe, raising ``NotFoundError`` when it does not exist."""

    async def close(self) -> None:
        """Release pooled resources."""


def parse_recipe_id(recipe_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(recipe_id)
    except (TypeError, ValueError, AttributeError) as ex:
        raise InvalidIDError(f"invalid recipe ID {recipe_id!r}: {ex}") from ex
