from datetime import datetime

from .recipe_base import RecipeBase


class Recipe(RecipeBase):
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
