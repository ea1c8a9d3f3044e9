from pydantic import BaseModel, Field

from .recipe import Recipe


class RecipeFilter(BaseModel):
    title: str = ""
    ingredient_names: list[str] = Field(default_factory=list)
    # inclusive upper bound in minutes, 0 means no bound
    cook_time: int = 0
    tags: list[str] = Field(default_factory=list)


class RecipePage(BaseModel):
    recipes: list[Recipe]
    total: int
    page: int
    limit: int
    total_pages: int
