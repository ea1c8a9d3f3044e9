from .base import Base
from .recipe import Recipe
from .ingredient import RecipeIngredient
from .tag import RecipeTag

__all__ = [
    "Base",
    "Recipe",
    "RecipeIngredient",
    "RecipeTag"
]
