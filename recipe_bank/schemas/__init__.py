from .ingredient import Ingredient
from .recipe_base import INT32_MAX, Int32, RecipeBase
from .recipe_create import RecipeCreate
from .recipe_update import RecipeUpdate
from .recipe import Recipe
from .recipe_filter import RecipeFilter, RecipePage
from .recipe_ai import RecipeFromImageRequest, RecipeFromURLRequest
from .api_response import APIError, APIResponse

__all__ = [
    "Ingredient",
    "INT32_MAX",
    "Int32",
    "RecipeBase",
    "RecipeCreate",
    "RecipeUpdate",
    "Recipe",
    "RecipeFilter",
    "RecipePage",
    "RecipeFromImageRequest",
    "RecipeFromURLRequest",
    "APIError",
    "APIResponse"
]
