from .recipe_base import RecipeBase


class RecipeUpdate(RecipeBase):
    """Full replacement of every recipe field; there are no partial updates."""
