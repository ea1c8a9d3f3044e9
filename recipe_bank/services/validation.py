from recipe_bank.core.exceptions import RecipeValidationError
from recipe_bank.schemas import RecipeBase


def validate_recipe(recipe: RecipeBase | None) -> None:
    """
    Check the structural rules every stored recipe must satisfy.

    Raises RecipeValidationError for the first violated rule. Ingredient
    quantities may be zero, which stands for "unquantified" (salt to taste).
    """
    if recipe is None:
        raise RecipeValidationError("recipe is required")

    if not recipe.title.strip():
        raise RecipeValidationError("title is required")

    if not recipe.ingredients:
        raise RecipeValidationError("at least one ingredient is required")
    for i, ingredient in enumerate(recipe.ingredients):
        if not ingredient.name.strip():
            raise RecipeValidationError(f"ingredient {i}: name is required")
        if ingredient.quantity < 0:
            raise RecipeValidationError(f"ingredient {i}: quantity cannot be negative")

    if not recipe.steps:
        raise RecipeValidationError("at least one step is required")
    for i, step in enumerate(recipe.steps):
        if not step.strip():
            raise RecipeValidationError(f"step {i}: cannot be empty")

    if recipe.cook_time <= 0:
        raise RecipeValidationError("cook_time must be greater than 0")

    if recipe.servings <= 0:
        raise RecipeValidationError("servings must be greater than 0")
