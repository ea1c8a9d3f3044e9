from fastapi import Request

from recipe_bank.services.recipe_service import RecipeService


def get_recipe_service(request: Request) -> RecipeService:
    return request.app.state.recipe_service
