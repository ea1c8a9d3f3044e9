from fastapi import APIRouter

from recipe_bank.api.v1.endpoints import recipes

api_router = APIRouter()
api_router.include_router(recipes.router, prefix="/recipe", tags=["recipes"])
