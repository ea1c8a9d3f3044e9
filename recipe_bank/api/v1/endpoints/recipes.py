from typing import Any

from fastapi import APIRouter, Depends, Query, Response

from recipe_bank.api.deps import get_recipe_service
from recipe_bank.core.exceptions import MissingPathParamError
from recipe_bank.schemas import (
    INT32_MAX,
    APIResponse,
    Recipe,
    RecipeCreate,
    RecipeFilter,
    RecipeFromImageRequest,
    RecipeFromURLRequest,
    RecipePage,
    RecipeUpdate,
)
from recipe_bank.services.recipe_service import RecipeService

router = APIRouter()


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _require_path_id(recipe_id: str) -> str:
    if not recipe_id.strip():
        raise MissingPathParamError("id")
    return recipe_id


@router.get("", response_model=APIResponse[RecipePage], response_model_exclude_none=True)
async def read_recipes(
    *,
    service: RecipeService = Depends(get_recipe_service),
    page: int = Query(1, le=INT32_MAX, description="Page number"),
    limit: int = Query(10, le=INT32_MAX, description="Number of recipes per page, at most 100"),
    title: str = Query("", description="Case-insensitive part of the title"),
    cook_time: int = Query(0, le=INT32_MAX, description="Maximum cook time in minutes"),
    ingredients: str | None = Query(None, description="Comma-separated ingredient names"),
    tags: str | None = Query(None, description="Comma-separated tags"),
) -> Any:
    recipe_filter = RecipeFilter(
        title=title,
        cook_time=cook_time,
        ingredient_names=_split_csv(ingredients),
        tags=_split_csv(tags),
    )
    recipe_page = await service.get_recipes(recipe_filter, page=page, limit=limit)
    return {"success": True, "data": recipe_page}


@router.get("/{recipe_id}", response_model=APIResponse[Recipe], response_model_exclude_none=True)
async def read_recipe_by_id(
    *, service: RecipeService = Depends(get_recipe_service), recipe_id: str
) -> Any:
    recipe = await service.get_recipe(_require_path_id(recipe_id))
    return {"success": True, "data": recipe}


@router.post(
    "",
    response_model=APIResponse[Recipe],
    response_model_exclude_none=True,
    status_code=201,
)
async def create_new_recipe(
    *, service: RecipeService = Depends(get_recipe_service), recipe_in: RecipeCreate
) -> Any:
    recipe = await service.create_recipe(recipe_in)
    return {"success": True, "data": recipe}


@router.put("/{recipe_id}", response_model=APIResponse[Recipe], response_model_exclude_none=True)
async def update_existing_recipe(
    *,
    service: RecipeService = Depends(get_recipe_service),
    recipe_id: str,
    recipe_in: RecipeUpdate,
) -> Any:
    recipe = await service.update_recipe(_require_path_id(recipe_id), recipe_in)
    return {"success": True, "data": recipe}


@router.delete("/{recipe_id}", status_code=204, response_class=Response)
async def delete_existing_recipe(
    *, service: RecipeService = Depends(get_recipe_service), recipe_id: str
) -> Response:
    await service.delete_recipe(_require_path_id(recipe_id))
    return Response(status_code=204)


@router.post(
    "/ai/from-image",
    response_model=APIResponse[Recipe],
    response_model_exclude_none=True,
    status_code=201,
    tags=["ai-recipes"],
)
async def create_recipe_from_image(
    *,
    service: RecipeService = Depends(get_recipe_service),
    request_in: RecipeFromImageRequest,
) -> Any:
    recipe = await service.create_recipe_from_image(request_in.image, request_in.image_type)
    return {"success": True, "data": recipe}


@router.post(
    "/ai/from-url",
    response_model=APIResponse[Recipe],
    response_model_exclude_none=True,
    status_code=201,
    tags=["ai-recipes"],
)
async def create_recipe_from_url(
    *,
    service: RecipeService = Depends(get_recipe_service),
    request_in: RecipeFromURLRequest,
) -> Any:
    recipe = await service.create_recipe_from_url(request_in.url)
    return {"success": True, "data": recipe}
