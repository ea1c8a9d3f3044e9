import asyncio
import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from recipe_bank import models
from recipe_bank.core.exceptions import DatabaseError, NotFoundError
from recipe_bank.schemas import Ingredient, Recipe, RecipeFilter, RecipePage

from .base import parse_recipe_id
from .query import RecipeQuery

logger = logging.getLogger(__name__)


def _to_schema(db_recipe: models.Recipe) -> Recipe:
    return Recipe(
        id=str(db_recipe.id),
        title=db_recipe.title,
        description=db_recipe.description,
        ingredients=[
            Ingredient(name=i.name, quantity=i.quantity, unit=i.unit)
            for i in db_recipe.ingredients
        ],
        steps=list(db_recipe.steps),
        cook_time=db_recipe.cook_time,
        servings=db_recipe.servings,
        tags=[t.name for t in db_recipe.tags],
        created_at=db_recipe.created_at,
        updated_at=db_recipe.updated_at,
    )


def _apply_fields(db_recipe: models.Recipe, recipe: Recipe) -> None:
    db_recipe.title = recipe.title
    db_recipe.description = recipe.description
    db_recipe.steps = list(recipe.steps)
    db_recipe.cook_time = recipe.cook_time
    db_recipe.servings = recipe.servings
    db_recipe.updated_at = recipe.updated_at
    db_recipe.ingredients = [
        models.RecipeIngredient(
            position=position, name=i.name, quantity=i.quantity, unit=i.unit
        )
        for position, i in enumerate(recipe.ingredients)
    ]
    db_recipe.tags = [
        models.RecipeTag(position=position, name=tag)
        for position, tag in enumerate(recipe.tags)
    ]


def _conditions(query: RecipeQuery) -> list:
    conditions = []
    if query.title:
        conditions.append(models.Recipe.title.icontains(query.title, autoescape=True))

    for name in query.ingredient_names:
        conditions.append(
            models.Recipe.ingredients.any(
                models.RecipeIngredient.name.icontains(name, autoescape=True)
            )
        )

    if query.max_cook_time:
        conditions.append(models.Recipe.cook_time <= query.max_cook_time)

    for tag in query.tags:
        conditions.append(models.Recipe.tags.any(models.RecipeTag.name == tag))

    return conditions


class SQLAlchemyRecipeRepository:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        engine: AsyncEngine | None = None,
        timeout: float = 5.0,
        list_timeout: float = 10.0,
    ) -> None:
        self.session_factory = session_factory
        self.engine = engine
        self.timeout = timeout
        self.list_timeout = list_timeout

    @asynccontextmanager
    async def _operation(self, action: str, timeout: float) -> AsyncIterator[AsyncSession]:
        try:
            async with asyncio.timeout(timeout):
                async with self.session_factory() as session:
                    yield session
        except TimeoutError as ex:
            logger.error(f"Database operation timed out: {action}")
            raise DatabaseError(f"timed out trying to {action}") from ex
        except SQLAlchemyError as ex:
            logger.error(f"Database operation failed: {action}: {ex}")
            raise DatabaseError(f"failed to {action}: {ex}") from ex

    async def create(self, recipe: Recipe) -> Recipe:
        db_recipe = models.Recipe(id=uuid.uuid4(), created_at=recipe.created_at)
        _apply_fields(db_recipe, recipe)

        async with self._operation("save recipe", self.timeout) as session:
            session.add(db_recipe)
            await session.commit()

        return recipe.model_copy(update={"id": str(db_recipe.id)}, deep=True)

    async def get_by_id(self, recipe_id: str) -> Recipe:
        uid = parse_recipe_id(recipe_id)

        async with self._operation("fetch recipe", self.timeout) as session:
            db_recipe = await session.get(models.Recipe, uid)
            if db_recipe is None:
                raise NotFoundError("recipe", recipe_id)
            return _to_schema(db_recipe)

    async def list(self, recipe_filter: RecipeFilter, page: int, limit: int) -> RecipePage:
        query = RecipeQuery.build(recipe_filter, page, limit)
        conditions = _conditions(query)

        count_stmt = select(func.count()).select_from(models.Recipe).where(*conditions)
        stmt = (
            select(models.Recipe)
            .where(*conditions)
            .order_by(models.Recipe.created_at.desc(), models.Recipe.id)
            .offset(query.offset)
            .limit(query.limit)
        )

        async with self._operation("fetch recipes", self.list_timeout) as session:
            total = await session.scalar(count_stmt) or 0
            result = await session.scalars(stmt)
            recipes = [_to_schema(r) for r in result.all()]

        return RecipePage(
            recipes=recipes,
            total=total,
            page=query.page,
            limit=query.limit,
            total_pages=query.total_pages(total),
        )

    async def update(self, recipe_id: str, recipe: Recipe) -> Recipe:
        uid = parse_recipe_id(recipe_id)

        async with self._operation("update recipe", self.timeout) as session:
            db_recipe = await session.get(models.Recipe, uid)
            if db_recipe is None:
                raise NotFoundError("recipe", recipe_id)

            _apply_fields(db_recipe, recipe)
            await session.commit()
            return _to_schema(db_recipe)

    async def delete(self, recipe_id: str) -> None:
        uid = parse_recipe_id(recipe_id)

        async with self._operation("delete recipe", self.timeout) as session:
            db_recipe = await session.get(models.Recipe, uid)
            if db_recipe is None:
                raise NotFoundError("recipe", recipe_id)

            await session.delete(db_recipe)
            await session.commit()

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
