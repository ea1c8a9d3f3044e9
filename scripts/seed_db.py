import asyncio
import json
import sys
import os
from pathlib import Path
from sqlalchemy import delete

sys.path.append(os.getcwd())

from recipe_bank.core.config import Settings
from recipe_bank.db.session import create_engine, create_session_factory
from recipe_bank.models import Recipe
from recipe_bank.repositories.sqlalchemy_repository import SQLAlchemyRecipeRepository
from recipe_bank.schemas import RecipeCreate
from recipe_bank.services.recipe_service import RecipeService

BASE_DIR = Path(__file__).parents[1]
RECIPES_PATH = BASE_DIR / "datasets" / "recipe_samples.json"

async def seed():
    print("Seeding database...")

    settings = Settings()
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)
    service = RecipeService(SQLAlchemyRecipeRepository(session_factory, engine=engine))

    async with session_factory() as db:
        print(" - Cleaning old data...")
        await db.execute(delete(Recipe))
        await db.commit()

    print(" - Loading recipes...")
    with open(RECIPES_PATH) as f:
        recipes_data = json.load(f)

    for r_data in recipes_data:
        await service.create_recipe(RecipeCreate(**r_data))

    print(f"Successfully inserted {len(recipes_data)} recipes.")
    await service.repository.close()

if __name__ == "__main__":
    asyncio.run(seed())
