import pytest
import httpx
from httpx import ASGITransport

from recipe_bank.core.config import Settings
from recipe_bank.db.session import create_engine, create_session_factory
from recipe_bank.main import create_app
from recipe_bank.models import Base
from recipe_bank.repositories.memory_repository import InMemoryRecipeRepository
from recipe_bank.repositories.sqlalchemy_repository import SQLAlchemyRecipeRepository
from recipe_bank.services.recipe_service import RecipeService
from tests.fakes import FakeClock

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, DATABASE_URL=TEST_DATABASE_URL)


@pytest.fixture
async def db_engine(test_settings):
    engine = create_engine(test_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def sql_repository(db_engine) -> SQLAlchemyRecipeRepository:
    return SQLAlchemyRecipeRepository(create_session_factory(db_engine))


@pytest.fixture(params=["memory", "sqlalchemy"])
def repository(request, sql_repository):
    if request.param == "memory":
        return InMemoryRecipeRepository()
    return sql_repository


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recipe_app(test_settings, sql_repository, clock):
    app = create_app(test_settings, repository=sql_repository)
    app.state.recipe_service = RecipeService(sql_repository, clock=clock)
    return app


@pytest.fixture
async def async_client(recipe_app):
    async with httpx.AsyncClient(
        transport=ASGITransport(app=recipe_app), base_url="http://test"
    ) as client:
        yield client
