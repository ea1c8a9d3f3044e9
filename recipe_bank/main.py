import sys
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from recipe_bank.ai.base import RecipeExtractor
from recipe_bank.ai.factory import build_extractor
from recipe_bank.api.errors import register_exception_handlers
from recipe_bank.api.middleware import BodySizeLimitMiddleware
from recipe_bank.api.v1.api import api_router
from recipe_bank.core.config import Settings
from recipe_bank.db.session import create_engine, create_session_factory
from recipe_bank.repositories.base import RecipeRepository
from recipe_bank.repositories.sqlalchemy_repository import SQLAlchemyRecipeRepository
from recipe_bank.services.recipe_service import RecipeService

logger = logging.getLogger(__name__)


class RootResponse(BaseModel):
    status: str
    project_name: str
    version: str
    ai_enabled: bool
    documentation_url: str


def create_app(
    settings: Settings | None = None,
    *,
    repository: RecipeRepository | None = None,
    extractor: RecipeExtractor | None = None,
) -> FastAPI:
    """
    Wire the application together.

    Anything not passed in is built from ``settings``: the SQL repository from
    the DB_* variables and the AI extractor from the AI_* variables.
    """
    settings = Settings() if settings is None else settings

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(), handlers=[logging.StreamHandler(sys.stdout)]
    )

    if repository is None:
        engine = create_engine(settings)
        repository = SQLAlchemyRecipeRepository(
            create_session_factory(engine),
            engine=engine,
            timeout=settings.DB_TIMEOUT_SECONDS,
            list_timeout=settings.DB_LIST_TIMEOUT_SECONDS,
        )
    if extractor is None:
        extractor = build_extractor(settings)

    recipe_service = RecipeService(
        repository,
        extractor,
        url_check_timeout=settings.URL_CHECK_TIMEOUT_SECONDS,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"API server starting on {settings.APP_HOST}:{settings.APP_PORT}")
        yield
        await repository.close()
        if extractor is not None:
            await extractor.close()

    app = FastAPI(title="Recipe Bank", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.recipe_service = recipe_service

    app.add_middleware(BodySizeLimitMiddleware, max_body_size=settings.MAX_REQUEST_BODY_BYTES)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"Incoming request: {request.method} {request.url.path}")
        return await call_next(request)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/", response_model=RootResponse, tags=["Root"])
    def read_root(request: Request):
        return {
            "status": "ok",
            "project_name": app.title,
            "version": app.version,
            "ai_enabled": request.app.state.recipe_service.extractor is not None,
            "documentation_url": "/docs",
        }

    return app


def run() -> None:
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
