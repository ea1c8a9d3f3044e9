from pathlib import Path

from pydantic import computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

DEFAULT_AI_MODEL = "gpt-4.1-mini-2025-04-14"
DEFAULT_AI_MAX_TOKENS = 2000


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 9876
    LOG_LEVEL: str = "INFO"

    BACKEND_CORS_ORIGINS: list[str] = []

    MAX_REQUEST_BODY_BYTES: int = 1 << 20

    # full async URL, takes precedence over the DB_* parts
    DATABASE_URL: str = ""

    DB_HOST: str = "postgres"
    DB_PORT: int = 5432
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_PASSWORD_FILE: str = ""
    DB_NAME: str = ""
    DB_ECHO: bool = False
    DB_TIMEOUT_SECONDS: float = 5.0
    DB_LIST_TIMEOUT_SECONDS: float = 10.0

    AI_PROVIDER: str = ""
    AI_API_KEY: str = ""
    AI_MODEL: str = DEFAULT_AI_MODEL
    AI_TIMEOUT_SECONDS: float = 60.0
    AI_MAX_TOKENS: int = DEFAULT_AI_MAX_TOKENS

    URL_CHECK_TIMEOUT_SECONDS: float = 5.0
    WEBPAGE_FETCH_TIMEOUT_SECONDS: float = 10.0

    @model_validator(mode="after")
    def check_required_field_are_set(self):
        missing_fields = []
        if not self.DATABASE_URL:
            if not self.DB_NAME:
                missing_fields.append("DB_NAME")
            if not self.DB_USER:
                missing_fields.append("DB_USER")
            if not (self.DB_PASSWORD or self.DB_PASSWORD_FILE):
                missing_fields.append("DB_PASSWORD")
        if self.AI_PROVIDER.lower() == "openai" and not self.AI_API_KEY:
            missing_fields.append("AI_API_KEY")

        if missing_fields:
            raise ValueError(
                f"Missing required environment variables: {','.join(missing_fields)}"
            )

        return self

    @property
    def db_password(self) -> str:
        """
        Password for the database user, read from DB_PASSWORD_FILE when set
        (docker/kubernetes secrets) and from DB_PASSWORD otherwise.
        """
        if self.DB_PASSWORD_FILE:
            return Path(self.DB_PASSWORD_FILE).read_text(encoding="utf-8").strip()
        return self.DB_PASSWORD

    def _database_url(self, drivername: str) -> str:
        url = URL.create(
            drivername,
            username=self.DB_USER,
            password=self.db_password,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )
        return url.render_as_string(hide_password=False)

    @computed_field
    @property
    def ASYNC_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return self._database_url("postgresql+asyncpg")

    @computed_field
    @property
    def SYNC_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL.replace("+asyncpg", "+psycopg2").replace(
                "+aiosqlite", ""
            )
        return self._database_url("postgresql+psycopg2")
