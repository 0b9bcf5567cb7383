# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

# Used when JWT_SECRET is not set. Insecure on purpose so that local runs
# work out of the box; startup logs a warning whenever it is in effect.
DEFAULT_JWT_SECRET = "defaultSecret"


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Env vars (.env):
      - DATABASE_URL (store connection string; SQLite file by default)
      - JWT_SECRET (HMAC secret used to sign access tokens)
      - PORT (listen port when started with `python -m app.main`)

    Optional:
      - SEED_DEFAULT_USERS (create the default admin/user accounts on startup)
      - CORS_ORIGINS (JSON list of allowed origins)
    """

    PROJECT_NAME: str = "Restaurant Reservations API"
    API_PREFIX: str = "/api"

    PORT: int = 3000

    # Store config
    DATABASE_URL: str = "sqlite:///./restaurant-db.sqlite3"

    # JWT signing
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    SEED_DEFAULT_USERS: bool = True

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def uses_default_jwt_secret(self) -> bool:
        return self.JWT_SECRET == DEFAULT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
