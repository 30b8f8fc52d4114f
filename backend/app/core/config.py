from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(default="development", validation_alias="APP_ENV")
    api_prefix: str = Field(default="/api", validation_alias="API_PREFIX")

    cors_allow_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        validation_alias="CORS_ALLOW_ORIGINS",
    )
    cors_allow_methods: str = Field(default="*", validation_alias="CORS_ALLOW_METHODS")
    cors_allow_headers: str = Field(default="*", validation_alias="CORS_ALLOW_HEADERS")

    leaderboard_size: int = Field(default=10, validation_alias="LEADERBOARD_SIZE")
    quiz_catalog_path: str | None = Field(default=None, validation_alias="QUIZ_CATALOG_PATH")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


settings = Settings()


def _is_prod() -> bool:
    return (settings.app_env or "").strip().lower() in {"prod", "production"}


if _is_prod():
    if int(settings.leaderboard_size) <= 0:
        raise RuntimeError("LEADERBOARD_SIZE must be positive")
    if not (settings.cors_allow_origins or "").strip():
        raise RuntimeError("CORS_ALLOW_ORIGINS must be set in production")
