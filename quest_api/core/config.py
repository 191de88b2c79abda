import os
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(val: str | None) -> list[str]:
    return [v.strip() for v in (val or "").split(",") if v.strip()]


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Quest Tasks API"
    ENV: str = os.getenv("ENV", "production")
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOW_ORIGINS: list[str] = Field(default_factory=list)  # override via ALLOWED_ORIGINS (CSV)
    ALLOWED_ORIGINS: str = ""
    ALLOW_METHODS: list[str] = ["GET", "POST", "OPTIONS"]
    ALLOW_HEADERS: list[str] = ["*"]
    ALLOW_CREDENTIALS: bool = True

    # DB
    DATABASE_URL: str = "sqlite:///./quests.db"

    # Admin auth / JWT
    JWT_SECRET: str = os.getenv("SECRET_KEY") or os.getenv("JWT_SECRET", "dev-secret-change-me")
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRES_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRES_MINUTES", "60"))

    # Load .env file
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


def build_settings() -> Settings:
    s = Settings()

    # Heroku-style URLs are not accepted by SQLAlchemy 1.4+
    if s.DATABASE_URL.startswith("postgres://"):
        s.DATABASE_URL = s.DATABASE_URL.replace("postgres://", "postgresql://", 1)

    # Read from env or .env by pydantic-settings
    env_origins = _split_csv(s.ALLOWED_ORIGINS)
    if env_origins:
        s.ALLOW_ORIGINS = env_origins

    return s


settings = build_settings()
