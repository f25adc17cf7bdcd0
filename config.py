import os
from typing import List

import yaml
from pydantic import BaseModel, ConfigDict

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("APP_CONFIG_FILE", os.path.join(ROOT_PATH, "env.yaml"))


class Settings(BaseModel):
    """Process-wide settings, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    DB_URI: str = "sqlite+aiosqlite:///./institute.db"
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: int = 30
    AUTO_CREATE_TABLES: bool = True

    API_PREFIX: str = "/api/v1"
    API_PORT: int = 8000
    API_HOST: str = "0.0.0.0"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3001"]
    CORS_ALLOW_CREDENTIALS: bool = True
    LOG_LEVEL: str = "INFO"
    ENABLE_LOGGING_MIDDLEWARE: bool = True

    JWT_SECRET: str = "dev-secret-key-change-in-production"
    JWT_ACCESS_EXPIRATION_MINUTES: int = 180
    RESET_TOKEN_EXPIRATION_MINUTES: int = 15
    RESET_RATE_LIMIT_MINUTES: int = 5
    CONTACT_RATE_LIMIT_MINUTES: int = 5
    BCRYPT_ROUNDS: int = 12

    APP_NAME: str = "Training Institute"
    FRONTEND_URL: str = "http://localhost:3000"
    ADMIN_EMAIL: str = "admin@example.com"

    # Empty SMTP_HOST switches to the logging email sender
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_TLS: bool = True
    SMTP_FROM: str = ""
    SMTP_TIMEOUT: int = 10


def load_settings(path: str = CONFIG_FILE_PATH) -> Settings:
    if os.path.exists(path):
        with open(path, "r") as r_file:
            data = yaml.safe_load(r_file) or dict()
    else:
        data = dict()
    return Settings(**data)


ApplicationConfig = load_settings()
