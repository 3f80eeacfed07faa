"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  Override them
through the environment (or a ``.env`` file loaded by your process
manager) in a real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "SelectShop API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Token a client must present at signup to register an ADMIN user.
    # Leave empty to disable admin signup entirely.
    admin_token: str = os.getenv("ADMIN_TOKEN", "")

    # Locale used when rendering error messages.  See ``core.messages``.
    default_locale: str = os.getenv("DEFAULT_LOCALE", "en")

    # Path or connection string for the SQLite database.  A relative
    # path is resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "selectshop.db")

    # External shopping search API used to look up current prices.
    search_api_url: str = os.getenv("SEARCH_API_URL", "https://openapi.naver.com/v1/search/shop.json")
    search_client_id: str = os.getenv("SEARCH_CLIENT_ID", "")
    search_client_secret: str = os.getenv("SEARCH_CLIENT_SECRET", "")
    search_display: int = int(os.getenv("SEARCH_DISPLAY", "15"))
    search_timeout: int = int(os.getenv("SEARCH_TIMEOUT", "15"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Values are computed at
# import time, so set environment variables before importing this module.
settings = Settings()
