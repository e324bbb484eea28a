"""
Configuration settings for the Product Catalog Backend
"""

import os
import logging
from typing import Optional
from urllib.parse import quote

logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Database connection parts
APP_DB_USERNAME = os.getenv("APP_DB_USERNAME")
APP_DB_PASSWORD = os.getenv("APP_DB_PASSWORD", "")
APP_DB_NAME = os.getenv("APP_DB_NAME")
APP_DB_PORT = os.getenv("APP_DB_PORT", "5432")
APP_DB_HOST = os.getenv("APP_DB_HOST", "localhost")
APP_DB_SSLMODE = os.getenv("APP_DB_SSLMODE", "disable")

# Full DSN, takes precedence over the parts above
DATABASE_URL = os.getenv("DATABASE_URL")

# Pool settings
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 2))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_COMMAND_TIMEOUT = float(os.getenv("DB_COMMAND_TIMEOUT", 60))

# Listener
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8010))

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "").split(",") if origin.strip()]


def build_database_url(
    user: str,
    password: str,
    dbname: str,
    port: str = "5432",
    host: str = "localhost",
    sslmode: Optional[str] = "disable"
) -> str:
    """
    Build a PostgreSQL connection URL from its parts

    Args:
        user: Database user
        password: Database password (may be empty)
        dbname: Database name
        port: Database port
        host: Database host
        sslmode: libpq sslmode value, omitted when empty

    Returns:
        postgresql:// URL accepted by asyncpg
    """
    credentials = quote(user, safe="")
    if password:
        credentials += ":" + quote(password, safe="")

    url = f"postgresql://{credentials}@{host}:{port}/{quote(dbname, safe='')}"
    if sslmode:
        url += f"?sslmode={sslmode}"
    return url


def get_database_url() -> str:
    """Resolve the connection URL from the environment settings"""
    if DATABASE_URL:
        return DATABASE_URL

    missing = [
        name for name, value in (("APP_DB_USERNAME", APP_DB_USERNAME), ("APP_DB_NAME", APP_DB_NAME))
        if not value
    ]
    if missing:
        raise ValueError(f"{' and '.join(missing)} environment variable is required when DATABASE_URL is not set")

    return build_database_url(
        APP_DB_USERNAME,
        APP_DB_PASSWORD,
        APP_DB_NAME,
        port=APP_DB_PORT,
        host=APP_DB_HOST,
        sslmode=APP_DB_SSLMODE
    )
