"""
Centralized configuration module for application-wide settings.

All runtime behavior is driven by environment variables read at call time,
so tests can change the environment before building the application.
"""

import logging
import os
import re
from typing import List

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Only load from .env when DATABASE_URL is not already defined by the environment
if not os.getenv("DATABASE_URL"):
    load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./inventory.db"
DEFAULT_COLLECTION = "inventory"

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


# ===========================
# Store Configuration
# ===========================


def get_database_url() -> str:
    """
    Connection string of the inventory store.

    Environment Variables:
        DATABASE_URL: SQLAlchemy URL, database name included
            Default: sqlite:///./inventory.db
    """
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def get_inventory_collection() -> str:
    """Name of the table (collection) holding inventory records."""
    name = os.getenv("INVENTORY_COLLECTION", DEFAULT_COLLECTION).strip()
    return name or DEFAULT_COLLECTION


def mask_url_password(url: str) -> str:
    """Hide the password part of a connection URL before it reaches the logs."""
    return re.sub(r"(://[^:/?#]+):[^@]*@", r"\1:***@", url)


def log_store_config() -> None:
    logger.info(
        "Store configuration loaded",
        extra={
            "context": {
                "database_url": mask_url_password(get_database_url()),
                "collection": get_inventory_collection(),
            }
        },
    )


# ===========================
# Runtime Configuration
# ===========================


def get_environment() -> str:
    return os.getenv("FLASK_ENV", "development")


def is_production() -> bool:
    return get_environment() == "production"


def is_testing() -> bool:
    return _env_flag("TESTING", False)


def get_log_level() -> str:
    default = "INFO" if is_production() else "DEBUG"
    return os.getenv("LOG_LEVEL", default).upper()


def log_to_file_enabled() -> bool:
    return _env_flag("LOG_TO_FILE", True)


def sql_echo_enabled() -> bool:
    return _env_flag("SQL_ECHO", False)


def rate_limit_enabled() -> bool:
    return _env_flag("RATE_LIMIT_ENABLED", True)


def get_limiter_storage_uri() -> str:
    return os.getenv("LIMITER_STORAGE_URI", "memory://")


def get_cors_allowed_origins() -> List[str]:
    """
    Origins allowed to call the API from a browser.

    Environment Variables:
        CORS_ALLOWED_ORIGINS: comma separated list, "*" allows any origin
            Default: *
    """
    raw = os.getenv("CORS_ALLOWED_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_release() -> str:
    return os.getenv("GIT_SHA", "unknown")


def get_sentry_dsn() -> str:
    return os.getenv("SENTRY_DSN", "")
