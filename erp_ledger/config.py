"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode connection strings or tolerances in code.
"""

import os
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "ERP Ledger Engine"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = _env_flag("DEBUG", "false")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Database
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "postgresql://localhost:5432/erp_ledger"
    )

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "console" if DEBUG else "json")

    # Reporting
    # Largest |assets - (liabilities + equity + net profit)| still
    # reported as balanced, in the reporting currency.
    BALANCE_TOLERANCE: Decimal = Decimal(os.getenv("BALANCE_TOLERANCE", "0.01"))
    NET_CONTRA_ACCOUNTS: bool = _env_flag("NET_CONTRA_ACCOUNTS", "false")
    SEED_DEFAULT_CHART: bool = _env_flag("SEED_DEFAULT_CHART", "false")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    The Settings object is created once and reused for all
    subsequent calls, so environment variables are read once.
    """
    return Settings()
