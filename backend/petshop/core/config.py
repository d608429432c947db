"""
Centralized configuration module for application-wide settings.

Values come from environment variables (optionally loaded from a ``.env``
file by ``petshop.main.create_shop``). Every helper has a safe default so the
core can run without any configuration at all, which keeps tests deterministic.
"""

import logging
import os
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

TRUTHY_VALUES = ("true", "1", "yes")

# ===========================
# Timezone Configuration
# ===========================


def get_app_timezone() -> ZoneInfo:
    """
    Get the shop timezone from the TZ environment variable.

    Returns:
        ZoneInfo: Shop timezone (defaults to UTC if not configured)

    Examples:
        >>> # In .env file:
        >>> # TZ=America/Sao_Paulo
        >>> tz = get_app_timezone()
    """
    tz_name = os.getenv("TZ", "UTC")

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(
            f"Invalid timezone '{tz_name}' specified in TZ environment variable. "
            f"Falling back to UTC. Error: {e}"
        )
        return ZoneInfo("UTC")


# Global timezone instance - initialized once at import time
APP_TZ = get_app_timezone()


def now_local() -> datetime:
    """Current wall-clock time in the shop timezone, without tzinfo."""
    return datetime.now(APP_TZ).replace(tzinfo=None)


def today_local() -> date:
    """Current date in the shop timezone."""
    return now_local().date()


def log_timezone_config() -> None:
    """Log the active timezone configuration."""
    logger.info(
        "Timezone configuration initialized",
        extra={
            "context": {
                "timezone": str(APP_TZ),
                "tz_env_var": os.getenv("TZ", "UTC"),
            }
        },
    )


# ===========================
# Logging Configuration
# ===========================


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in TRUTHY_VALUES


def get_log_level() -> str:
    """Logging level name from LOG_LEVEL (default: INFO)."""
    return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_log_json_format() -> bool:
    """Whether console logs are emitted as JSON (LOG_JSON, default: false)."""
    return _env_flag("LOG_JSON")


def get_log_to_file() -> bool:
    """Whether logs are also written to rotating files (LOG_TO_FILE, default: false)."""
    return _env_flag("LOG_TO_FILE")


def get_log_dir() -> str:
    """Directory for rotating log files (LOG_DIR, default: logs)."""
    return os.getenv("LOG_DIR", "logs")


# ===========================
# Ledger Configuration
# ===========================


def get_default_payment_method() -> str:
    """
    Payment method shown by the financial record before any payment is taken.

    Environment Variables:
        DEFAULT_PAYMENT_METHOD: Any non-blank label (default: 'Undefined')
    """
    value = os.getenv("DEFAULT_PAYMENT_METHOD", "Undefined").strip()
    if not value:
        logger.warning("DEFAULT_PAYMENT_METHOD is blank, using 'Undefined'")
        return "Undefined"
    return value
