"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

Host and port discovery follows the Cloud Foundry conventions the starter
app was deployed with: PORT for the listener, VCAP_APPLICATION for the
public route of the application.
"""
import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv


# Load .env file from the working directory (or the nearest parent)
# This must happen before accessing os.environ
load_dotenv(find_dotenv(usecwd=True))

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Also write the daily log file
        log_dir: Directory for log files, relative paths resolve against the working directory
        host: Interface the HTTP listener binds to
        port: Port the HTTP listener binds to
        public_dir: Directory served as static content at "/" ("./public" by default, like the starter)
        enable_audit_logging: Log every request through AuditMiddleware
        application_uris: Public routes announced by Cloud Foundry
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_to_file: bool
    log_dir: Path

    # Server settings
    host: str
    port: int
    public_dir: Path

    enable_audit_logging: bool

    application_uris: tuple = ()

    @property
    def url(self) -> str:
        """Public URL of the running application."""
        if self.application_uris:
            return f"https://{self.application_uris[0]}"
        return f"http://localhost:{self.port}"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_int(key: str, default: str) -> int:
    value = _get_env(key, default)
    try:
        return int(value)
    except ValueError:
        raise ValueError(
            f"Environment variable '{key}' must be an integer, got '{value}'"
        ) from None


def _get_bool(key: str, default: str) -> bool:
    return _get_env(key, default).lower() == "true"


def _get_log_level(key: str, default: str) -> str:
    value = _get_env(key, default).upper()
    if value not in LOG_LEVELS:
        raise ValueError(
            f"Environment variable '{key}' must be one of {', '.join(LOG_LEVELS)}, got '{value}'"
        )
    return value


def _parse_application_uris(raw: Optional[str]) -> tuple:
    """
    Extract the application routes from a VCAP_APPLICATION document.

    Args:
        raw: JSON text of VCAP_APPLICATION, or None when not on Cloud Foundry

    Returns:
        Tuple of route host names (empty when unavailable)

    Raises:
        ValueError: If VCAP_APPLICATION is set but is not valid JSON
    """
    if not raw:
        return ()
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"VCAP_APPLICATION is not valid JSON: {e}") from e
    if not isinstance(document, dict):
        return ()
    uris = document.get("application_uris") or []
    return tuple(str(uri) for uri in uris)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; call get_settings.cache_clear()
    to pick up a changed environment.

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If an environment variable holds an invalid value
    """
    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "Kitura-Starter"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_log_level("LOG_LEVEL", "DEBUG"),
        log_to_file=_get_bool("LOG_TO_FILE", "true"),
        log_dir=Path(_get_env("LOG_DIR", "logs")),

        # Server
        host=_get_env("HOST", "0.0.0.0"),
        port=_get_int("PORT", "8080"),
        public_dir=Path(_get_env("PUBLIC_DIR", "public")),

        enable_audit_logging=_get_bool("ENABLE_AUDIT_LOGGING", "true"),

        application_uris=_parse_application_uris(os.environ.get("VCAP_APPLICATION")),
    )
