"""Settings Manager - Handles backend URL, caller identity and logging configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from book_catalog.services.errors import ConfigurationError

DEFAULT_API_BASE_URL = "http://localhost:8080"
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """
    Manages deployment configuration.

    Values are read from the process environment after loading the
    .env file in the project root. The caller identity has no default:
    a missing value is a configuration error.
    """

    API_URL_VAR = "BOOK_CATALOG_API_URL"
    IDENTITY_VAR = "LOCAL_DN"
    LOG_LEVEL_VAR = "BOOK_CATALOG_LOG_LEVEL"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_api_base_url(self) -> str:
        """Get the backend base URL, falling back to the local default."""
        url = os.getenv(self.API_URL_VAR)
        if not url or not url.strip():
            return DEFAULT_API_BASE_URL
        return url.strip().rstrip("/")

    def get_caller_identity(self) -> str:
        """Get the identity sent with every request.

        Raises:
            ConfigurationError: If the identity is not set.
        """
        identity = os.getenv(self.IDENTITY_VAR)
        if not identity or not identity.strip():
            raise ConfigurationError(
                f"{self.IDENTITY_VAR} environment variable is not set. "
                f"Please set it in {self._project_root / '.env'}"
            )
        return identity.strip()

    def get_log_level(self) -> str:
        """Get the log level name, defaulting to INFO."""
        level = os.getenv(self.LOG_LEVEL_VAR)
        return level.strip().upper() if level and level.strip() else DEFAULT_LOG_LEVEL

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
