"""
Configuration management for Recipe Explorer.

This module loads the .env file at the project root and exposes the few settings
the app reads from the environment. It is imported early by the Streamlit entry
point so .env is loaded before anything else looks at os.environ.

When no .env file exists load_dotenv() is a no-op and regular environment
variables are used.

Environment Variables:
- RECIPE_EXPLORER_DATA_DIR: Optional, directory holding the local storage file;
  relative paths are resolved against the project root
  (defaults to <project root>/data)
- RECIPE_EXPLORER_STORAGE_FILE: Optional, storage file name (defaults to "local_storage.json")
- RECIPE_EXPLORER_LOG_LEVEL: Optional, logging level name (defaults to "INFO")
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_STORAGE_FILE = "local_storage.json"
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def load_env_file() -> None:
    """
    Load environment variables from .env at the project root.

    Safe to call multiple times. Existing environment variables take precedence
    (override=False).
    """
    load_dotenv(PROJECT_ROOT / ".env", override=False)


load_env_file()


class StorageConfig:
    """Where the local key-value store lives on disk."""

    @staticmethod
    def get_data_dir() -> Path:
        """
        Get the data directory.

        Relative paths are taken from the project root, not the working
        directory, so `streamlit run` finds the same file from anywhere.

        Returns:
            Path from RECIPE_EXPLORER_DATA_DIR, or <project root>/data
        """
        data_dir = os.getenv("RECIPE_EXPLORER_DATA_DIR")
        if not data_dir:
            return PROJECT_ROOT / "data"
        path = Path(data_dir).expanduser()
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path

    @staticmethod
    def get_storage_path() -> Path:
        """
        Get the full path of the JSON storage file.

        Returns:
            data dir joined with RECIPE_EXPLORER_STORAGE_FILE (default "local_storage.json")
        """
        file_name = os.getenv("RECIPE_EXPLORER_STORAGE_FILE", DEFAULT_STORAGE_FILE)
        return StorageConfig.get_data_dir() / file_name


class LoggingConfig:
    """Logging settings."""

    @staticmethod
    def get_log_level() -> int:
        """
        Get the configured log level.

        Returns:
            logging level int; unknown names fall back to INFO
        """
        name = os.getenv("RECIPE_EXPLORER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure the root logger once, using LoggingConfig."""
    logging.basicConfig(level=LoggingConfig.get_log_level(), format=LOG_FORMAT)
