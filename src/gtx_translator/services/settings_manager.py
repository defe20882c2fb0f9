"""Settings Manager - Handles language defaults and logging configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_SOURCE_LANG = "en"
DEFAULT_TARGET_LANG = "fr"
DEFAULT_LOG_LEVEL = "WARNING"


class SettingsManager:
    """
    Manages translator settings.

    Reads TRANSLATOR_* variables from the environment, loading a .env file
    in the project root first. Blank values fall back to the defaults.
    """

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

    @staticmethod
    def _get(name: str, default: str) -> str:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else default

    def get_source_lang(self) -> str:
        """Get the default source language code."""
        return self._get("TRANSLATOR_SOURCE_LANG", DEFAULT_SOURCE_LANG)

    def get_target_lang(self) -> str:
        """Get the default target language code."""
        return self._get("TRANSLATOR_TARGET_LANG", DEFAULT_TARGET_LANG)

    def get_log_level(self) -> str:
        """Get the logging level name, e.g. "DEBUG". Unknown names fall back to the default."""
        level = self._get("TRANSLATOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(level), int):
            return DEFAULT_LOG_LEVEL
        return level

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
