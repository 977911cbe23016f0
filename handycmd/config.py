# handycmd/config.py
"""
Configuration management for handycmd.
Uses TOML format for configuration files.
"""
import os
import sys
from pathlib import Path
from typing import Optional

# Reader (tomllib for >= 3.11, tomli for < 3.11)
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import BaseModel, Field, ValidationError
from dotenv import load_dotenv

from handycmd.constants import (
    CONFIG_FILE, DEFAULT_WATCHED_FILE, DEFAULT_DEBOUNCE_DELAY, DEFAULT_CALL_NOW,
    DEFAULT_ENCODING, ENV_WATCH_FILE, ENV_DELAY, ENV_CALL_NOW, ENV_DEBUG
)
from handycmd.utils.logging import get_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}


# --- Configuration Models ---

class WatchConfig(BaseModel):
    """Settings for the command file watcher."""
    file: Path = Field(Path(DEFAULT_WATCHED_FILE), description="Command file to watch")
    delay: float = Field(DEFAULT_DEBOUNCE_DELAY, ge=0, description="Debounce window in seconds")
    call_now: bool = Field(DEFAULT_CALL_NOW, description="Process the first change of a burst immediately")
    encoding: str = Field(DEFAULT_ENCODING, description="Encoding of the command file")


class AppConfig(BaseModel):
    """Application configuration settings."""
    watch: WatchConfig = Field(default_factory=WatchConfig, description="Watcher configuration")
    debug: bool = Field(False, description="Enable debug mode")


# --- Configuration Manager ---

class ConfigManager:
    """Manages the configuration for handycmd using TOML."""

    def __init__(self, config_file: Optional[Path] = None):
        self._config: AppConfig = AppConfig()
        self.config_file = Path(config_file) if config_file else CONFIG_FILE
        self._logger = get_logger(__name__)

    def _load_environment(self) -> None:
        """Applies overrides from environment variables and a .env file."""
        load_dotenv()

        watch_file = os.getenv(ENV_WATCH_FILE)
        if watch_file:
            self._config.watch.file = Path(watch_file)

        delay = os.getenv(ENV_DELAY)
        if delay:
            try:
                self._config.watch.delay = max(0.0, float(delay))
            except ValueError:
                self._logger.warning(f"Ignoring {ENV_DELAY}={delay!r}: not a number")

        call_now = os.getenv(ENV_CALL_NOW)
        if call_now:
            self._config.watch.call_now = call_now.strip().lower() in _TRUE_VALUES

        debug = os.getenv(ENV_DEBUG)
        if debug:
            self._config.debug = debug.strip().lower() in _TRUE_VALUES

    def load_config(self) -> None:
        """Loads configuration from the TOML config file, then the environment."""
        self._config = AppConfig()

        if not self.config_file.exists():
            self._logger.debug(f"Configuration file not found at '{self.config_file}'. Using defaults.")
            self._load_environment()
            return

        try:
            self._logger.debug(f"Loading configuration from: {self.config_file}")
            with open(self.config_file, "rb") as f:  # TOML requires binary read mode
                config_data = tomllib.load(f)

            if isinstance(config_data.get("watch"), dict):
                self._config.watch = WatchConfig(**config_data["watch"])

            if "debug" in config_data:
                if isinstance(config_data["debug"], bool):
                    self._config.debug = config_data["debug"]
                else:
                    self._logger.warning(
                        f"Invalid type for 'debug' in {self.config_file}. "
                        f"Expected boolean, got {type(config_data['debug'])}. Ignoring."
                    )

        except tomllib.TOMLDecodeError as e:
            self._logger.error(f"Error decoding TOML configuration file ({self.config_file}): {e}")
            self._logger.error("Using default configuration and environment variables.")
            self._config = AppConfig()
        except ValidationError as e:
            self._logger.error(f"Invalid values in configuration file ({self.config_file}): {e}")
            self._logger.error("Using default configuration and environment variables.")
            self._config = AppConfig()
        except OSError as e:
            self._logger.error(f"I/O error accessing configuration file: {e}")
            self._logger.error("Using default configuration and environment variables.")
            self._config = AppConfig()

        self._load_environment()

    def save_config(self) -> Path:
        """Saves the current configuration to the config file (as TOML)."""
        config_dict = self._config.model_dump(mode="json")

        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "wb") as f:
            tomli_w.dump(config_dict, f)

        self._logger.info(f"Configuration saved to {self.config_file}")
        return self.config_file

    @property
    def config(self) -> AppConfig:
        """Provides access to the current application configuration."""
        return self._config


# --- Global Instance ---

# Loaded lazily by the CLI so importing the package never touches the home directory
config_manager = ConfigManager()
