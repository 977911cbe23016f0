"""
Constants for the handycmd application.
"""
from pathlib import Path
import os

# Application information
APP_NAME = "handycmd"
APP_DESCRIPTION = "Watch a command file and turn its statements into filesystem changes"

# Paths
CONFIG_DIR = Path(os.path.expanduser("~/.config/handycmd"))
CONFIG_FILE = CONFIG_DIR / "config.toml"
LOG_DIR = CONFIG_DIR / "logs"

# Watching
DEFAULT_WATCHED_FILE = "commands.txt"
DEFAULT_DEBOUNCE_DELAY = 0.5  # seconds
DEFAULT_CALL_NOW = True
DEFAULT_ENCODING = "utf-8"

# Environment overrides
ENV_WATCH_FILE = "HANDYCMD_WATCH_FILE"
ENV_DELAY = "HANDYCMD_DELAY"
ENV_CALL_NOW = "HANDYCMD_CALL_NOW"
ENV_DEBUG = "HANDYCMD_DEBUG"

# Logging
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[name]} | {message}"
LOG_ROTATION = "10 MB"
LOG_RETENTION = "10 days"

# Marker tokens used to pre-filter a document before running the regex handlers
CREATE_FILE = "CREATE FILE"
CREATE_FOLDER = "CREATE FOLDER"
DELETE_FILE = "DELETE FILE"
DELETE_FOLDER = "DELETE FOLDER"
DELETE_FORCE = {"main": "DELETE", "sub": "FORCE"}
WRITE = {"main": "WRITE TO", "sub": "THIS CONTENT:"}
APPEND = {"main": "APPEND TO", "sub": "THIS CONTENT:"}
RENAME = {"main": "RENAME", "sub": " TO "}

# Console styles per message category
MESSAGE_STYLES = {
    "warn": "bright_yellow",
    "info": "bright_cyan",
    "success": "bright_green",
    "error": "red",
}
