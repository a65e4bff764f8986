"""Paths and default values used across the project."""

from pathlib import Path

# Base directory for stageboard config
STAGEBOARD_HOME = Path.home() / ".stageboard"

CONFIG_DIR = STAGEBOARD_HOME
CONFIG_FILE = CONFIG_DIR / "config.json"

# Server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

# Board defaults
DEFAULT_MAX_ASSIGNED = 2

# Logging
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
