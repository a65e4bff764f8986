"""Central settings — loads from ~/.stageboard/config.json + environment variables."""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stageboard.config.constants import CONFIG_FILE
from stageboard.config.env_utils import ENV_FILES, read_env_file
from stageboard.config.models import BoardConfig, ServerConfig

logger = logging.getLogger("stageboard.config")


class Settings(BaseSettings):
    """All stageboard configuration in one place.

    Priority (highest → lowest):
      1. Environment variables (STAGEBOARD_ prefix)
      2. .env file
      3. ~/.stageboard/config.json
      4. Defaults defined here
    """

    model_config = SettingsConfigDict(
        env_prefix="STAGEBOARD_",
        env_file=ENV_FILES,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # --- Sub-configs ---
    server: ServerConfig = Field(default_factory=ServerConfig)
    board: BoardConfig = Field(default_factory=BoardConfig)

    # --- Top-level settings ---
    app_name: str = "Stageboard"
    log_level: str = "INFO"

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values: dict) -> dict:
        """Merge config.json values as defaults (env vars still override)."""
        if CONFIG_FILE.exists():
            try:
                file_data = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
                merged = {**file_data, **{k: v for k, v in values.items() if v is not None}}
                values = merged
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Ignoring unreadable config file %s: %s", CONFIG_FILE, exc)

        cls._apply_env_to_server(values)
        return values

    @classmethod
    def _apply_env_to_server(cls, values: dict) -> None:
        """Map flat STAGEBOARD_HOST/PORT env vars into server sub-config."""
        env_map = {
            "STAGEBOARD_HOST": "host",
            "STAGEBOARD_PORT": "port",
        }

        server = values.get("server", {})
        if isinstance(server, ServerConfig):
            server = server.model_dump()
        if not isinstance(server, dict):
            server = {}
        env_file_vals = read_env_file()

        changed = False
        for env_key, field in env_map.items():
            val = os.environ.get(env_key) or env_file_vals.get(env_key)
            if val:
                server[field] = int(val) if field == "port" else val
                changed = True
        if changed:
            values["server"] = server


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
