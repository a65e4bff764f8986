"""Utilities for reading .env files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from dotenv import dotenv_values

from stageboard.config.constants import STAGEBOARD_HOME

ENV_FILES: tuple[str, ...] = (".env", str(STAGEBOARD_HOME / ".env"))


def read_env_file(env_paths: Iterable[str | Path] | None = None) -> dict[str, str]:
    """Parse the .env files and return key-value pairs.

    Later files win over earlier ones. Missing files and keys without a
    value are skipped.
    """
    if env_paths is None:
        env_paths = ENV_FILES

    result: dict[str, str] = {}
    for env_path in env_paths:
        path = Path(env_path)
        if not path.is_file():
            continue
        for key, value in dotenv_values(path, encoding="utf-8").items():
            if value is not None:
                result[key] = value
    return result
