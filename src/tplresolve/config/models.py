"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tplresolve.toml only contains
overrides. A fresh checkout needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel


class RepositoryConfig(BaseModel):
    """[repository] section."""

    model_config = {"frozen": True}

    backend: Literal["fake", "memory"] = "fake"
    seed_path: Path | None = None


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 8000
    api_key: str | None = None
    log_level: str = "info"
