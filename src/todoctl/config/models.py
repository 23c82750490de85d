"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, todoctl.toml only contains overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from todoctl.infrastructure.storage import DEFAULT_STORAGE_KEY


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    data_dir: Path = Path(".todoctl")
    key: str = DEFAULT_STORAGE_KEY
    ephemeral: bool = False


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=20)
    show_index: bool = True
