"""
Configuration model for the ScopeGen outline server.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .models import TocVariant

ENV_PREFIX = "SCOPEGEN_"


class OutlineConfig(BaseModel):
    """Settings for the outline server.

    Values are normally read from SCOPEGEN_* environment variables (after
    .env has been loaded) via from_env().
    """

    posts_dir: Path = Field(
        default=Path("posts"),
        description="Directory containing markdown posts"
    )
    toc_min_entries: int = Field(
        default=3,
        ge=0,
        description="Minimum number of headings before a TOC is rendered"
    )
    toc_variant: TocVariant = Field(
        default=TocVariant.INLINE,
        description="Default TOC layout: inline or sidebar"
    )
    fetch_timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Timeout in seconds for remote markdown requests"
    )
    words_per_minute: int = Field(
        default=200,
        ge=1,
        description="Reading speed used to estimate read time"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "OutlineConfig":
        """Build a config from SCOPEGEN_* variables.

        Unset variables fall back to the field defaults.

        Args:
            environ: Mapping to read from, defaults to os.environ
        """
        if environ is None:
            environ = os.environ

        values = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw != "":
                values[name] = raw
        return cls(**values)
