"""Configuration helpers for rr-commons."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, Field, validator


class AppConfig(BaseModel):
    """Application level configuration."""

    log_level: str = "INFO"
    classfinder_exclude: List[str] = Field(default_factory=lambda: ["tests"])
    classfinder_skip_errors: bool = False

    @validator("log_level")
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_config(path: Path) -> AppConfig:
    """Load configuration from a YAML file."""

    data: Dict[str, Any] = {}
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig(**data)
