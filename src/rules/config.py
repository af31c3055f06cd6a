from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from parse.treesitter_modules import SUPPORTED_EXTENSIONS
from rules.no_deep_relative_imports import DEFAULT_MAX_DEPTH

CONFIG_FILENAME = "depthlint.toml"


class DepthLintConfig(BaseModel):
    """Configuration for a depthlint run."""

    model_config = ConfigDict(extra="forbid")

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=0,
        description="Maximum number of '../' segments in a relative specifier",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to include (empty = all sources)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to exclude",
    )
    extensions: list[str] = Field(
        default_factory=lambda: list(SUPPORTED_EXTENSIONS),
        description="File extensions to lint",
    )
    nested_gitignore: bool = Field(
        default=False,
        description=(
            "Enable nested .gitignore composition (default: false for root-only)"
        ),
    )

    @field_validator("extensions", mode="before")
    @classmethod
    def validate_extensions(cls, v: Any) -> Any:
        """Normalize extensions to a leading dot and reject unknown ones."""
        if not isinstance(v, list):
            msg = "extensions must be a list of strings"
            raise TypeError(msg)

        normalized: list[str] = []
        for ext in v:
            if not isinstance(ext, str):
                msg = "extensions must be a list of strings"
                raise TypeError(msg)
            dotted = ext if ext.startswith(".") else f".{ext}"
            if dotted.lower() not in SUPPORTED_EXTENSIONS:
                msg = (
                    f"Unsupported extension '{ext}'. "
                    f"Valid extensions: {', '.join(SUPPORTED_EXTENSIONS)}"
                )
                raise ValueError(msg)
            normalized.append(dotted.lower())
        return normalized


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path) -> DepthLintConfig:
    """Load configuration from depthlint.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return DepthLintConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return DepthLintConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e


__all__ = ["CONFIG_FILENAME", "ConfigError", "DepthLintConfig", "load_config"]
