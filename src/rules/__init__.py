"""Rule definitions for depthlint."""

from rules.config import (
    ConfigError,
    DepthLintConfig,
    load_config,
)
from rules.depth import Violation, classify, count_parent_segments, is_relative
from rules.no_deep_relative_imports import DEFAULT_MAX_DEPTH, NoDeepRelativeImports

RULES = {NoDeepRelativeImports.name: NoDeepRelativeImports}

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "RULES",
    "ConfigError",
    "DepthLintConfig",
    "NoDeepRelativeImports",
    "Violation",
    "classify",
    "count_parent_segments",
    "is_relative",
    "load_config",
]
