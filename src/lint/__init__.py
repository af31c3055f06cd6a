"""Lint execution and reporting for depthlint."""

from lint.models import Finding, LintResult
from lint.runner import lint_file, lint_paths, lint_source

__all__ = ["Finding", "LintResult", "lint_file", "lint_paths", "lint_source"]
