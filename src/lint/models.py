"""Finding models for lint results."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Finding(BaseModel):
    """A single rule violation located in a source file."""

    path: str
    line: int = Field(description="1-based line of the offending node")
    col: int = Field(description="1-based column of the offending node")
    end_line: int
    end_col: int
    rule: str
    specifier: str | None = None
    message: str

    def location(self) -> str:
        return f"{self.path}:{self.line}:{self.col}"


class LintResult(BaseModel):
    """Findings for a lint run over one or more files."""

    files_checked: int = 0
    findings: list[Finding] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.findings


__all__ = ["Finding", "LintResult"]
