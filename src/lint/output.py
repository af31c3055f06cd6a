"""Human and machine readable rendering of lint results."""

from __future__ import annotations

from typing import TYPE_CHECKING

import orjson

if TYPE_CHECKING:
    from lint.models import LintResult


def render_text(result: LintResult) -> str:
    lines = [
        f"{finding.location()}  {finding.rule}  {finding.message}"
        for finding in result.findings
    ]
    count = len(result.findings)
    noun = "problem" if count == 1 else "problems"
    lines.append(f"{count} {noun} in {result.files_checked} files checked")
    return "\n".join(lines) + "\n"


def render_json(result: LintResult) -> str:
    payload = {
        "files_checked": result.files_checked,
        "ok": result.ok,
        "findings": [finding.model_dump() for finding in result.findings],
    }
    opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2
    return orjson.dumps(payload, option=opts).decode("utf-8") + "\n"


__all__ = ["render_json", "render_text"]
