from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from class_contracts.lint import LintResult


def serialize_lint_results(results: list[LintResult]) -> str:
    """
    Stable JSON report: files in the given order, keys sorted, trailing newline.
    """

    payload: dict[str, Any] = {
        "ok": all(r.ok for r in results),
        "files": [r.to_dict() for r in results],
        "findings": sum(len(r.findings) for r in results),
    }
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def write_lint_report_json(*, results: list[LintResult], out_file: Path) -> None:
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(serialize_lint_results(results), encoding="utf-8")
