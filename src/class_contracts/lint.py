from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNSORTED_MESSAGE = "Tailwind CSS classes should be sorted and deduplicated."


@dataclass(frozen=True, slots=True)
class LintFinding:
    # Offsets are half-open [start, end) into the linted text.
    # line is 1-based, column is 0-based.
    start: int
    end: int
    line: int
    column: int
    end_line: int
    end_column: int
    original: str
    replacement: str
    message: str = UNSORTED_MESSAGE

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "line": self.line,
            "column": self.column,
            "end_line": self.end_line,
            "end_column": self.end_column,
            "original": self.original,
            "replacement": self.replacement,
            "message": self.message,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "LintFinding":
        return LintFinding(
            start=int(d["start"]),
            end=int(d["end"]),
            line=int(d["line"]),
            column=int(d["column"]),
            end_line=int(d["end_line"]),
            end_column=int(d["end_column"]),
            original=str(d["original"]),
            replacement=str(d["replacement"]),
            message=str(d.get("message") or UNSORTED_MESSAGE),
        )


@dataclass(frozen=True, slots=True)
class LintError:
    code: str
    message: str
    detail: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": self.detail}


@dataclass(frozen=True, slots=True)
class LintResult:
    ok: bool
    path: str | None
    findings: list[LintFinding]
    errors: list[LintError]
    meta: dict[str, Any]  # counts, fixed flag
    fixed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "path": self.path,
            "findings": [f.to_dict() for f in self.findings],
            "errors": [e.to_dict() for e in self.errors],
            "meta": dict(self.meta),
            "fixed": self.fixed,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "LintResult":
        return LintResult(
            ok=bool(d.get("ok", False)),
            path=(None if d.get("path") is None else str(d["path"])),
            findings=[LintFinding.from_dict(x) for x in (d.get("findings") or [])],
            errors=[
                LintError(code=str(e["code"]), message=str(e["message"]), detail=e.get("detail"))
                for e in (d.get("errors") or [])
            ],
            meta=dict(d.get("meta") or {}),
            fixed=bool(d.get("fixed", False)),
        )
