from __future__ import annotations

import logging
from bisect import bisect_right
from pathlib import Path
from typing import Iterable

from class_contracts.extraction import ExtractionMatch
from class_contracts.lint import LintError, LintFinding, LintResult
from class_extract.config import CompiledLocator, compile_locators
from class_extract.module import extract_with_locator
from class_order.formatter import Resolver, create_formatter

from .attributes import iter_attribute_spans
from .config import LintConfig

logger = logging.getLogger(__name__)


class _LineIndex:
    def __init__(self, text: str) -> None:
        self._starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self._starts.append(i + 1)

    def loc(self, offset: int) -> tuple[int, int]:
        # (1-based line, 0-based column)
        idx = bisect_right(self._starts, offset) - 1
        return idx + 1, offset - self._starts[idx]


def _candidate_spans(
    text: str, locators: tuple[CompiledLocator, ...], attributes: bool
) -> Iterable[ExtractionMatch]:
    if attributes:
        yield from iter_attribute_spans(text)
    for locator in locators:
        yield from extract_with_locator(text, locator)


def lint_text(
    text: str,
    *,
    config: LintConfig | None = None,
    resolver: Resolver | None = None,
    path: str | None = None,
) -> LintResult:
    """
    Find every class list in `text` whose formatted form differs from the source.

    Each range is reported at most once, whichever locator found it first.
    """

    config = config or LintConfig()
    # Bad patterns fail here, before any scanning.
    formatter = create_formatter(config.formatter_config(), resolver=resolver)
    locators = compile_locators(config.class_regex)
    lines = _LineIndex(text)

    reported: set[tuple[int, int]] = set()
    findings: list[LintFinding] = []
    candidates = 0
    for match in _candidate_spans(text, locators, config.attributes):
        if not match.value:
            continue
        candidates += 1
        formatted = formatter(match.value)
        if not formatted or formatted == match.value:
            continue
        if match.range in reported:
            continue
        reported.add(match.range)

        line, column = lines.loc(match.start)
        end_line, end_column = lines.loc(match.end)
        findings.append(
            LintFinding(
                start=match.start,
                end=match.end,
                line=line,
                column=column,
                end_line=end_line,
                end_column=end_column,
                original=match.value,
                replacement=formatted,
            )
        )
        logger.debug("Unsorted class list at %s:%d:%d: %r -> %r", path or "<text>", line, column, match.value, formatted)

    findings.sort(key=lambda f: (f.start, f.end))
    return LintResult(
        ok=True,
        path=path,
        findings=findings,
        errors=[],
        meta={"candidates": candidates, "findings": len(findings)},
    )


def apply_fixes(text: str, findings: Iterable[LintFinding]) -> str:
    """
    Apply replacements; a finding overlapping an earlier-applied one is skipped.

    Findings are applied front-to-back for overlap checks and spliced from the
    end so offsets stay valid.
    """

    accepted: list[LintFinding] = []
    last_end = -1
    for f in sorted(findings, key=lambda f: (f.start, f.end)):
        if f.start < last_end:
            continue
        accepted.append(f)
        last_end = f.end

    out = text
    for f in reversed(accepted):
        out = out[: f.start] + f.replacement + out[f.end :]
    return out


def lint_file(
    path: Path,
    *,
    config: LintConfig | None = None,
    resolver: Resolver | None = None,
    fix: bool = False,
) -> LintResult:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return LintResult(
            ok=False,
            path=str(path),
            findings=[],
            errors=[
                LintError(
                    code="LINT_READ_ERROR",
                    message=str(e),
                    detail={"path": str(path)},
                )
            ],
            meta={"candidates": 0, "findings": 0},
        )

    result = lint_text(text, config=config, resolver=resolver, path=str(path))
    if not (fix and result.findings):
        return result

    try:
        path.write_text(apply_fixes(text, result.findings), encoding="utf-8")
    except OSError as e:
        return LintResult(
            ok=False,
            path=result.path,
            findings=result.findings,
            errors=[
                LintError(
                    code="LINT_WRITE_ERROR",
                    message=str(e),
                    detail={"path": str(path)},
                )
            ],
            meta=result.meta,
        )
    return LintResult(
        ok=True,
        path=result.path,
        findings=result.findings,
        errors=[],
        meta=result.meta,
        fixed=True,
    )
