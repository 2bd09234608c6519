from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from class_contracts.errors import PatternCompileError

from .artifacts import write_lint_report_json
from .config import LintConfig, load_lint_config
from .module import lint_file


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="classlist-lint",
        description="Report (and optionally fix) unsorted utility-class lists in source files.",
    )
    p.add_argument("paths", nargs="+", type=Path, help="Source files to check.")
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON options file: classRegex, groupDefinitions, attributes, debug.",
    )
    p.add_argument("--fix", action="store_true", help="Rewrite files with the formatted class lists.")
    p.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Optional JSON report file path.",
    )
    p.add_argument("--debug", action="store_true", help="Enable DEBUG logging on stderr.")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_lint_config(args.config) if args.config is not None else LintConfig()
    except (OSError, ValueError, TypeError) as e:
        print(f"classlist-lint: invalid config: {e}", file=sys.stderr)
        return 1

    debug = args.debug or config.debug
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, stream=sys.stderr)

    try:
        results = [lint_file(p, config=config, fix=args.fix) for p in args.paths]
    except PatternCompileError as e:
        print(f"classlist-lint: invalid pattern: {e}", file=sys.stderr)
        return 1

    for r in results:
        for f in r.findings:
            status = "fixed" if r.fixed else "error"
            print(f"{r.path}:{f.line}:{f.column + 1}: {status}: {f.message} ({f.original!r} -> {f.replacement!r})")
        for e in r.errors:
            print(f"{r.path}: {e.code}: {e.message}", file=sys.stderr)

    if args.out is not None:
        write_lint_report_json(results=results, out_file=args.out)

    summary = {
        "ok": all(r.ok for r in results),
        "files": len(results),
        "findings": sum(len(r.findings) for r in results),
        "fixed": sum(1 for r in results if r.fixed),
    }
    print(json.dumps(summary, sort_keys=True, separators=(",", ":"), ensure_ascii=False))

    if not summary["ok"]:
        return 2
    remaining = sum(len(r.findings) for r in results if not r.fixed)
    return 1 if remaining else 0


if __name__ == "__main__":
    raise SystemExit(main())
