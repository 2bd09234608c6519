from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from class_contracts.errors import PatternCompileError

from .config import FormatterConfig
from .formatter import create_formatter


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="classlist-format",
        description="Sort and deduplicate utility-class lists (one list per argument or stdin line).",
    )
    p.add_argument(
        "values",
        nargs="*",
        help="Class lists to format. When omitted, one class list is read per stdin line.",
    )
    p.add_argument(
        "--groups",
        type=Path,
        default=None,
        help="JSON file with a list of {name, matchers} group definitions (replaces the defaults).",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Emit one JSON object per value: {input, output, changed}.",
    )
    p.add_argument("--debug", action="store_true", help="Enable DEBUG logging on stderr.")
    return p


def _load_groups_config(path: Path | None) -> FormatterConfig | None:
    if path is None:
        return None
    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, list):
        raw = {"groupDefinitions": raw}
    return FormatterConfig.from_dict(raw)


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, stream=sys.stderr)

    try:
        formatter = create_formatter(_load_groups_config(args.groups))
    except (OSError, ValueError, TypeError) as e:
        # PatternCompileError is a ValueError; report it without a traceback.
        kind = "pattern" if isinstance(e, PatternCompileError) else "config"
        print(f"classlist-format: invalid {kind}: {e}", file=sys.stderr)
        return 1

    values = args.values if args.values else [line.rstrip("\n") for line in sys.stdin]
    for value in values:
        formatted = formatter(value)
        if args.json:
            print(
                json.dumps(
                    {"input": value, "output": value if formatted is None else formatted, "changed": formatted is not None},
                    ensure_ascii=False,
                    sort_keys=True,
                    separators=(",", ":"),
                )
            )
        else:
            print(value if formatted is None else formatted)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
