from __future__ import annotations

import argparse

from .formatter import collapse_whitespace, sort_tokens
from .groups import default_compiled_groups
from .tokens import NormalizationCache, normalize_token


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="classlist-debug-print")
    ap.add_argument("value", help="Class list to classify.")
    args = ap.parse_args(argv)

    groups = default_compiled_groups()
    cache: NormalizationCache = {}
    tokens = collapse_whitespace(args.value).split()

    print(f"tokens={len(tokens)} groups={len(groups)}")
    print("\n-- TOKENS (sorted) --")
    for token in sort_tokens(tokens, groups):
        n = normalize_token(token, groups, cache)
        name = groups[n.group_weight].name if n.group_weight < len(groups) else "(unclassified)"
        bang = " !important" if n.important else ""
        print(f"{n.group_weight:>2} {name:<14} base={n.base!r}{bang} :: {token}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
