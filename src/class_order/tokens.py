from __future__ import annotations

from class_contracts.classes import CompiledGroup, NormalizedToken

from .groups import resolve_group_weight

# Per-call memo: raw token -> NormalizedToken. Owned by one formatting call.
NormalizationCache = dict[str, NormalizedToken]


def remove_important_prefix(token: str) -> tuple[bool, str]:
    if token.startswith("!"):
        return True, token[1:]
    return False, token


def strip_variants(token: str) -> str:
    """
    Drop colon-delimited variant prefixes (`hover:`, `md:`, `[&:nth-child(2)]:`).

    Scans right-to-left; colons inside `[...]` arbitrary values are skipped.
    """

    depth = 0
    for i in range(len(token) - 1, -1, -1):
        ch = token[i]
        if ch == "]":
            depth += 1
        elif ch == "[":
            if depth > 0:
                depth -= 1
        elif ch == ":" and depth == 0:
            return token[i + 1 :]
    return token


def normalize_token(
    token: str, groups: tuple[CompiledGroup, ...], cache: NormalizationCache
) -> NormalizedToken:
    cached = cache.get(token)
    if cached is not None:
        return cached

    important, value = remove_important_prefix(token)
    base = strip_variants(value)
    normalized = NormalizedToken(
        important=important,
        base=base,
        group_weight=resolve_group_weight(base, groups),
    )
    cache[token] = normalized
    return normalized


def _compare_spelling(a: str, b: str) -> int:
    # Locale-style ordering: case-insensitive first, then code points.
    ka = (a.casefold(), a)
    kb = (b.casefold(), b)
    return -1 if ka < kb else (1 if ka > kb else 0)


def compare_tokens(
    a: str, b: str, groups: tuple[CompiledGroup, ...], cache: NormalizationCache
) -> int:
    # Order: group weight asc, base spelling, plain before important, raw spelling.
    na = normalize_token(a, groups, cache)
    nb = normalize_token(b, groups, cache)

    if na.group_weight != nb.group_weight:
        return -1 if na.group_weight < nb.group_weight else 1

    base_cmp = _compare_spelling(na.base, nb.base)
    if base_cmp != 0:
        return base_cmp

    if na.important != nb.important:
        return 1 if na.important else -1

    return _compare_spelling(a, b)
