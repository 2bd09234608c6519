from __future__ import annotations

from class_contracts.errors import UnbalancedRegionError

_QUOTES = ("\"", "'", "`")


def find_open_paren(text: str, start: int, end: int) -> int | None:
    """First `(` in text[start:end] that is not backslash-escaped."""

    i = text.find("(", start, end)
    while i >= 0:
        if i == 0 or text[i - 1] != "\\":
            return i
        i = text.find("(", i + 1, end)
    return None


def find_matching_paren(text: str, open_index: int) -> int:
    """
    Index of the `)` balancing the `(` at `open_index`.

    Quoted regions are opaque to depth counting. States: normal, in-string,
    escaped (inside a string only).
    """

    depth = 1
    in_string: str | None = None
    escaped = False
    i = open_index + 1
    while i < len(text):
        ch = text[i]
        if in_string is not None:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == in_string:
                in_string = None
            i += 1
            continue
        if ch in _QUOTES:
            in_string = ch
            escaped = False
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    raise UnbalancedRegionError(open_index)


def extract_string_literals(text: str) -> list[tuple[str, int, int]]:
    """
    Quoted literals in `text` as (value, start, end); offsets exclude the quotes.

    Backslash-escaped quotes do not terminate a literal. An unterminated
    literal is dropped.
    """

    literals: list[tuple[str, int, int]] = []
    i = 0
    n = len(text)
    while i < n:
        quote = text[i]
        if quote not in _QUOTES:
            i += 1
            continue
        start = i + 1
        i = start
        escaped = False
        while i < n:
            ch = text[i]
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                literals.append((text[start:i], start, i))
                break
            i += 1
        i += 1
    return literals
