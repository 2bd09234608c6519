from __future__ import annotations


class PatternCompileError(ValueError):
    """
    A configured matcher or locator pattern is not a valid regular expression.

    Raised when a registry or locator set is built, never while scanning.
    """

    def __init__(self, message: str, *, group: str | None = None, pattern: object = None) -> None:
        super().__init__(message)
        self.group = group
        self.pattern = pattern


class UnbalancedRegionError(Exception):
    """An opening parenthesis has no matching close before the end of the text."""

    def __init__(self, open_index: int) -> None:
        super().__init__(f"Unbalanced parenthesis at offset {open_index}")
        self.open_index = open_index


class EmptyMatchError(Exception):
    """A global search produced a zero-length match."""

    def __init__(self, position: int) -> None:
        super().__init__(f"Zero-length match at offset {position}")
        self.position = position
