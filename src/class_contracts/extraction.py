from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class LocatorEntry:
    """
    Where to find class-list literals inside arbitrary source text.

    - `inner is None`: single pattern. The argument region of each outer match
      is scanned for quoted literals; a match without a parenthesis yields its
      first capture group (or the whole match).
    - `inner` set: the argument region is searched with `inner`; capture group 1
      (or the whole inner match) is the literal.
    """

    outer: str
    inner: str | None = None

    def to_config(self) -> Union[str, list[str]]:
        if self.inner is None:
            return self.outer
        return [self.outer, self.inner]

    @staticmethod
    def from_config(entry: Any) -> "LocatorEntry":
        if isinstance(entry, LocatorEntry):
            return entry
        if isinstance(entry, str):
            return LocatorEntry(outer=entry)
        if isinstance(entry, (list, tuple)):
            if len(entry) != 2 or not all(isinstance(x, str) for x in entry):
                raise TypeError(f"locator entry must be a string or a pair of strings, got: {entry!r}")
            return LocatorEntry(outer=entry[0], inner=entry[1])
        raise TypeError(f"locator entry must be a string or a pair of strings, got: {entry!r}")


@dataclass(frozen=True, slots=True)
class ExtractionMatch:
    start: int  # half-open [start, end) offsets into the source text
    end: int
    value: str

    @property
    def range(self) -> tuple[int, int]:
        return (self.start, self.end)

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "end": self.end, "value": self.value}
