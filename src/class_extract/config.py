from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable

from class_contracts.errors import PatternCompileError
from class_contracts.extraction import LocatorEntry

STRING_ARGUMENT_REGEX = r"""["'`]([^"'`]+)["'`]"""

DEFAULT_CLASS_REGEX: tuple[LocatorEntry, ...] = (
    LocatorEntry(r"cva\(([^)]*)\)", STRING_ARGUMENT_REGEX),
    LocatorEntry(r"clsx\(([^)]*)\)", STRING_ARGUMENT_REGEX),
    LocatorEntry(r"cn\(([^)]*)\)", STRING_ARGUMENT_REGEX),
    LocatorEntry(r"twMerge\(([^)]*)\)", STRING_ARGUMENT_REGEX),
)


@dataclass(frozen=True, slots=True)
class CompiledLocator:
    entry: LocatorEntry
    outer: re.Pattern[str]
    inner: re.Pattern[str] | None


def _compile(source: str, role: str) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as e:
        raise PatternCompileError(f"Invalid {role} locator pattern: {source!r} ({e})", pattern=source) from e


def compile_locators(entries: Iterable[Any] | None) -> tuple[CompiledLocator, ...]:
    """
    Compile locator entries (strings, string pairs or LocatorEntry).

    `None` selects DEFAULT_CLASS_REGEX; a supplied list replaces it wholesale.
    """

    if entries is None:
        entries = DEFAULT_CLASS_REGEX

    compiled: list[CompiledLocator] = []
    for raw in entries:
        try:
            entry = LocatorEntry.from_config(raw)
        except TypeError as e:
            raise PatternCompileError(str(e), pattern=raw) from e
        compiled.append(
            CompiledLocator(
                entry=entry,
                outer=_compile(entry.outer, "outer"),
                inner=None if entry.inner is None else _compile(entry.inner, "inner"),
            )
        )
    return tuple(compiled)
