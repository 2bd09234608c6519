from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Iterator

from class_contracts.errors import EmptyMatchError, UnbalancedRegionError
from class_contracts.extraction import ExtractionMatch

from .config import CompiledLocator, compile_locators
from .scanner import extract_string_literals, find_matching_paren, find_open_paren

logger = logging.getLogger(__name__)


def _literal_span(m: re.Match[str]) -> tuple[int, int]:
    """Span of capture group 1 when it participated, else the whole match."""

    if m.end() == m.start():
        raise EmptyMatchError(m.start())
    if m.re.groups >= 1 and m.start(1) >= 0:
        return m.start(1), m.end(1)
    return m.start(), m.end()


def _inner_matches(inner: re.Pattern[str], text: str, region_start: int, region_end: int) -> Iterator[tuple[int, int]]:
    region = text[region_start:region_end]
    for m in inner.finditer(region):
        try:
            start, end = _literal_span(m)
        except EmptyMatchError:
            continue
        yield region_start + start, region_start + end


def _literal_matches(text: str, region_start: int, region_end: int) -> Iterator[tuple[int, int]]:
    literals = extract_string_literals(text[region_start:region_end])
    if not literals:
        # No quoted literal: the whole argument region is the value.
        yield region_start, region_end
        return
    for _value, start, end in literals:
        yield region_start + start, region_start + end


def _entry_matches(locator: CompiledLocator, text: str) -> Iterator[tuple[int, int]]:
    for m in locator.outer.finditer(text):
        if m.end() == m.start():
            continue

        open_abs = find_open_paren(text, m.start(), m.end())
        if open_abs is None:
            continue

        try:
            close_abs = find_matching_paren(text, open_abs)
        except UnbalancedRegionError as e:
            logger.debug("Skipping locator match %r: %s", locator.entry.outer, e)
            continue

        region_start = open_abs + 1
        if locator.inner is not None:
            yield from _inner_matches(locator.inner, text, region_start, close_abs)
        else:
            yield from _literal_matches(text, region_start, close_abs)


def extract(text: str, locator_entries: Iterable[Any] | None = None) -> list[ExtractionMatch]:
    """
    Locate class-list literals in `text`.

    Entries are applied in order; ranges are unique within one entry but may
    repeat across entries (callers dedupe across entries).
    """

    matches: list[ExtractionMatch] = []
    for locator in compile_locators(locator_entries):
        matches.extend(extract_with_locator(text, locator))
    return matches


def extract_with_locator(text: str, locator: CompiledLocator) -> list[ExtractionMatch]:
    seen: set[tuple[int, int]] = set()
    out: list[ExtractionMatch] = []
    for start, end in _entry_matches(locator, text):
        if (start, end) in seen:
            continue
        seen.add((start, end))
        out.append(ExtractionMatch(start=start, end=end, value=text[start:end]))
    logger.debug("Locator %r matched %d range(s)", locator.entry.outer, len(out))
    return out
