from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Callable

from class_contracts.classes import CompiledGroup

from .config import FormatterConfig
from .groups import compile_group_definitions, default_compiled_groups
from .resolver import UtilityConflictResolver
from .tokens import NormalizationCache, compare_tokens

_WHITESPACE_RE = re.compile(r"\s+")

Resolver = Callable[[str], str]


def collapse_whitespace(value: str) -> str:
    return _WHITESPACE_RE.sub(" ", value.strip())


def sort_tokens(tokens: list[str], groups: tuple[CompiledGroup, ...]) -> list[str]:
    # Fresh cache per call; never shared across formatting calls.
    cache: NormalizationCache = {}
    return sorted(tokens, key=cmp_to_key(lambda a, b: compare_tokens(a, b, groups, cache)))


class ClassFormatter:
    """
    Reusable class-list formatter bound to one compiled group registry.

    Calling it returns the replacement string, or None when nothing changes.
    """

    def __init__(self, groups: tuple[CompiledGroup, ...], resolver: Resolver) -> None:
        self.groups = groups
        self.resolver = resolver

    def format(self, raw: str) -> str | None:
        collapsed = collapse_whitespace(raw)
        if not collapsed:
            return None

        tokens = collapsed.split(" ")
        if len(tokens) <= 1:
            return None if collapsed == raw else collapsed

        ordered = sort_tokens(tokens, self.groups)
        merged = collapse_whitespace(self.resolver(" ".join(ordered)))

        if merged == collapsed:
            # Whitespace cleanup alone is still a change worth reporting.
            return None if collapsed == raw else collapsed
        return merged

    def __call__(self, raw: str) -> str | None:
        return self.format(raw)


def create_formatter(
    config: FormatterConfig | None = None, *, resolver: Resolver | None = None
) -> ClassFormatter:
    if config is not None and not config.uses_default_groups:
        groups = compile_group_definitions(config.group_definitions)
    else:
        groups = default_compiled_groups()
    return ClassFormatter(groups, resolver if resolver is not None else UtilityConflictResolver())


_DEFAULT_FORMATTER: ClassFormatter | None = None


def format_class_string(
    raw: str, config: FormatterConfig | None = None, *, resolver: Resolver | None = None
) -> str | None:
    global _DEFAULT_FORMATTER
    if config is None and resolver is None:
        if _DEFAULT_FORMATTER is None:
            _DEFAULT_FORMATTER = create_formatter()
        return _DEFAULT_FORMATTER(raw)
    return create_formatter(config, resolver=resolver)(raw)
