from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class GroupDefinition:
    """
    Named, ordered bucket of classification patterns.

    The first matcher that matches wins within the group; the first matching
    group in registry order wins overall.
    """

    name: str
    matchers: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "matchers": list(self.matchers)}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "GroupDefinition":
        matchers = d.get("matchers")
        if not isinstance(matchers, (list, tuple)):
            raise TypeError("group definition 'matchers' must be a list of strings")
        return GroupDefinition(
            name=str(d.get("name") or ""),
            matchers=tuple(matchers),
        )


@dataclass(frozen=True, slots=True)
class CompiledGroup:
    name: str
    weight: int  # registry index
    patterns: tuple[re.Pattern[str], ...]

    def matches(self, token: str) -> bool:
        return any(p.search(token) is not None for p in self.patterns)


@dataclass(frozen=True, slots=True)
class NormalizedToken:
    important: bool
    base: str  # important marker and variant prefix removed
    group_weight: int
