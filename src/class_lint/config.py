from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from class_contracts.classes import GroupDefinition
from class_contracts.extraction import LocatorEntry
from class_order.config import FormatterConfig

_KNOWN_KEYS = {"classRegex", "groupDefinitions", "attributes", "debug"}


@dataclass(frozen=True, slots=True)
class LintConfig:
    """
    Lint adapter options, named after the lint rule options they mirror.

    - class_regex: None keeps the built-in locator set; a tuple replaces it.
    - group_definitions: non-empty replaces the default group registry.
    - attributes: also scan static `class` / `className` attribute values.
    """

    class_regex: tuple[LocatorEntry, ...] | None = None
    group_definitions: tuple[GroupDefinition, ...] = ()
    attributes: bool = True
    debug: bool = False

    def validate(self) -> None:
        if self.class_regex is not None:
            for entry in self.class_regex:
                if not isinstance(entry, LocatorEntry):
                    raise TypeError("class_regex must contain LocatorEntry instances")
        for definition in self.group_definitions:
            if not isinstance(definition, GroupDefinition):
                raise TypeError("group_definitions must contain GroupDefinition instances")

    def __post_init__(self) -> None:
        self.validate()

    def formatter_config(self) -> FormatterConfig:
        return FormatterConfig(group_definitions=self.group_definitions)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "LintConfig":
        if not isinstance(d, dict):
            raise TypeError("lint config must be a JSON object")
        unknown = sorted(set(d) - _KNOWN_KEYS)
        if unknown:
            raise ValueError(f"Unknown lint config option(s): {', '.join(unknown)}")

        class_regex_raw = d.get("classRegex")
        if class_regex_raw is not None and not isinstance(class_regex_raw, list):
            raise TypeError("classRegex must be a list")
        groups_raw = d.get("groupDefinitions") or []
        if not isinstance(groups_raw, list):
            raise TypeError("groupDefinitions must be a list")

        return LintConfig(
            class_regex=(
                None
                if class_regex_raw is None
                else tuple(LocatorEntry.from_config(x) for x in class_regex_raw)
            ),
            group_definitions=tuple(GroupDefinition.from_dict(x) for x in groups_raw),
            attributes=bool(d.get("attributes", True)),
            debug=bool(d.get("debug", False)),
        )


def load_lint_config(path: Path) -> LintConfig:
    return LintConfig.from_dict(json.loads(path.read_text(encoding="utf-8")))
