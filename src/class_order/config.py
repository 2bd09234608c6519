from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from class_contracts.classes import GroupDefinition


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """
    Class-list formatter parameters.

    A non-empty `group_definitions` replaces the default registry wholesale;
    there is no partial merge with the built-in groups.
    """

    group_definitions: tuple[GroupDefinition, ...] = ()

    def validate(self) -> None:
        for definition in self.group_definitions:
            if not isinstance(definition, GroupDefinition):
                raise TypeError("group_definitions must contain GroupDefinition instances")

    def __post_init__(self) -> None:
        self.validate()

    @property
    def uses_default_groups(self) -> bool:
        return not self.group_definitions

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "FormatterConfig":
        raw = d.get("groupDefinitions", d.get("group_definitions")) or []
        if not isinstance(raw, list):
            raise TypeError("groupDefinitions must be a list")
        return FormatterConfig(group_definitions=tuple(GroupDefinition.from_dict(x) for x in raw))
