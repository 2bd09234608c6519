"""
Class-list ordering: group classification, token normalization, deterministic
ordering and conflict-resolution delegation.

No source parsing happens here; callers hand in raw class-list strings.
"""

from .config import FormatterConfig
from .formatter import ClassFormatter, collapse_whitespace, create_formatter, format_class_string
from .groups import (
    DEFAULT_GROUP_DEFINITIONS,
    compile_group_definitions,
    default_compiled_groups,
    resolve_group_weight,
)
from .resolver import ConflictResolver, UtilityConflictResolver
from .tokens import compare_tokens, normalize_token, strip_variants

__all__ = [
    "ClassFormatter",
    "ConflictResolver",
    "DEFAULT_GROUP_DEFINITIONS",
    "FormatterConfig",
    "UtilityConflictResolver",
    "collapse_whitespace",
    "compare_tokens",
    "compile_group_definitions",
    "create_formatter",
    "default_compiled_groups",
    "format_class_string",
    "normalize_token",
    "resolve_group_weight",
    "strip_variants",
]
