"""
Shared contracts for class-list ordering, extraction and linting.

These models are the boundary between the ordering core (`class_order`), the
extraction engine (`class_extract`) and the lint adapter (`class_lint`).
Stage code should consume/produce these objects, not ad-hoc dicts.
"""

from .classes import CompiledGroup, GroupDefinition, NormalizedToken
from .errors import EmptyMatchError, PatternCompileError, UnbalancedRegionError
from .extraction import ExtractionMatch, LocatorEntry
from .lint import UNSORTED_MESSAGE, LintError, LintFinding, LintResult

__all__ = [
    "CompiledGroup",
    "EmptyMatchError",
    "ExtractionMatch",
    "GroupDefinition",
    "LintError",
    "LintFinding",
    "LintResult",
    "LocatorEntry",
    "NormalizedToken",
    "PatternCompileError",
    "UNSORTED_MESSAGE",
    "UnbalancedRegionError",
]
