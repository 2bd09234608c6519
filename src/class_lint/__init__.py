"""
Lint adapter: applies the extraction engine and the class-list formatter to
whole source files and reports ranges whose class lists are not in order.

Static `class` / `className` attribute values are found by pattern; everything
else comes from the configured locator entries.
"""

from .artifacts import serialize_lint_results, write_lint_report_json
from .attributes import iter_attribute_spans
from .config import LintConfig, load_lint_config
from .module import apply_fixes, lint_file, lint_text

__all__ = [
    "LintConfig",
    "apply_fixes",
    "iter_attribute_spans",
    "lint_file",
    "lint_text",
    "load_lint_config",
    "serialize_lint_results",
    "write_lint_report_json",
]
