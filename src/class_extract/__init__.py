"""
Source-text extraction: find class-list literals through configurable locator
patterns, with balanced-parenthesis and quoted-string aware scanning.

No grammar, no AST: a depth counter, a quote mode and an escape flag.
"""

from .config import DEFAULT_CLASS_REGEX, STRING_ARGUMENT_REGEX, CompiledLocator, compile_locators
from .module import extract, extract_with_locator
from .scanner import extract_string_literals, find_matching_paren, find_open_paren

__all__ = [
    "CompiledLocator",
    "DEFAULT_CLASS_REGEX",
    "STRING_ARGUMENT_REGEX",
    "compile_locators",
    "extract",
    "extract_string_literals",
    "extract_with_locator",
    "find_matching_paren",
    "find_open_paren",
]
