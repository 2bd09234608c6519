from __future__ import annotations

import re
from typing import Iterator

from class_contracts.extraction import ExtractionMatch

# Static attribute values only; bound attributes (`:class`, `v-bind:class`)
# and interpolated template literals are left to the locator patterns.
_ATTRIBUTE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"""(?<![\w:.@-])(?:class|className)\s*=\s*(?:"([^"]*)"|'([^']*)')"""),
    re.compile(
        r"""(?<![\w:.@-])(?:class|className)\s*=\s*\{\s*(?:"([^"\\]*)"|'([^'\\]*)'|`([^`$\\]*)`)\s*\}"""
    ),
)


def iter_attribute_spans(text: str) -> Iterator[ExtractionMatch]:
    for pattern in _ATTRIBUTE_PATTERNS:
        for m in pattern.finditer(text):
            for group in range(1, pattern.groups + 1):
                if m.start(group) >= 0:
                    start, end = m.span(group)
                    yield ExtractionMatch(start=start, end=end, value=text[start:end])
                    break
