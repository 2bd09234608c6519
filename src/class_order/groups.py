from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from class_contracts.classes import CompiledGroup, GroupDefinition
from class_contracts.errors import PatternCompileError


def _group(name: str, *matchers: str) -> GroupDefinition:
    return GroupDefinition(name=name, matchers=tuple(matchers))


# Order matters: a token is placed in the first group with a matching pattern.
DEFAULT_GROUP_DEFINITIONS: tuple[GroupDefinition, ...] = (
    _group(
        "layout",
        r"^container$",
        r"^box-(?:border|content)$",
        r"^columns-",
        r"^break-(?:after|before|inside)-",
        r"^box-decoration-",
        r"^(?:block|inline-block|inline|flex|inline-flex|grid|inline-grid|table|inline-table|table-caption|table-cell|table-column|table-row|flow-root|contents|list-item|hidden)$",
        r"^float-",
        r"^clear-",
        r"^isolation-",
        r"^object-",
        r"^overflow-",
        r"^overscroll-",
        r"^scroll-(?![mp])",
        r"^(?:static|fixed|absolute|relative|sticky)$",
        r"^(?:top|right|bottom|left|inset)(?:-|$)",
        r"^(?:start|end)(?:-|$)",
        r"^z-",
        r"^visibility$",
    ),
    _group(
        "flex-grid",
        r"^flex-",
        r"^basis-",
        r"^grow-?",
        r"^shrink-?",
        r"^grid-",
        r"^auto-cols-",
        r"^auto-rows-",
        r"^col-(?:auto|span|start|end)",
        r"^row-(?:auto|span|start|end)",
        r"^gap-",
        r"^place-(?:content|items|self)-",
        r"^justify-",
        r"^content-",
        r"^items-",
        r"^self-",
        r"^order-",
    ),
    _group(
        "spacing",
        r"^-?m[trblxy]?(?:-|$)",
        r"^-?p[trblxy]?(?:-|$)",
        r"^space-[xy]-",
        r"^divide-[xy]-",
        r"^scroll-[mp][trblxy]?(?:-|$)",
    ),
    _group(
        "sizing",
        r"^w-",
        r"^min-w-",
        r"^max-w-",
        r"^h-",
        r"^min-h-",
        r"^max-h-",
        r"^size-",
    ),
    _group(
        "typography",
        r"^font-",
        r"^text-",
        r"^tracking-",
        r"^leading-",
        r"^list-",
        r"^placeholder-",
        r"^align-",
        r"^whitespace-",
        r"^break-(?:normal|words|all)$",
        r"^hyphens-",
        r"^content-",
        r"^indent-",
        r"^(?:normal-case|uppercase|lowercase|capitalize)$",
        r"^subpixel-antialiased$",
        r"^antialiased$",
        r"^decoration-",
        r"^underline$",
    ),
    _group(
        "background",
        r"^bg-",
        r"^from-",
        r"^via-",
        r"^to-",
        r"^gradient-",
        r"^accent-",
    ),
    _group(
        "borders",
        r"^border",
        r"^rounded",
        r"^outline-",
        r"^ring-",
        r"^ring-offset-",
    ),
    _group(
        "effects",
        r"^shadow",
        r"^opacity-",
        r"^mix-blend-",
        r"^bg-blend-",
        r"^drop-shadow-",
    ),
    _group(
        "filters",
        r"^blur-",
        r"^brightness-",
        r"^contrast-",
        r"^grayscale",
        r"^hue-rotate-",
        r"^invert",
        r"^saturate-",
        r"^sepia",
        r"^backdrop-",
    ),
    _group(
        "tables",
        r"^table-",
        r"^caption-",
        r"^border-(?:collapse|separate)$",
    ),
    _group(
        "transforms",
        r"^transform(-gpu)?$",
        r"^origin-",
        r"^scale-",
        r"^rotate-",
        r"^translate-",
        r"^skew-",
        r"^motion-(?:safe|reduce)",
        r"^perspective-",
    ),
    _group(
        "transitions",
        r"^transition",
        r"^duration-",
        r"^ease-",
        r"^delay-",
        r"^animate-",
    ),
    _group(
        "interactivity",
        r"^appearance-",
        r"^cursor-",
        r"^caret-",
        r"^pointer-events-",
        r"^resize-",
        r"^scroll-(?:smooth|auto)$",
        r"^touch-",
        r"^select-",
        r"^will-change-",
        r"^snap-",
    ),
    _group("svg", r"^fill-", r"^stroke-"),
    _group(
        "accessibility",
        r"^sr-only$",
        r"^not-sr-only$",
        r"^aria-",
        r"^data-",
    ),
)


def compile_group_definitions(definitions: Iterable[GroupDefinition]) -> tuple[CompiledGroup, ...]:
    """
    Compile group definitions into matchers; weight = position in `definitions`.

    Fails fast with PatternCompileError naming the offending group and pattern.
    """

    compiled: list[CompiledGroup] = []
    for index, definition in enumerate(definitions):
        if not definition.matchers:
            raise PatternCompileError(
                f"Group {definition.name!r} has no matchers",
                group=definition.name,
            )
        patterns: list[re.Pattern[str]] = []
        for source in definition.matchers:
            if not isinstance(source, str):
                raise PatternCompileError(
                    f"Group {definition.name!r} matcher must be a string, got: {source!r}",
                    group=definition.name,
                    pattern=source,
                )
            try:
                patterns.append(re.compile(source))
            except re.error as e:
                raise PatternCompileError(
                    f"Invalid matcher in group {definition.name!r}: {source!r} ({e})",
                    group=definition.name,
                    pattern=source,
                ) from e
        compiled.append(CompiledGroup(name=definition.name, weight=index, patterns=tuple(patterns)))
    return tuple(compiled)


@lru_cache(maxsize=1)
def default_compiled_groups() -> tuple[CompiledGroup, ...]:
    # Built once per process and shared read-only by every default formatter.
    return compile_group_definitions(DEFAULT_GROUP_DEFINITIONS)


def resolve_group_weight(token: str, groups: tuple[CompiledGroup, ...] | list[CompiledGroup]) -> int:
    for group in groups:
        if group.matches(token):
            return group.weight
    return len(groups)
