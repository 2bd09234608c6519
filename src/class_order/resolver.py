from __future__ import annotations

from abc import ABC, abstractmethod

from tailwind_merge import TailwindMerge


class ConflictResolver(ABC):
    """
    Collapses mutually-overriding utility tokens to their last-declared winner.

    Resolvers must:
    - Accept whitespace-joined tokens and return whitespace-joined tokens
    - Keep the relative order of the surviving tokens
    - Be total for well-formed input (never raise)
    """

    @abstractmethod
    def merge(self, tokens: str) -> str:
        raise NotImplementedError

    def __call__(self, tokens: str) -> str:
        return self.merge(tokens)


class UtilityConflictResolver(ConflictResolver):
    """Default resolver backed by the `tailwind-merge` conflict tables."""

    def __init__(self, merger: TailwindMerge | None = None) -> None:
        self._merger = merger if merger is not None else TailwindMerge()

    def merge(self, tokens: str) -> str:
        if not tokens.strip():
            return ""
        return self._merger.merge(tokens)
