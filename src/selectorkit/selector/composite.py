"""Composite selectors produced by joining two selectors with a combinator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str: ...


@dataclass(frozen=True)
class CompositeSelector:
    """Already-joined ``left combinator right`` selector text.

    The text is captured when the composite is created, so later changes
    to the accumulators it was built from do not affect it.
    """

    text: str

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text
