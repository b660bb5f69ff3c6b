"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.fragments import FragmentKind


class SelectorError(Exception):
    """Base class for fragments rejected by a selector accumulator."""

    def __init__(self, message: str, kind: FragmentKind | None = None):
        self.kind = kind
        super().__init__(message)


class DuplicateFragmentError(SelectorError):
    """Raised when a second type, id or pseudo-element is appended."""

    MESSAGE = (
        "Type, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, kind: FragmentKind | None = None):
        super().__init__(self.MESSAGE, kind=kind)


class OrderViolationError(SelectorError):
    """Raised when a fragment arrives after a fragment of a later rank."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "type, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, kind: FragmentKind | None = None):
        super().__init__(self.MESSAGE, kind=kind)
