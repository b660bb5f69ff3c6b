"""Mutable builder collecting the fragments of one compound selector."""

from __future__ import annotations

import logging

from selectorkit.selector.errors import DuplicateFragmentError, OrderViolationError
from selectorkit.selector.fragments import CANONICAL_ORDER, FragmentKind

logger = logging.getLogger(__name__)


class SelectorAccumulator:
    """Collects selector fragments into one slot per kind.

    Appends must arrive in non-decreasing canonical rank. Type, id and
    pseudo-element slots hold at most one entry; class, attribute and
    pseudo-class entries accumulate in call order. Every append returns
    the accumulator itself so calls can be chained::

        SelectorAccumulator().type("a").attribute('href$=".png"').pseudo_class("focus")
    """

    def __init__(self) -> None:
        self._slots: dict[FragmentKind, list[str]] = {
            kind: [] for kind in CANONICAL_ORDER
        }

    # --- core -----------------------------------------------------------------

    def _has_later_fragments(self, kind: FragmentKind) -> bool:
        return any(self._slots[later] for later in CANONICAL_ORDER[kind.rank + 1 :])

    def append(self, kind: FragmentKind, value: str) -> SelectorAccumulator:
        """Append one fragment of *kind*, rendered with its prefix.

        Raises DuplicateFragmentError if *kind* is unique and already
        present, then OrderViolationError if a later-ranked kind is
        already present.
        """
        if kind.unique and self._slots[kind]:
            logger.debug("Rejected duplicate %s fragment %r", kind, value)
            raise DuplicateFragmentError(kind)
        if self._has_later_fragments(kind):
            logger.debug("Rejected out-of-order %s fragment %r", kind, value)
            raise OrderViolationError(kind)
        self._slots[kind].append(kind.render(value))
        return self

    def append_type(self, value: str) -> SelectorAccumulator:
        return self.append(FragmentKind.TYPE, value)

    def append_id(self, value: str) -> SelectorAccumulator:
        return self.append(FragmentKind.ID, value)

    def append_class(self, value: str) -> SelectorAccumulator:
        return self.append(FragmentKind.CLASS, value)

    def append_attribute(self, value: str) -> SelectorAccumulator:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def append_pseudo_class(self, value: str) -> SelectorAccumulator:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def append_pseudo_element(self, value: str) -> SelectorAccumulator:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    # --- chain aliases --------------------------------------------------------

    type = append_type
    element = append_type
    id = append_id
    class_ = append_class
    attribute = append_attribute
    attr = append_attribute
    pseudo_class = append_pseudo_class
    pseudo_element = append_pseudo_element

    # --- reading --------------------------------------------------------------

    def fragments(self, kind: FragmentKind) -> list[str]:
        """Return a copy of the rendered entries stored for *kind*."""
        return list(self._slots[kind])

    def stringify(self) -> str:
        """Render all fragments in canonical order with no separators."""
        return "".join("".join(self._slots[kind]) for kind in CANONICAL_ORDER)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorAccumulator({self.stringify()!r})"
