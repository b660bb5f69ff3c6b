"""Fragment kinds of a compound selector, in canonical rank order."""

from __future__ import annotations

from enum import Enum


class FragmentKind(Enum):
    """One kind of selector fragment.

    Member values are ``(rank, label, prefix, suffix, unique)``:

        rank   -- position in ``element#id.class[attr]:pseudo-class::pseudo-element``
        label  -- CSS name of the fragment kind
        prefix -- text rendered before the raw value
        suffix -- text rendered after the raw value
        unique -- whether a compound selector may hold at most one
    """

    TYPE = (0, "type", "", "", True)
    ID = (1, "id", "#", "", True)
    CLASS = (2, "class", ".", "", False)
    ATTRIBUTE = (3, "attribute", "[", "]", False)
    PSEUDO_CLASS = (4, "pseudo-class", ":", "", False)
    PSEUDO_ELEMENT = (5, "pseudo-element", "::", "", True)

    def __init__(
        self, rank: int, label: str, prefix: str, suffix: str, unique: bool
    ) -> None:
        self.rank = rank
        self.label = label
        self.prefix = prefix
        self.suffix = suffix
        self.unique = unique

    def render(self, value: str) -> str:
        """Return *value* with this kind's prefix and suffix applied."""
        return f"{self.prefix}{value}{self.suffix}"

    def __str__(self) -> str:
        return self.label


CANONICAL_ORDER: tuple[FragmentKind, ...] = tuple(
    sorted(FragmentKind, key=lambda kind: kind.rank)
)
