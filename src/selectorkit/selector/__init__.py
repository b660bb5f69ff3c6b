from selectorkit.selector.accumulator import SelectorAccumulator
from selectorkit.selector.builder import SelectorBuilder, css_selector_builder
from selectorkit.selector.composite import CompositeSelector, Stringifiable
from selectorkit.selector.errors import (
    DuplicateFragmentError,
    OrderViolationError,
    SelectorError,
)
from selectorkit.selector.fragments import CANONICAL_ORDER, FragmentKind

__all__ = [
    "CANONICAL_ORDER",
    "CompositeSelector",
    "DuplicateFragmentError",
    "FragmentKind",
    "OrderViolationError",
    "SelectorAccumulator",
    "SelectorBuilder",
    "SelectorError",
    "Stringifiable",
    "css_selector_builder",
]
