"""selectorkit - fluent CSS selector builder plus small object helpers."""

__version__ = "0.1.0"

from selectorkit.selector import (  # noqa: E402
    CompositeSelector,
    DuplicateFragmentError,
    OrderViolationError,
    SelectorAccumulator,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)
from selectorkit.serialization import ParseError, deserialize, serialize  # noqa: E402
from selectorkit.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    "CompositeSelector",
    "DuplicateFragmentError",
    "OrderViolationError",
    "ParseError",
    "Rectangle",
    "SelectorAccumulator",
    "SelectorBuilder",
    "SelectorError",
    "css_selector_builder",
    "deserialize",
    "serialize",
]
