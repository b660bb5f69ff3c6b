"""Stateless facade creating selector accumulators and composites."""

from __future__ import annotations

import logging

from selectorkit.selector.accumulator import SelectorAccumulator
from selectorkit.selector.composite import CompositeSelector, Stringifiable

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Entry point for building CSS selectors.

    Each fragment constructor returns a new SelectorAccumulator seeded
    with that fragment; further fragments are chained on the result.
    ``combine`` joins two built selectors (or composites) with a
    combinator token such as ``" "``, ``"+"``, ``"~"`` or ``">"``. The
    token is passed through as given.

    Example::

        builder = css_selector_builder
        builder.combine(
            builder.type("div").id("main"),
            ">",
            builder.class_("item").pseudo_class("first-child"),
        ).stringify()
        # 'div#main > .item:first-child'
    """

    @staticmethod
    def type(value: str) -> SelectorAccumulator:
        return SelectorAccumulator().append_type(value)

    @staticmethod
    def id(value: str) -> SelectorAccumulator:
        return SelectorAccumulator().append_id(value)

    @staticmethod
    def class_(value: str) -> SelectorAccumulator:
        return SelectorAccumulator().append_class(value)

    @staticmethod
    def attribute(value: str) -> SelectorAccumulator:
        return SelectorAccumulator().append_attribute(value)

    @staticmethod
    def pseudo_class(value: str) -> SelectorAccumulator:
        return SelectorAccumulator().append_pseudo_class(value)

    @staticmethod
    def pseudo_element(value: str) -> SelectorAccumulator:
        return SelectorAccumulator().append_pseudo_element(value)

    element = type
    attr = attribute

    @staticmethod
    def combine(
        left: Stringifiable, combinator: str, right: Stringifiable
    ) -> CompositeSelector:
        """Join *left* and *right* with *combinator* surrounded by single spaces."""
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("Combined selector: %s", text)
        return CompositeSelector(text)


css_selector_builder = SelectorBuilder()
