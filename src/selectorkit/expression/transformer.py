"""Evaluate textual builder expressions through the selector facade."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from selectorkit.expression.errors import ExpressionError
from selectorkit.selector import (
    CompositeSelector,
    FragmentKind,
    SelectorAccumulator,
    SelectorBuilder,
    Stringifiable,
)

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Call names accepted in an expression, including the camelCase and
# hyphenated spellings used in CSS and JavaScript sources.
FRAGMENT_NAMES: dict[str, FragmentKind] = {
    "type": FragmentKind.TYPE,
    "element": FragmentKind.TYPE,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "class_": FragmentKind.CLASS,
    "attribute": FragmentKind.ATTRIBUTE,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudo_class": FragmentKind.PSEUDO_CLASS,
    "pseudoClass": FragmentKind.PSEUDO_CLASS,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo_element": FragmentKind.PSEUDO_ELEMENT,
    "pseudoElement": FragmentKind.PSEUDO_ELEMENT,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}

_ESCAPE_RE = re.compile(r"\\(.)")


class ExpressionTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a parse tree straight into selector objects."""

    def fragment(self, items: list[Token]) -> tuple[FragmentKind, str]:
        name, raw = str(items[0]), str(items[1])
        kind = FRAGMENT_NAMES.get(name)
        if kind is None:
            raise ExpressionError(
                f"Unknown selector fragment {name!r}",
                line=items[0].line,
                column=items[0].column,
            )
        # Strip surrounding quotes and process escapes.
        return kind, _ESCAPE_RE.sub(r"\1", raw[1:-1])

    def chain(self, items: list[tuple[FragmentKind, str]]) -> SelectorAccumulator:
        accumulator = SelectorAccumulator()
        for kind, value in items:
            accumulator.append(kind, value)
        return accumulator

    def combine(self, items: list[object]) -> CompositeSelector:
        left, token, right = items
        combinator = _ESCAPE_RE.sub(r"\1", str(token)[1:-1])
        return SelectorBuilder.combine(left, combinator, right)  # type: ignore[arg-type]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def evaluate(source: str) -> Stringifiable:
    """Evaluate a builder expression into an accumulator or composite.

    Raises ExpressionError for malformed expressions and unknown fragment
    names. DuplicateFragmentError and OrderViolationError from the
    accumulator propagate unchanged.
    """
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        # Lark reports -1 for positions at end of input.
        line = e.line if e.line and e.line > 0 else None
        column = e.column if e.column and e.column > 0 else None
        raise ExpressionError(str(e), line=line, column=column) from e
    try:
        result = ExpressionTransformer().transform(tree)
    except VisitError as e:
        raise e.orig_exc from None
    logger.debug("Evaluated %r", source)
    return result


def build(source: str) -> str:
    """Evaluate a builder expression and return its selector text."""
    return evaluate(source).stringify()
