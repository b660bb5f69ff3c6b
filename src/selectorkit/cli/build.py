"""CLI commands: selectorkit build / combine -- evaluate builder expressions."""

from __future__ import annotations

import sys

import click

from selectorkit.expression import ExpressionError, evaluate
from selectorkit.selector import SelectorBuilder, SelectorError, Stringifiable


def _evaluate_or_exit(source: str) -> Stringifiable:
    try:
        return evaluate(source)
    except ExpressionError as exc:
        click.echo(f"Expression error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("expression")
def build(expression: str) -> None:
    """Evaluate a builder EXPRESSION and print the selector.

    Example: selectorkit build 'type("a").attribute("href").pseudo_class("focus")'
    """
    click.echo(_evaluate_or_exit(expression).stringify())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two builder expressions LEFT and RIGHT with COMBINATOR."""
    composite = SelectorBuilder.combine(
        _evaluate_or_exit(left), combinator, _evaluate_or_exit(right)
    )
    click.echo(composite.stringify())
