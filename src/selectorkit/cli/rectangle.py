"""CLI commands: selectorkit rectangle / rectangle-from-json."""

from __future__ import annotations

import sys

import click

from selectorkit.config import SelectorkitConfig
from selectorkit.serialization import ParseError, deserialize, serialize
from selectorkit.shapes import Rectangle


class NumberParamType(click.ParamType):
    """A number that stays an int when written without a fraction."""

    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a valid number", param, ctx)


NUMBER = NumberParamType()


def _check_dimensions(rect: Rectangle) -> None:
    for name in ("width", "height"):
        value = getattr(rect, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{name} must be a number, got {value!r}")


@click.command()
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON.")
@click.pass_obj
def rectangle(
    config: SelectorkitConfig | None, width: float, height: float, as_json: bool
) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width, height)
    if as_json:
        indent = config.json_indent if config else None
        click.echo(serialize(rect, indent=indent))
    else:
        click.echo(f"{rect.area():g}")


@click.command("rectangle-from-json")
@click.argument("text")
def rectangle_from_json(text: str) -> None:
    """Deserialize a rectangle from JSON TEXT and print its area."""
    try:
        rect = deserialize(Rectangle, text)
        _check_dimensions(rect)
        area = f"{rect.area():g}"
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except (TypeError, AttributeError) as exc:
        click.echo(f"Invalid rectangle: {exc}", err=True)
        sys.exit(1)
    click.echo(area)
