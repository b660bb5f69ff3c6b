"""Tests for the selectorkit CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build CSS selectors" in result.output

    def test_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        for name in ("build", "combine", "rectangle", "rectangle-from-json"):
            assert name in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_option(self) -> None:
        result = CliRunner().invoke(
            cli, ["--log-level", "debug", "build", 'id("main")']
        )
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# build / combine
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", 'id("main").class("container").class("editable")']
        )
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_build_combine_expression(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", 'combine(type("ul"), ">", type("li"))']
        )
        assert result.exit_code == 0
        assert result.output.strip() == "ul > li"

    def test_order_violation_exits_1(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", 'type("div").attribute("x").id("main")']
        )
        assert result.exit_code == 1
        assert "Selector error" in result.output

    def test_bad_expression_exits_1(self) -> None:
        result = CliRunner().invoke(cli, ["build", "type("])
        assert result.exit_code == 1
        assert "Expression error" in result.output


class TestCombineCommand:
    def test_combine(self) -> None:
        result = CliRunner().invoke(
            cli, ["combine", 'type("div").id("main")', "+", 'class("item")']
        )
        assert result.exit_code == 0
        assert result.output.strip() == "div#main + .item"

    def test_combine_duplicate_exits_1(self) -> None:
        result = CliRunner().invoke(cli, ["combine", 'id("a").id("b")', ">", 'type("p")'])
        assert result.exit_code == 1
        assert "more than one time" in result.output


# ---------------------------------------------------------------------------
# rectangle commands
# ---------------------------------------------------------------------------


class TestRectangleCommands:
    def test_area(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle", "10", "20"])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_json(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle", "10", "20", "--json"])
        assert result.exit_code == 0
        assert result.output.strip() == '{"width":10,"height":20}'

    def test_json_indent_from_env(self) -> None:
        result = CliRunner().invoke(
            cli,
            ["rectangle", "1", "2", "--json"],
            env={"SELECTORKIT_JSON_INDENT": "2"},
        )
        assert result.exit_code == 0
        assert '\n  "width": 1,' in result.output

    def test_from_json(self) -> None:
        result = CliRunner().invoke(
            cli, ["rectangle-from-json", '{"width":3,"height":4}']
        )
        assert result.exit_code == 0
        assert result.output.strip() == "12"

    def test_from_json_parse_error(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle-from-json", "{width: 3}"])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_from_json_missing_field(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle-from-json", '{"width":3}'])
        assert result.exit_code == 1
        assert "Invalid rectangle" in result.output

    def test_json_keeps_fractions(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle", "1.5", "2", "--json"])
        assert result.exit_code == 0
        assert result.output.strip() == '{"width":1.5,"height":2}'

    def test_fractional_area(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle", "1.5", "3"])
        assert result.exit_code == 0
        assert result.output.strip() == "4.5"

    def test_non_numeric_argument(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle", "ten", "2"])
        assert result.exit_code == 2
        assert "'ten' is not a valid number" in result.output

    def test_from_json_string_field(self) -> None:
        result = CliRunner().invoke(
            cli, ["rectangle-from-json", '{"width":"a","height":2}']
        )
        assert result.exit_code == 1
        assert "Invalid rectangle: width must be a number" in result.output

    def test_from_json_list_field(self) -> None:
        result = CliRunner().invoke(
            cli, ["rectangle-from-json", '{"width":3,"height":[2]}']
        )
        assert result.exit_code == 1
        assert "Invalid rectangle: height must be a number" in result.output

    def test_from_json_not_an_object(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle-from-json", "[3, 4]"])
        assert result.exit_code == 1
        assert "Invalid rectangle" in result.output


# ---------------------------------------------------------------------------
# environment configuration
# ---------------------------------------------------------------------------


class TestEnvironment:
    def test_bad_json_indent(self) -> None:
        result = CliRunner().invoke(
            cli,
            ["rectangle", "1", "2", "--json"],
            env={"SELECTORKIT_JSON_INDENT": "two"},
        )
        assert result.exit_code == 2
        assert "SELECTORKIT_JSON_INDENT" in result.output

    def test_bad_log_level(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", 'id("a")'], env={"SELECTORKIT_LOG_LEVEL": "verbose"}
        )
        assert result.exit_code == 2
        assert "SELECTORKIT_LOG_LEVEL" in result.output

    def test_log_level_from_env(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", 'id("a")'], env={"SELECTORKIT_LOG_LEVEL": "info"}
        )
        assert result.exit_code == 0
        assert result.output.strip().endswith("#a")
