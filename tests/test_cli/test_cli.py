"""Tests for the selector-builder CLI."""

import json

from click.testing import CliRunner

from selector_builder import __version__
from selector_builder.cli.main import cli
from selector_builder.config import FALLBACK_ENV_VAR, BuilderConfig


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "rectangle" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_renders_fragments_in_order(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_no_fragments_prints_fallback(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build"])
        assert result.exit_code == 0
        assert result.output.strip() == "div"

    def test_fallback_option(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "--fallback", "*"])
        assert result.output.strip() == "*"

    def test_fallback_from_env(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build"], env={FALLBACK_ENV_VAR: "section"})
        assert result.output.strip() == "section"

    def test_order_violation_exits_1(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "class=x", "element=a"])
        assert result.exit_code == 1
        assert "Selector parts should be arranged" in result.output

    def test_duplicate_exits_1(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "should not occur more then one time" in result.output

    def test_unknown_kind_is_usage_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "tag=a"])
        assert result.exit_code == 2
        assert "unknown fragment kind" in result.output

    def test_missing_separator_is_usage_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "element"])
        assert result.exit_code == 2

    def test_json_output(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "--json", "id=main", "class=a", "class=b"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["fragments"]["id"] == "main"
        assert data["fragments"]["classes"] == ["a", "b"]

    def test_verbose_flag_accepted(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "build", "element=p"])
        assert result.exit_code == 0
        assert "p" in result.output


# ---------------------------------------------------------------------------
# rectangle command
# ---------------------------------------------------------------------------


class TestRectangleCommand:
    def test_prints_area(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["rectangle", "10", "20"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"width": 10.0, "height": 20.0, "area": 200.0}


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------


class TestBuilderConfig:
    def test_default(self) -> None:
        assert BuilderConfig().fallback_element == "div"

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv(FALLBACK_ENV_VAR, "span")
        assert BuilderConfig.from_env().fallback_element == "span"

    def test_from_env_unset(self, monkeypatch) -> None:
        monkeypatch.delenv(FALLBACK_ENV_VAR, raising=False)
        assert BuilderConfig.from_env() == BuilderConfig()
