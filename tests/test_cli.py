"""Tests for the CLI - resolve and walk commands, error formatting."""

import json

from click.testing import CliRunner

from inferables import __version__
from inferables.commands.common import _format_error, describe, to_json
from inferables.lib.errors import ConstraintViolation
from inferables.lib.maybe import Some
from inferables.main import cli
from inferables.models import Actual, Guess, GuessList, Unsolvable


class TestVersion:
    """Tests for the top-level group."""

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_from_env(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["walk", "a"], env={"INFER_LOG_LEVEL": "debug"}
        )
        assert result.exit_code == 0

    def test_invalid_log_level(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--log-level", "LOUD", "walk", "a"])
        assert result.exit_code != 0


class TestResolveCommand:
    """Tests for `infer resolve`."""

    def test_confirms_accepted_candidate(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "red", "green", "blue"], input="n\ny\n")
        assert result.exit_code == 0
        assert "Accept 'red'?" in result.output
        assert "Accept 'green'?" in result.output
        assert "Accept 'blue'?" not in result.output
        assert "Confirmed: green" in result.output

    def test_all_declined_exits_nonzero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "red", "green"], input="n\nn\n")
        assert result.exit_code == 1
        assert "Unsolvable" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "--json", "8080"], input="y\n")
        assert result.exit_code == 0
        assert "Accept '8080'?" in result.stderr
        assert "Accept" not in result.stdout
        # CliRunner echoes each typed answer to stdout
        answer, document = result.stdout.split("\n", 1)
        assert answer.strip() == "y"
        assert json.loads(document) == {"variant": "Actual", "value": "8080"}

    def test_json_output_when_unsolvable(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "--json", "a"], input="n\n")
        assert result.exit_code == 1
        assert "Accept" not in result.stdout
        answer, document = result.stdout.split("\n", 1)
        assert answer.strip() == "n"
        assert json.loads(document) == {"variant": "Unsolvable", "value": None}

    def test_requires_candidates(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve"])
        assert result.exit_code == 2


class TestWalkCommand:
    """Tests for `infer walk`."""

    def test_no_declines_shows_all_candidates(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", "a", "b", "c"])
        assert result.exit_code == 0
        assert result.output.strip() == "Guesses: a, b, c"

    def test_declines_drop_candidates(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", "a", "b", "c", "--declines", "1"])
        assert result.output.strip() == "Guesses: b, c"

    def test_declines_to_unsolvable(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", "a", "b", "-d", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "Unsolvable: no candidate was confirmed"

    def test_confirm_after_declines(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", "a", "b", "c", "-d", "2", "--confirm"])
        assert result.output.strip() == "Actual: c"

    def test_confirm_on_unsolvable_stays_unsolvable(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", "a", "-d", "1", "--confirm"])
        assert result.output.strip().startswith("Unsolvable")

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", "a", "b", "-d", "1", "--json"])
        assert json.loads(result.output) == {
            "variant": "Guesses",
            "value": "b",
            "values": ["b"],
        }

    def test_no_candidates_is_an_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk"])
        assert result.exit_code == 1
        assert "Invalid input" in result.output
        assert "at least one candidate" in result.output

    def test_negative_declines_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", "a", "-d", "-1"])
        assert result.exit_code == 2


class TestFormatting:
    """Tests for output helpers in commands/common.py."""

    def test_describe_each_variant(self) -> None:
        assert describe(Actual(1)) == "Actual: 1"
        assert describe(Guess("x")) == "Guess: x"
        assert describe(GuessList([1, 2])) == "Guesses: 1, 2"
        assert describe(Unsolvable()) == "Unsolvable: no candidate was confirmed"

    def test_describe_falls_back_to_name(self) -> None:
        assert describe(Some(3)) == "Some: 3"

    def test_to_json_unsolvable(self) -> None:
        assert json.loads(to_json(Unsolvable())) == {"variant": "Unsolvable", "value": None}

    def test_format_constraint_violation(self) -> None:
        message = _format_error(ConstraintViolation("bad candidates"))
        assert message == "Invalid input: bad candidates"

    def test_format_unknown_error_uses_str(self) -> None:
        assert _format_error("something unexpected") == "something unexpected"
