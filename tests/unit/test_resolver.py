"""Tests for the commit message template resolver."""

import logging

import pytest

from glitter.exceptions import (
    MissingArgumentError,
    MissingTemplateError,
    TemplateError,
    TooFewArgumentsError,
)
from glitter.template.resolver import RAW_COMMIT_MSG, required_arguments, resolve

ARGS = ["test", "a", "b", "c"]


class TestResolve:
    """Tests for resolve."""

    def test_basic(self) -> None:
        """Test single and rest references together."""
        assert resolve("$1($2): $3+", ARGS) == "test(a): b c"

    def test_reuse_arguments(self) -> None:
        """Test the same argument referenced several times."""
        assert resolve("$1($2): $3+ : $2 | $1+", ARGS) == "test(a): b c : a | test a b c"

    def test_less_than_needed_args(self) -> None:
        """Test that a missing argument fails the whole resolution."""
        with pytest.raises(TemplateError):
            resolve("$1($2): $3+", ["test", "a"])

    def test_no_placeholders(self) -> None:
        """Test that plain text passes through."""
        assert resolve("chore: release", []) == "chore: release"

    def test_resolving_twice_is_stable(self) -> None:
        """Test that a resolved message resolves to itself."""
        message = resolve("$1($2): $3+", ARGS)
        assert resolve(message, ARGS) == message

    def test_argument_values_are_not_rescanned(self) -> None:
        """Test that $ text inside an argument is inserted verbatim."""
        assert resolve("$1 $2", ["$2", "x"]) == "$2 x"

    def test_unused_arguments_are_fine(self) -> None:
        """Test extra arguments are ignored."""
        assert resolve("$2", ARGS) == "a"

    def test_two_digit_index_left_alone(self) -> None:
        """Test $10 stays as text even with ten arguments."""
        args = [str(n) for n in range(1, 11)]
        assert resolve("$1 $10", args) == "1 $10"


class TestResolveFailures:
    """Tests for the failure kinds."""

    def test_sentinel_template(self) -> None:
        """Test that the unconfigured template always fails."""
        with pytest.raises(MissingTemplateError) as exc_info:
            resolve(RAW_COMMIT_MSG, ARGS)
        assert exc_info.value.kind == "MissingTemplate"
        assert "No template provided" in str(exc_info.value)

    def test_sentinel_template_without_arguments(self) -> None:
        """Test the sentinel fails before arguments are looked at."""
        with pytest.raises(MissingTemplateError):
            resolve("$RAW_COMMIT_MSG", [])

    def test_single_reference_past_end(self) -> None:
        """Test $N with N greater than the argument count."""
        with pytest.raises(TooFewArgumentsError) as exc_info:
            resolve("$1 $3", ["x", "y"])
        assert exc_info.value.kind == "TooFewArguments"
        assert exc_info.value.index == 3
        assert exc_info.value.provided == 2

    def test_rest_reference_at_last_index(self) -> None:
        """Test $N+ where N is the last argument yields that argument."""
        assert resolve("$4+", ARGS) == "c"

    def test_rest_reference_past_end(self) -> None:
        """Test $N+ where N is one past the last argument."""
        with pytest.raises(MissingArgumentError) as exc_info:
            resolve("$5+", ARGS)
        assert exc_info.value.kind == "MissingArgument"
        assert "$5+" in str(exc_info.value)

    def test_no_arguments(self) -> None:
        """Test a placeholder with an empty argument list."""
        with pytest.raises(TooFewArgumentsError):
            resolve("$1", [])


class TestCaseRules:
    """Tests for per-argument case transforms."""

    def test_upper(self) -> None:
        """Test an upper case rule."""
        assert resolve("$2", ["x", "hello"], {2: "upper"}) == "HELLO"

    def test_unknown_case_warns_and_passes_through(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that an unknown transform is a warning, not a failure."""
        with caplog.at_level(logging.WARNING, logger="glitter.template.resolver"):
            assert resolve("$2", ["x", "hello"], {2: "camel"}) == "hello"

        assert any(
            record.levelno == logging.WARNING and "camel" in record.getMessage()
            for record in caplog.records
        )

    def test_rule_keeps_non_ascii_letters(self) -> None:
        """Test a case rule on an argument with accented letters."""
        assert resolve("$1", ["naïve fix"], {1: "kebab"}) == "naïve-fix"
        assert resolve("$1: $2+", ["Ça Marche", "ok"], {1: "snake"}) == "ça_marche: ok"

    def test_rule_applies_to_every_occurrence(self) -> None:
        """Test a repeated reference gets the same transformed value."""
        assert resolve("$1/$1", ["Add User"], {1: "kebab"}) == "add-user/add-user"

    def test_rule_skips_rest_reference(self) -> None:
        """Test case rules never touch $N+."""
        assert resolve("$1: $1+", ["Feat", "Thing"], {1: "lower"}) == "feat: Feat Thing"

    def test_rule_for_other_index(self) -> None:
        """Test rules only affect their own index."""
        assert resolve("$1 $2", ["Ab", "Cd"], {2: "upper"}) == "Ab CD"

    def test_unknown_case_warns_once_per_placeholder(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the transform is computed once for a repeated reference."""
        with caplog.at_level(logging.WARNING, logger="glitter.template.resolver"):
            resolve("$1 $1 $1", ["x"], {1: "camel"})

        warnings = [r for r in caplog.records if r.name == "glitter.template.resolver"]
        assert len(warnings) == 1


class TestRequiredArguments:
    """Tests for required_arguments."""

    def test_highest_index(self) -> None:
        """Test the highest referenced index is returned."""
        assert required_arguments("$1($2): $3+") == 3

    def test_no_placeholders(self) -> None:
        """Test plain text needs nothing."""
        assert required_arguments("wip") == 0

    def test_sentinel(self) -> None:
        """Test the unconfigured template needs nothing."""
        assert required_arguments(RAW_COMMIT_MSG) == 0
