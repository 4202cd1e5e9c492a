"""Configuration models for Glitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from glitter.exceptions import ConfigError
from glitter.template.resolver import RAW_COMMIT_MSG

DEFAULT_RC_PATH = Path(".glitterrc")


@dataclass(frozen=True)
class CaseRule:
    """A case transform applied to one positional argument (1-based)."""

    argument: int
    case: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> CaseRule:
        """Create a CaseRule from an rc file entry."""
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid commit_message_arguments entry: {data!r}")

        argument = data.get("argument")
        if isinstance(argument, bool) or not isinstance(argument, int):
            raise ConfigError(f"commit_message_arguments entry needs an integer 'argument': {data!r}")
        if not 1 <= argument <= 9:
            raise ConfigError(f"Argument index must be between 1 and 9, got {argument}")

        case = data.get("case")
        if case is not None and not isinstance(case, str):
            raise ConfigError(f"Case for argument {argument} must be a string: {case!r}")

        return cls(argument=argument, case=case)


@dataclass
class GlitterRc:
    """Contents of a ``.glitterrc`` file."""

    commit_message: str = RAW_COMMIT_MSG
    arguments: list[str] | None = None
    commit_message_arguments: list[CaseRule] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> GlitterRc:
        """Create a GlitterRc from parsed JSON, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a JSON object")

        commit_message = data.get("commit_message", RAW_COMMIT_MSG)
        if not isinstance(commit_message, str):
            raise ConfigError("'commit_message' must be a string")

        arguments = data.get("arguments")
        if arguments is not None and (
            not isinstance(arguments, list) or not all(isinstance(a, str) for a in arguments)
        ):
            raise ConfigError("'arguments' must be a list of strings")

        raw_rules = data.get("commit_message_arguments")
        rules: list[CaseRule] | None = None
        if raw_rules is not None:
            if not isinstance(raw_rules, list):
                raise ConfigError("'commit_message_arguments' must be a list")
            rules = [CaseRule.from_dict(entry) for entry in raw_rules]

        return cls(
            commit_message=commit_message,
            arguments=arguments,
            commit_message_arguments=rules,
        )

    def case_rules(self) -> dict[int, str]:
        """Return the case rules keyed by argument index.

        Raises:
            ConfigError: If more than one rule targets the same argument
        """
        rules: dict[int, str] = {}
        seen: set[int] = set()
        for rule in self.commit_message_arguments or []:
            if rule.argument in seen:
                raise ConfigError(f"Multiple case rules configured for argument {rule.argument}")
            seen.add(rule.argument)
            if rule.case is not None:
                rules[rule.argument] = rule.case
        return rules


@dataclass
class Arguments:
    """Parsed command line: the action name and its positional arguments."""

    action: str
    arguments: list[str] = field(default_factory=list)
    rc_path: Path = DEFAULT_RC_PATH


@dataclass
class Config:
    """Runtime configuration for Glitter operations."""

    verbose: bool = False
    dry_run: bool = False


# Global config instance (can be overridden via CLI)
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration, creating a default if none exists."""
    global _config  # noqa: PLW0603
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration."""
    global _config  # noqa: PLW0603
    _config = config
