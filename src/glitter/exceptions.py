"""Custom exceptions for Glitter."""


class GlitterError(Exception):
    """Base exception for all Glitter errors."""

    kind = "GlitterError"


class DependencyMissingError(GlitterError):
    """Raised when a required external dependency is not installed."""

    kind = "DependencyMissing"

    def __init__(self, dependencies: list[str]) -> None:
        self.dependencies = dependencies
        deps_str = ", ".join(dependencies)
        super().__init__(f"Missing required dependencies: {deps_str}")


class ConfigError(GlitterError):
    """Raised when the rc file cannot be read or is malformed."""

    kind = "Config"


class GitError(GlitterError):
    """Raised when a git command exits with a non-zero status."""

    kind = "Git"

    def __init__(self, command: list[str], exit_code: int) -> None:
        self.command = command
        self.exit_code = exit_code
        super().__init__(f"`{' '.join(command)}` failed with exit code {exit_code}")


class TemplateError(GlitterError):
    """Base class for fatal commit message template failures."""

    kind = "Template"


class MissingTemplateError(TemplateError):
    """Raised when no commit message template has been configured."""

    kind = "MissingTemplate"

    def __init__(self, action: str = "push") -> None:
        super().__init__(
            "No template provided. A template has to be provided for Glitter "
            f"to run the command {action}."
        )


class MissingArgumentError(TemplateError):
    """Raised when a rest-of-arguments placeholder starts past the last argument."""

    kind = "MissingArgument"

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Argument ${index}+ was not provided")


class TooFewArgumentsError(TemplateError):
    """Raised when a single-argument placeholder indexes past the last argument."""

    kind = "TooFewArguments"

    def __init__(self, index: int, provided: int) -> None:
        self.index = index
        self.provided = provided
        super().__init__(
            f"Invalid amount of parameters: ${index} was referenced "
            f"but only {provided} argument(s) were provided"
        )


class UnknownCaseError(GlitterError):
    """Raised for an unrecognized case transform name. Never fatal to resolution."""

    kind = "UnknownCaseTransform"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Found invalid case `{name}`")
