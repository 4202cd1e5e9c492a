"""Test doubles shared across the test suite."""

import subprocess
from typing import Any


class FakeGit:
    """Records git invocations instead of running them."""

    def __init__(self, fail_on: str | None = None, exit_code: int = 1) -> None:
        self.calls: list[list[str]] = []
        self.kwargs: list[dict[str, Any]] = []
        self.fail_on = fail_on
        self.exit_code = exit_code

    def __call__(self, cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(cmd))
        self.kwargs.append(kwargs)
        if self.fail_on is not None and cmd[:2] == ["git", self.fail_on]:
            return subprocess.CompletedProcess(cmd, self.exit_code)
        return subprocess.CompletedProcess(cmd, 0, stdout="git version 2.45.0")

    @property
    def steps(self) -> list[str]:
        """Return the git subcommands run, skipping the version check."""
        return [call[1] for call in self.calls if call[1] != "--version"]
