"""Git command runner."""

import subprocess
from dataclasses import dataclass

from glitter.console import print_command
from glitter.exceptions import DependencyMissingError, GitError
from glitter.logging_config import get_logger, log_subprocess_result

logger = get_logger("glitter.services.git")


@dataclass
class GitService:
    """Service for the git steps behind ``glitter push``."""

    dry_run: bool = False

    def check_dependencies(self) -> list[str]:
        """Check for required dependencies and return list of missing ones."""
        missing: list[str] = []

        try:
            subprocess.run(
                ["git", "--version"],
                capture_output=True,
                check=True,
            )
        except (subprocess.CalledProcessError, FileNotFoundError):
            missing.append("git")

        return missing

    def ensure_dependencies(self) -> None:
        """Ensure all required dependencies are installed."""
        missing = self.check_dependencies()
        if missing:
            raise DependencyMissingError(missing)

    def add_all(self) -> None:
        """Stage every change in the working tree."""
        self._run(["git", "add", "."])

    def commit(self, message: str) -> None:
        """Create a commit with the given message."""
        self._run(["git", "commit", "-m", message])

    def pull(self) -> None:
        """Pull from the upstream branch."""
        self._run(["git", "pull"])

    def push(self) -> None:
        """Push to the upstream branch."""
        self._run(["git", "push"])

    def push_changes(self, message: str) -> None:
        """Stage, commit, pull and push, stopping at the first failure.

        Args:
            message: The resolved commit message

        Raises:
            GitError: If any step exits with a non-zero status
        """
        self.add_all()
        self.commit(message)
        self.pull()
        self.push()

    def _run(self, cmd: list[str]) -> None:
        print_command(cmd)

        if self.dry_run:
            logger.info(f"Dry run, skipping: {' '.join(cmd)}")
            return

        # Output is not captured so git keeps its live progress on the terminal
        result = subprocess.run(cmd, check=False)
        success = result.returncode == 0
        log_subprocess_result(logger, cmd, result.returncode, success=success)

        if not success:
            raise GitError(cmd, result.returncode)
