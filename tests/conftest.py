"""Shared test fixtures for Glitter tests."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from tests.fakes import FakeGit


@pytest.fixture(scope="session", autouse=True)
def isolated_log_dir(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Keep session logs out of the real home directory."""
    log_dir = tmp_path_factory.mktemp("logs")
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("GLITTER_LOG_DIR", str(log_dir))
        yield log_dir


@pytest.fixture(autouse=True)
def no_template_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore any GLITTER_COMMIT_MESSAGE set in the developer's shell."""
    monkeypatch.delenv("GLITTER_COMMIT_MESSAGE", raising=False)


@pytest.fixture
def rc_file(tmp_path: Path) -> Path:
    """Create a .glitterrc with a conventional-commit style template."""
    rc = tmp_path / ".glitterrc"
    rc.write_text(
        json.dumps(
            {
                "commit_message": "$1($2): $3+",
                "commit_message_arguments": [{"argument": 1, "case": "lower"}],
            }
        )
    )
    return rc


@pytest.fixture
def fake_git(monkeypatch: pytest.MonkeyPatch) -> FakeGit:
    """Replace subprocess.run for the git service with a recorder."""
    from glitter.services import git as git_module

    fake = FakeGit()
    monkeypatch.setattr(git_module.subprocess, "run", fake)
    return fake
