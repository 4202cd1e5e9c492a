"""Push command - add, commit, pull and push with a templated message."""

from pathlib import Path
from typing import Annotated

import typer

from glitter.commands.template import build_commit_message
from glitter.console import print_error, print_success
from glitter.exceptions import GlitterError
from glitter.logging_config import get_logger
from glitter.models.config import DEFAULT_RC_PATH, Arguments, get_config
from glitter.services.git import GitService

logger = get_logger("glitter.commands.push")


def push(
    arguments: Annotated[
        list[str] | None,
        typer.Argument(help="Positional values for $1, $2, ... in the commit message template"),
    ] = None,
    rc: Annotated[
        Path,
        typer.Option("--rc", help="Path to the rc file"),
    ] = DEFAULT_RC_PATH,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Print the git commands without running them"),
    ] = False,
) -> None:
    """Stage everything, commit with the templated message, then pull and push.

    Runs `git add .`, `git commit -m <message>`, `git pull` and `git push`
    in order and stops at the first command that fails.
    """
    config = get_config()
    config.dry_run = dry_run

    args = Arguments(action="push", arguments=arguments or [], rc_path=rc)

    logger.info("=" * 60)
    logger.info("Starting push command")
    logger.info(f"  arguments: {args.arguments}")
    logger.info(f"  rc: {args.rc_path}")
    logger.info(f"  dry_run: {dry_run}")
    logger.info("=" * 60)

    git_service = GitService(dry_run=config.dry_run)

    try:
        message = build_commit_message(args)
        if not dry_run:
            git_service.ensure_dependencies()
        git_service.push_changes(message)
    except GlitterError as e:
        logger.info(f"Push failed ({e.kind}): {e}")
        print_error(str(e))
        raise typer.Exit(1) from e

    logger.info("Push completed")
    if not dry_run:
        print_success("Pushed.")
