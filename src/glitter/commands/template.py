"""Template command - preview the resolved commit message."""

from pathlib import Path
from typing import Annotated

import typer

from glitter.console import console, print_error
from glitter.exceptions import GlitterError
from glitter.logging_config import get_logger
from glitter.models.config import DEFAULT_RC_PATH, Arguments
from glitter.services.config_loader import load_rc
from glitter.template import required_arguments, resolve

logger = get_logger("glitter.commands.template")


def build_commit_message(args: Arguments) -> str:
    """Load the rc file and resolve its template against the given arguments.

    Falls back to the rc file's ``arguments`` when none are given on the
    command line.

    Raises:
        GlitterError: If the rc file is invalid or the template cannot be resolved
    """
    rc = load_rc(args.rc_path)
    arguments = args.arguments or rc.arguments or []

    logger.info(
        f"Resolving template {rc.commit_message!r} with {len(arguments)} argument(s), "
        f"{required_arguments(rc.commit_message)} required"
    )
    message = resolve(rc.commit_message, arguments, rc.case_rules())
    logger.info(f"Resolved commit message: {message!r}")
    return message


def template(
    arguments: Annotated[
        list[str] | None,
        typer.Argument(help="Positional values for $1, $2, ... in the template"),
    ] = None,
    rc: Annotated[
        Path,
        typer.Option("--rc", help="Path to the rc file"),
    ] = DEFAULT_RC_PATH,
) -> None:
    """Print the commit message the template resolves to, without running git."""
    args = Arguments(action="template", arguments=arguments or [], rc_path=rc)

    try:
        message = build_commit_message(args)
    except GlitterError as e:
        logger.info(f"Template preview failed ({e.kind}): {e}")
        print_error(str(e))
        raise typer.Exit(1) from e

    console.print(message, markup=False, highlight=False)
