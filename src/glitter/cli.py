"""Glitter CLI - git add, commit, pull and push behind a commit message template."""

import click
import typer
from rich.console import Console
from typer.core import TyperGroup

from glitter import __version__
from glitter.commands.actions import actions
from glitter.commands.push import push
from glitter.commands.template import template
from glitter.logging_config import cleanup_old_logs, get_logger, setup_logging
from glitter.models.config import Config, set_config


class CaseInsensitiveGroup(TyperGroup):
    """Command group that matches action names regardless of case."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, cmd_name.lower())


# Create the Typer app
app = typer.Typer(
    name="glitter",
    help="Git add, commit, pull and push behind a commit message template.",
    add_completion=False,
    rich_markup_mode="rich",
    cls=CaseInsensitiveGroup,
)

# Add commands
app.command(name="push")(push)
app.command(name="template")(template)
app.command(name="actions")(actions)
app.command(name="action", hidden=True)(actions)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Write debug output to the session log",
    ),
) -> None:
    """Glitter - commit with a templated message and push, in one go.

    Configure a template such as "$1($2): $3+" in .glitterrc, then run
    `glitter push feat cli add dry run` to commit "feat(cli): add dry run".
    """
    config = Config(verbose=verbose)
    set_config(config)
    setup_logging(config)
    cleanup_old_logs(max_age_days=30)

    logger = get_logger("glitter.cli")

    if version:
        console = Console()
        console.print(f"glitter version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand:
        logger.info(f"Command invoked: {ctx.invoked_subcommand}")

    if ctx.invoked_subcommand is None:
        console = Console()
        console.print(ctx.get_help())


if __name__ == "__main__":
    app()
