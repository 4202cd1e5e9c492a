"""Actions command - list what glitter can do."""

from glitter.console import console, create_actions_table

ACTIONS: dict[str, str] = {
    "push": "git add, commit with the templated message, pull and push",
    "template": "print the resolved commit message without running git",
    "actions": "list the available actions",
}


def actions() -> None:
    """List the available actions."""
    table = create_actions_table("Actions available")
    for name, description in ACTIONS.items():
        table.add_row(name, description)
    console.print(table)
