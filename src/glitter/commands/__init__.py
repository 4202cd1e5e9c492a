"""CLI commands for Glitter."""

from glitter.commands.actions import actions
from glitter.commands.push import push
from glitter.commands.template import build_commit_message, template

__all__ = ["actions", "build_commit_message", "push", "template"]
