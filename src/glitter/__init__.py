"""Glitter - git add, commit, pull and push behind a commit message template."""

__version__ = "0.1.0"
