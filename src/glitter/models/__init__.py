"""Data models for Glitter."""

from glitter.models.config import Arguments, CaseRule, Config, GlitterRc

__all__ = ["Arguments", "CaseRule", "Config", "GlitterRc"]
