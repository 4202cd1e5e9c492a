"""Service layer for external tool integrations."""

from glitter.services.config_loader import load_rc
from glitter.services.git import GitService

__all__ = ["GitService", "load_rc"]
