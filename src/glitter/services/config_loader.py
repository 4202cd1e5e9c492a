"""Loader for ``.glitterrc`` files."""

import json
import os
from pathlib import Path

from glitter.exceptions import ConfigError
from glitter.logging_config import get_logger
from glitter.models.config import DEFAULT_RC_PATH, GlitterRc

logger = get_logger("glitter.services.config_loader")

COMMIT_MESSAGE_ENV = "GLITTER_COMMIT_MESSAGE"


def load_rc(path: Path = DEFAULT_RC_PATH) -> GlitterRc:
    """Load the rc file and apply environment overrides.

    Environment variables override file config:
    - GLITTER_COMMIT_MESSAGE: commit message template to use

    Args:
        path: Path to the rc file. A missing file yields defaults.

    Returns:
        GlitterRc with values from file, environment or defaults.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    rc = _load_from_file(path)

    env_template = os.environ.get(COMMIT_MESSAGE_ENV)
    if env_template:
        logger.debug(f"Using commit message template from {COMMIT_MESSAGE_ENV}")
        rc.commit_message = env_template

    return rc


def _load_from_file(path: Path) -> GlitterRc:
    if not path.exists():
        logger.debug(f"Config file not found: {path}")
        return GlitterRc()

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e

    logger.info(f"Loaded config from {path}")
    return GlitterRc.from_dict(data)
