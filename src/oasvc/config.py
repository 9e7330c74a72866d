"""Configuration loading and precedence resolution.

A configuration file is a JSON object whose keys are fields of
:class:`~oasvc.models.ExtractorConfig` (snake_case or camelCase), e.g.::

    {
      "ignoredParameters": ["api-version", "tenant"],
      "mediaTypes": ["application/json", "application/xml"]
    }

Any field left out keeps its default. Only one file is used; files are not
merged.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from oasvc.exceptions import ConfigError
from oasvc.models import ExtractorConfig

logger = logging.getLogger(__name__)

_PROJECT_CONFIG_FILENAME = "oasvc.json"
_CONFIG_ENV_VAR = "OASVC_CONFIG"


def load_config_file(path: Path) -> ExtractorConfig:
    """Load and validate one configuration file.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON, or
            fails validation.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except OSError as exc:
        raise ConfigError(f"Failed to read config at {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config at {path}: expected a JSON object")
    try:
        return ExtractorConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc


def load_project_config() -> Optional[ExtractorConfig]:
    """Load project-local configuration from ``./oasvc.json``.

    Returns:
        The configuration, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    return load_config_file(path)


def resolve_config(cli_config: Optional[str] = None) -> ExtractorConfig:
    """Resolve the active configuration.

    Precedence (high to low):
        1. CLI flag (``--config PATH``)
        2. Environment variable (``OASVC_CONFIG``)
        3. Project config (``./oasvc.json``)
        4. Defaults
    """
    if cli_config is not None:
        logger.debug("Using config from --config: %s", cli_config)
        return load_config_file(Path(cli_config))

    env_config = os.environ.get(_CONFIG_ENV_VAR)
    if env_config:
        logger.debug("Using config from %s: %s", _CONFIG_ENV_VAR, env_config)
        return load_config_file(Path(env_config))

    project = load_project_config()
    if project is not None:
        logger.debug("Using project config ./%s", _PROJECT_CONFIG_FILENAME)
        return project

    return ExtractorConfig()
