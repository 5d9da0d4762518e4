"""Load YAML run configs into ``ConfigSchema``."""
import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from intopost.errors import ConfigError
from intopost.schema import ConfigSchema

logger = logging.getLogger(__name__)


def load_yaml_config(path: str | Path) -> ConfigSchema:
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        logger.debug("Config %s is empty → using defaults", path)
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(raw).__name__}")

    try:
        config = ConfigSchema(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}:\n{e}") from e

    logger.info("Loaded config: %s", path.name)
    return config


def apply_overrides(config: Optional[ConfigSchema], **overrides: Any) -> ConfigSchema:
    """Return a copy of ``config`` with every non-None override applied."""
    config = config or ConfigSchema()
    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return config
    return config.model_copy(update=changes)
