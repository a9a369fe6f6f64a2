"""Load and validate form config from YAML."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from validated_fields.config.models import FormConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> FormConfig:
    """
    Load YAML file and validate into FormConfig.
    Raises FileNotFoundError for a missing file and ValueError for malformed
    YAML, an empty file or a config that fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        raise ValueError("Config file is empty")

    try:
        config = FormConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid config: {e}") from e
    logger.debug("Loaded form %r with %d field(s) from %s", config.name, len(config.fields), path)
    return config
