"""Codec configuration — defaults, optionally overridden from a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class CodecConfig(BaseModel):
    """Output formatting used by encode."""

    pretty: bool = True
    sort_keys: bool = False
    trailing_newline: bool = False


def load_config(path: Path | str) -> CodecConfig:
    """Parse the ``codec:`` section of a YAML file into CodecConfig."""
    config_path = Path(path)
    if not config_path.exists():
        logger.warning("Config file %s not found — using defaults", config_path)
        return CodecConfig()

    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning("Failed to parse %s: %s — using defaults", config_path, e)
        return CodecConfig()

    if not raw:
        return CodecConfig()
    if not isinstance(raw, dict):
        logger.warning("Ignoring %s — top level is not a mapping", config_path)
        return CodecConfig()

    codec_raw = raw.get("codec") or {}
    if not isinstance(codec_raw, dict):
        logger.warning("Ignoring invalid 'codec' section in %s", config_path)
        return CodecConfig()

    try:
        return CodecConfig.model_validate(codec_raw)
    except ValidationError as e:
        logger.warning("Invalid codec settings in %s: %s — using defaults", config_path, e)
        return CodecConfig()
