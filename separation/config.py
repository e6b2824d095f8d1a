"""Configuration loader — separation.yml parsing and defaults."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

import yaml
from pydantic import ValidationError

from separation.logger import logger
from separation.model import SeparationConfig


def load_config(path: Path | None = None) -> SeparationConfig:
    """Load config from YAML file, or return defaults if no path given.

    A relative ``input_file`` in the file is taken relative to the directory
    holding the config file, so the config can sit next to its friendship list.
    """
    if path is None:
        logger.debug("No config file provided, using defaults")
        return SeparationConfig()

    raw = _read_mapping(path)
    if raw is None:
        return SeparationConfig()

    unknown = sorted(set(raw) - set(SeparationConfig.model_fields))
    if unknown:
        logger.warning("Ignoring unknown key(s) in %s: %s", path, ", ".join(map(str, unknown)))

    try:
        cfg = SeparationConfig.model_validate(raw)
    except ValidationError as e:
        logger.warning("Invalid config in %s: %s, using defaults", path, e)
        return SeparationConfig()

    if "input_file" in raw and not cfg.input_file.is_absolute():
        cfg.input_file = path.parent / cfg.input_file
    logger.debug("Loaded config %s: input_file=%s", path, cfg.input_file)
    return cfg


def _read_mapping(path: Path) -> dict[str, Any] | None:
    """Return the YAML mapping in *path*, or None (with a warning) if there is none."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Config file not found: %s, using defaults", path)
        return None
    except OSError as e:
        logger.warning("Cannot read config file %s: %s, using defaults", path, e)
        return None

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning("Malformed YAML in %s: %s, using defaults", path, e)
        return None

    if raw is None:
        logger.debug("Config file %s is empty, using defaults", path)
        return None
    if not isinstance(raw, dict):
        logger.warning("Config file %s is not a YAML mapping, using defaults", path)
        return None
    return raw
