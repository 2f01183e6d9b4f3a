"""
Dialect configuration loader.

A dialect file is a flat YAML mapping, e.g.::

    sigil: "@"
    null_literal: "None"
    coalesce: "or"
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .dialect import Dialect, DEFAULT_DIALECT
from .errors import DialectConfigError

logger = logging.getLogger(__name__)

DIALECT_ENV_VAR = "DIRARGS_DIALECT"

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Read a YAML file that must contain a mapping."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise DialectConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise DialectConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_dialect(path: Path) -> Dialect:
    """
    Load a dialect from a YAML file.

    Keys missing from the file keep their default values.

    Args:
        path: Path to the YAML file

    Returns:
        Loaded dialect, or DEFAULT_DIALECT if the file does not exist

    Raises:
        DialectConfigError: If the file is not a valid dialect mapping
    """
    if not path.is_file():
        logger.debug("Dialect file %s not found, using defaults", path)
        return DEFAULT_DIALECT

    raw = _read_yaml_map(path)
    try:
        return Dialect.from_dict(raw)
    except DialectConfigError as e:
        raise DialectConfigError(f"{path}: {e}") from e


def load_dialect_from_env(environ: Optional[dict] = None) -> Dialect:
    """Load the dialect named by the DIRARGS_DIALECT environment variable."""
    env = os.environ if environ is None else environ
    value = env.get(DIALECT_ENV_VAR)
    if not value:
        return DEFAULT_DIALECT
    return load_dialect(Path(value))


__all__ = ["DIALECT_ENV_VAR", "load_dialect", "load_dialect_from_env"]
