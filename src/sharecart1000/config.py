from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "SHARECART_CONFIG"
ENV_OVERRIDES = {
    "strict": "SHARECART_STRICT",
    "implicit_main": "SHARECART_IMPLICIT_MAIN",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ParseOptions:
    """
    Parser behaviour switches.

    Can be loaded from a YAML mapping with keys:
      - strict: bool (default True). When False, values that fail conversion
        fall back to the field default and malformed lines are skipped.
      - implicit_main: bool (default True). Key/value lines that appear before
        any section header are read as part of [Main].
    """

    strict: bool = True
    implicit_main: bool = True

    @staticmethod
    def default() -> "ParseOptions":
        return ParseOptions()


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read options file {path}: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Options file {path} must contain a mapping")
    return data


def load_options(path: Optional[Union[str, Path]] = None) -> ParseOptions:
    """Build ParseOptions from defaults, an optional YAML file and the environment.

    If path is None, SHARECART_CONFIG is consulted for a file name.
    SHARECART_STRICT and SHARECART_IMPLICIT_MAIN override file values.
    """
    options = ParseOptions.default()
    known = {f.name for f in fields(ParseOptions)}

    if path is None and os.getenv(CONFIG_ENV):
        path = os.environ[CONFIG_ENV]

    if path is not None:
        path = Path(path)
        data = _read_yaml(path)
        unknown = sorted(str(k) for k in set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown option(s) in {path}: {unknown}")
        for name, value in data.items():
            if not isinstance(value, bool):
                raise ConfigError(f"{name} must be a boolean, got {value!r}")
        options = replace(options, **data)
        logger.info("Loaded parse options from %s", path)

    overrides: Dict[str, bool] = {}
    for name, env in ENV_OVERRIDES.items():
        raw = os.getenv(env)
        if raw is not None:
            overrides[name] = _parse_flag(env, raw)
    if overrides:
        options = replace(options, **overrides)
        logger.debug("Applied environment overrides: %s", overrides)

    return options
