"""Configuration for the time estimation heuristic.

Four tunables drive the estimate. They can be overridden from a file given
with ``--config``, either a JSON object::

    {"max_session_gap": 7200, "min_commit_time": 600}

or a shell-style assignment file::

    # Shorter sessions
    MAX_SESSION_GAP=7200
    export MIN_COMMIT_TIME=600
"""

import json
import re
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError, model_validator

from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger(__name__)

_ASSIGNMENT = re.compile(r"^(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)=(.*)$")
_INTEGER = re.compile(r"^-?\d+$")


class TrackingConfig(BaseModel):
    """Thresholds for session detection and per-commit bounds, in seconds."""

    max_session_gap: int = Field(default=4 * 60 * 60, strict=True, gt=0)
    min_commit_time: int = Field(default=15 * 60, strict=True, gt=0)
    default_commit_time: int = Field(default=30 * 60, strict=True, gt=0)
    max_commit_time: int = Field(default=8 * 60 * 60, strict=True, gt=0)

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _check_bounds(self) -> "TrackingConfig":
        if self.min_commit_time > self.max_commit_time:
            raise ValueError(
                f"min_commit_time ({self.min_commit_time}) must not exceed "
                f"max_commit_time ({self.max_commit_time})"
            )
        return self


def _parse_assignments(text: str) -> Dict[str, Any]:
    """Parse ``NAME=value`` lines; integer literals become ints, the rest stay text."""
    values: Dict[str, Any] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        match = _ASSIGNMENT.match(line)
        if not match:
            raise ConfigurationError(f"Invalid config line: {line}")
        name, value = match.groups()
        value = value.strip().strip("\"'")
        values[name] = int(value) if _INTEGER.match(value) else value
    return values


def _read_overrides(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file: {path}", details={"reason": str(e)}
        ) from e

    if path.suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a JSON object")
        return data

    return _parse_assignments(text)


def load_config(path: Path) -> TrackingConfig:
    """Load a TrackingConfig, applying overrides from ``path`` to the defaults.

    Unknown names are ignored. A missing file leaves the defaults in place.
    """
    path = Path(path)
    if not path.is_file():
        logger.warning("Config file %s not found, using defaults", path)
        return TrackingConfig()

    known = set(TrackingConfig.model_fields)
    overrides = {}
    for name, value in _read_overrides(path).items():
        key = name.lower()
        if key in known:
            overrides[key] = value
        else:
            logger.debug("Ignoring unknown config setting %s", name)

    try:
        config = TrackingConfig(**overrides)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid configuration in {path}: {problems}",
            details={"errors": e.errors()},
        ) from e

    logger.debug("Loaded configuration from %s: %s", path, config)
    return config
