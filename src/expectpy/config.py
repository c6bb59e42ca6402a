from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EXPECTPY_CONFIG"


class InspectConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    depth: int = Field(
        2, ge=0, description="Nesting levels rendered before containers collapse to '...'"
    )
    max_items: int = Field(
        100, ge=1, description="Items rendered per container before '...'"
    )
    max_string: int = Field(
        10000, ge=1, description="Characters of a rendered value before truncation"
    )


class ExpectConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    inspect: InspectConfig = Field(default_factory=InspectConfig)


_current: ExpectConfig | None = None


def load_config(path: Path) -> ExpectConfig:
    """Load and validate settings from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping, got {type(raw).__name__}"
        )

    return ExpectConfig(**raw)


def get_config() -> ExpectConfig:
    """Return the process-wide settings, resolving them on first use.

    Settings come from the YAML file named by ``$EXPECTPY_CONFIG`` when it is
    set, otherwise from the model defaults.
    """
    global _current
    if _current is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            logger.debug(f"Loading settings from {CONFIG_ENV_VAR}={env_path}")
            _current = load_config(Path(env_path))
        else:
            _current = ExpectConfig()
    return _current


def set_config(config: ExpectConfig | None) -> None:
    """Replace the process-wide settings. ``None`` resets to lazy resolution."""
    global _current
    _current = config
