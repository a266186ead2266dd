import os
from dataclasses import replace
from typing import Mapping, Optional

import dacite
import yaml

from hbot.base import Config
from hbot.errors import ConfigError, MissingTokenError

SCRIPT_DIR = os.path.dirname(os.path.realpath(__file__))
DEFAULT_CONFIG_PATH = os.path.join(SCRIPT_DIR, "config.yaml")

TOKEN_ENV = "DISCORD_TOKEN"

# env var -> Config field, numeric only
_ENV_OVERRIDES = {
    "SWEEP_INTERVAL_SEC": "sweep_interval_sec",
    "DELIVERY_TIMEOUT_SEC": "delivery_timeout_sec",
}


def load_config(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Config:
    """Read config.yaml into a Config, then apply numeric env overrides.

    Missing keys fall back to the dataclass defaults; unknown keys and wrong
    types raise ConfigError.
    """
    path = path or DEFAULT_CONFIG_PATH
    environ = os.environ if environ is None else environ
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
        config = dacite.from_dict(
            Config, data, config=dacite.Config(strict=True, cast=[float])
        )
    except (OSError, TypeError, ValueError, yaml.YAMLError, dacite.DaciteError) as e:
        raise ConfigError(f"Failed to load config {path}: {e}") from e

    overrides = {}
    for env_name, field_name in _ENV_OVERRIDES.items():
        raw = environ.get(env_name)
        if raw is None or raw == "":
            continue
        try:
            overrides[field_name] = float(raw)
        except ValueError as e:
            raise ConfigError(f"{env_name} must be a number, got {raw!r}") from e
    if overrides:
        config = replace(config, **overrides)

    if config.sweep_interval_sec <= 0:
        raise ConfigError("sweep_interval_sec must be positive")
    if config.delivery_timeout_sec <= 0:
        raise ConfigError("delivery_timeout_sec must be positive")
    if not config.trigger:
        raise ConfigError("trigger must not be empty")
    return config


def require_token(environ: Optional[Mapping[str, str]] = None, name: str = TOKEN_ENV) -> str:
    environ = os.environ if environ is None else environ
    token = environ.get(name, "").strip()
    if not token:
        raise MissingTokenError(name)
    return token


__all__ = ["load_config", "require_token", "DEFAULT_CONFIG_PATH", "TOKEN_ENV"]
