from __future__ import annotations

"""
Runtime configuration.

Settings are resolved in three layers: built-in defaults, an optional YAML
file (`config/settings.yaml` unless another path is given), then
environment variables. Later layers win.

Environment variables:
    BMI_TRACKER_CONFIG        path to the YAML file
    BMI_TRACKER_API_BASE_URL  base URL of the records API
    BMI_TRACKER_DECIMALS      BMI rounding precision (1 or 2)
    BMI_TRACKER_TIMEOUT       request timeout in seconds
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
import logging
import os

import yaml

from .errors import ConfigError
from .io_paths import DEFAULT_CONFIG_FILE, LOGS_DIR

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:3000"
ALLOWED_DECIMALS = (1, 2)

ENV_CONFIG = "BMI_TRACKER_CONFIG"
ENV_API_BASE_URL = "BMI_TRACKER_API_BASE_URL"
ENV_DECIMALS = "BMI_TRACKER_DECIMALS"
ENV_TIMEOUT = "BMI_TRACKER_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_BASE_URL
    bmi_decimals: int = 2
    request_timeout: float = 10.0
    log_dir: Path = LOGS_DIR


def _coerce(values: Mapping[str, Any], source: str) -> Dict[str, Any]:
    """Validate and normalize raw setting values from `source`."""
    out: Dict[str, Any] = {}
    if "api_base_url" in values and values["api_base_url"] is not None:
        url = str(values["api_base_url"]).strip().rstrip("/")
        if not url.startswith(("http://", "https://")):
            raise ConfigError(f"{source}: api_base_url must start with http:// or https://, got {url!r}")
        out["api_base_url"] = url
    if "bmi_decimals" in values and values["bmi_decimals"] is not None:
        try:
            decimals = int(values["bmi_decimals"])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{source}: bmi_decimals must be an integer") from e
        if decimals not in ALLOWED_DECIMALS:
            raise ConfigError(f"{source}: bmi_decimals must be 1 or 2, got {decimals}")
        out["bmi_decimals"] = decimals
    if "request_timeout" in values and values["request_timeout"] is not None:
        try:
            timeout = float(values["request_timeout"])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{source}: request_timeout must be a number") from e
        if timeout <= 0:
            raise ConfigError(f"{source}: request_timeout must be > 0")
        out["request_timeout"] = timeout
    if "log_dir" in values and values["log_dir"]:
        out["log_dir"] = Path(values["log_dir"])
    return out


def load_settings_file(path: Path, *, required: bool = False) -> Dict[str, Any]:
    """Read a YAML settings file.

    A missing file yields an empty mapping unless `required` is set, in which
    case it raises `ConfigError` like any other unreadable file.
    """
    path = Path(path)
    if not path.exists():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top-level YAML must be a mapping")
    return data


def load_settings(
    config_path: Optional[Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> Settings:
    """Resolve settings from defaults, YAML file, environment and explicit overrides.

    Keyword overrides (e.g. from CLI flags) are applied last; `None` values
    are ignored so unset flags do not mask file or environment values.
    """
    env = os.environ if environ is None else environ
    settings = Settings()

    if config_path is None and env.get(ENV_CONFIG):
        config_path = Path(env[ENV_CONFIG])
    # only the implicit default file may be absent
    required = config_path is not None
    path = Path(config_path) if required else DEFAULT_CONFIG_FILE
    file_values = load_settings_file(path, required=required)
    if file_values:
        logger.debug("Loaded settings from %s", path)
    settings = replace(settings, **_coerce(file_values, str(path)))

    env_values = {
        "api_base_url": env.get(ENV_API_BASE_URL) or None,
        "bmi_decimals": env.get(ENV_DECIMALS) or None,
        "request_timeout": env.get(ENV_TIMEOUT) or None,
    }
    settings = replace(settings, **_coerce(env_values, "environment"))

    settings = replace(settings, **_coerce(overrides, "arguments"))
    return settings


__all__ = ["Settings", "load_settings", "load_settings_file", "DEFAULT_API_BASE_URL"]
