"""YAML configuration loader with env var resolution and Pydantic validation.

Loads config from (priority order):
1. --config <path> CLI flag
2. ./shippo.yaml or ./shippo.yml (working directory)
3. ~/.shippo/config.yaml (user home)

Environment variables override YAML: SHIPPO_<SECTION>_<KEY>, e.g.
SHIPPO_API_TIMEOUT=10. SHIPPO_PRIVATE_ACCESS_TOKEN fills an empty access
token. ${VAR} references in YAML values resolve from environment at load time.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

DEFAULT_API_BASE = "https://api.goshippo.com/v1/"
TOKEN_ENV_VAR = "SHIPPO_PRIVATE_ACCESS_TOKEN"


def resolve_env_vars(value: str) -> str:
    """Resolve ${VAR} references in a string from environment variables.

    Args:
        value: String potentially containing ${VAR} references.

    Returns:
        String with all ${VAR} references replaced by their env values.
        Missing env vars resolve to empty string.
    """
    def _replace(match: re.Match) -> str:
        return os.environ.get(match.group(1), "")

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _resolve_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, str):
        return resolve_env_vars(data)
    elif isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    return data


class ApiConfig(BaseModel):
    """Shippo API connection settings."""

    access_token: str = ""
    api_base: str = DEFAULT_API_BASE
    timeout: float = 30.0

    @field_validator("api_base")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        """Resource paths are joined relative to the base URL."""
        return value if value.endswith("/") else value + "/"

    @field_validator("timeout")
    @classmethod
    def positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value


class LoggingConfig(BaseModel):
    """Logging settings applied by the CLI."""

    level: Literal["debug", "info", "warning", "error"] = "warning"
    format: str = "%(levelname)s:%(name)s:%(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def lowercase_level(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class ShippoConfig(BaseModel):
    """Top-level configuration for the Shippo client."""

    api: ApiConfig = ApiConfig()
    logging: LoggingConfig = LoggingConfig()


def _find_config_file() -> Path | None:
    """Search for config file in standard locations.

    Returns:
        Path to config file if found, None otherwise.
    """
    candidates = [
        Path.cwd() / "shippo.yaml",
        Path.cwd() / "shippo.yml",
        Path.home() / ".shippo" / "config.yaml",
        Path.home() / ".shippo" / "config.yml",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Apply SHIPPO_<SECTION>_<KEY> env var overrides to config data.

    Args:
        data: Parsed YAML config dict.

    Returns:
        Config dict with env var overrides applied.
    """
    prefix = "SHIPPO_"
    sections = ShippoConfig.model_fields.keys()
    for key, value in os.environ.items():
        if not key.startswith(prefix) or key == TOKEN_ENV_VAR:
            continue
        suffix = key[len(prefix):].lower()  # e.g. "api_timeout"
        section, _, field = suffix.partition("_")
        if section not in sections or not field:
            continue
        if not isinstance(data.get(section), dict):
            data[section] = {}
        data[section][field] = value

    api = data.setdefault("api", {})
    if isinstance(api, dict) and not api.get("access_token"):
        token = os.environ.get(TOKEN_ENV_VAR, "").strip()
        if token:
            api["access_token"] = token
    return data


def load_config(config_path: str | None = None) -> ShippoConfig:
    """Load Shippo client configuration from YAML with env var resolution.

    Args:
        config_path: Explicit path to config file. If None, searches
            standard locations (cwd, then ~/.shippo/).

    Returns:
        Parsed and validated ShippoConfig. Defaults plus environment
        overrides when no config file is found.

    Raises:
        FileNotFoundError: If an explicit config_path does not exist.
        pydantic.ValidationError: If the file contents are invalid.
    """
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        path = _find_config_file()

    raw_data: dict[str, Any] = {}
    if path is not None:
        logger.info("Loading config from %s", path)
        with open(path) as f:
            raw_data = yaml.safe_load(f) or {}
        if not isinstance(raw_data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

    data = _resolve_env_vars_recursive(raw_data)
    data = _apply_env_overrides(data)

    return ShippoConfig(**data)
