from __future__ import annotations
import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Type
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic import ValidationError as SchemaValidationError

DEFAULT_BASE_URL = "https://api.predator.bot/"
ENV_PREFIX = "PREDATOR_"


class SdkConfig(BaseModel):
    """Root configuration for the Predator client"""
    BaseUrl: str = DEFAULT_BASE_URL
    ConsoleLevel: str = "INFO"
    FileLevel: str = "DEBUG"
    LogFile: Optional[str] = None
    RequestTimeout: Optional[float] = None
    KeyLength: int = 32
    Headers: Dict[str, str] = Field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )

    @model_validator(mode='before')
    @classmethod
    def handle_legacy_format(cls, data):
        """Accept the lowercase ``baseURL`` key used by older configs"""
        if isinstance(data, dict):
            for legacy in ("baseURL", "base_url"):
                if legacy in data and "BaseUrl" not in data:
                    data["BaseUrl"] = data.pop(legacy)
            if "LogLevel" in data and "ConsoleLevel" not in data:
                data["ConsoleLevel"] = data.pop("LogLevel")
        return data

    @field_validator("BaseUrl")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"BaseUrl must be an http(s) URL, got {value!r}")
        return value

    @field_validator("ConsoleLevel", "FileLevel")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @field_validator("RequestTimeout")
    @classmethod
    def _check_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("RequestTimeout must be positive")
        return value

    def with_overrides(self, **overrides: Any) -> "SdkConfig":
        """Return a copy with every non-None override applied"""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        return SdkConfig(**{**self.model_dump(), **updates})


# ────────────────────────────────────────────────────────────────────────────────
# Internal helpers
# ────────────────────────────────────────────────────────────────────────────────

_VALID_SUFFIXES = {".yaml", ".yml"}
SECTION_TYPES: dict[str, Type] = {"BaseUrl": str, "Headers": dict}


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Read *and* parse YAML, normalising “empty file” to an empty dict."""
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except yaml.YAMLError as err:
        raise ValueError(f"YAML syntax error in {path}: {err}") from err
    except OSError as err:
        raise OSError(f"Unable to read config file {path}: {err}") from err
    if not isinstance(data, dict):
        raise TypeError(f"Top‑level YAML must be a mapping, got {type(data).__name__}")
    return data


def _validate_sections(cfg: dict[str, Any], expected_types: dict[str, Type]) -> None:
    """Ensure every present key in `expected_types` has the declared type."""
    for section, expected in expected_types.items():
        if section not in cfg:
            continue
        value = cfg[section]
        if not isinstance(value, expected):
            raise TypeError(
                f"Section '{section}' must be of type "
                f"{expected.__name__}, got {type(value).__name__}"
            )


def get_env(name: str, default: str = "") -> str:
    """Get environment variable with prefix."""
    return os.environ.get(f"{ENV_PREFIX}{name}", default)


# ────────────────────────────────────────────────────────────────────────────────
# Public API
# ────────────────────────────────────────────────────────────────────────────────

def read_config(path: str | Path, logger: logging.Logger) -> SdkConfig:
    """
    Load a YAML configuration file and return a fully validated `SdkConfig`.

    Parameters
    ----------
    path : str | Path
        Location of the YAML file (.yaml | .yml).
    logger : logging.Logger
        Logger instance for diagnostics.

    Raises
    ------
    (ValueError, FileNotFoundError, TypeError, pydantic.ValidationError)
        Forwarded exceptions give precise failure causes.
    """
    p = Path(path)

    if p.suffix not in _VALID_SUFFIXES:
        raise ValueError("Config file must have a .yaml or .yml extension")
    if not p.is_file():
        raise FileNotFoundError(p)

    logger.debug(f"Loading configuration from {p}")
    raw_cfg = _load_yaml(p)
    _validate_sections(raw_cfg, SECTION_TYPES)

    try:
        sdk_cfg = SdkConfig(**raw_cfg)
    except SchemaValidationError as err:
        logger.error("Configuration file failed schema validation: %s", err)
        raise

    logger.info(f"Configuration loaded successfully: {p.name}")
    return sdk_cfg


def create_default_config(logger, base_url: Optional[str] = None) -> SdkConfig:
    """
    Create a default configuration object when no config file is provided.

    Args:
        logger: Logger instance
        base_url: Optional override for the service endpoint
    """
    logger.debug("Creating default configuration")
    try:
        return SdkConfig().with_overrides(BaseUrl=base_url)
    except SchemaValidationError as e:
        logger.error(f"Failed to create default configuration: {e}")
        raise ValueError(f"Failed to create default configuration: {e}") from e


def config_from_env(logger, env_file: Optional[str] = None) -> SdkConfig:
    """
    Build a configuration from ``PREDATOR_*`` environment variables.

    A ``.env`` file is loaded first (without overriding variables that are
    already set).

    Environment variables:
        PREDATOR_BASE_URL: Service endpoint
        PREDATOR_LOG_LEVEL: Console logging level
        PREDATOR_LOG_FILE: Optional log file path
        PREDATOR_REQUEST_TIMEOUT: Per-request timeout in seconds
    """
    load_dotenv(env_file)

    timeout_raw = get_env("REQUEST_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else None
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}REQUEST_TIMEOUT must be a number, got {timeout_raw!r}") from e

    config = SdkConfig().with_overrides(
        BaseUrl=get_env("BASE_URL") or None,
        ConsoleLevel=get_env("LOG_LEVEL") or None,
        LogFile=get_env("LOG_FILE") or None,
        RequestTimeout=timeout,
    )
    logger.debug(f"Configuration loaded from environment: base_url={config.BaseUrl}")
    return config
