"""Configuration loading for dirsum."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .constants import ALGORITHM_ENV_VAR, CONFIG_ENV_VAR, DEFAULT_ALGORITHM, DEFAULT_CHUNK_SIZE
from .errors import ConfigError


class ScanConfig(BaseModel):
    """Scan configuration (optionally read from a YAML file)."""

    algorithm: str = DEFAULT_ALGORITHM
    chunk_size: int = DEFAULT_CHUNK_SIZE

    @field_validator("algorithm")
    @classmethod
    def normalize_algorithm(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("algorithm must not be empty")
        return v

    @field_validator("chunk_size")
    @classmethod
    def positive_chunk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("chunk_size must be positive")
        return v


def load_config(path: Optional[Path] = None) -> ScanConfig:
    """Load configuration from ``path`` or from $DIRSUM_CONFIG.

    With neither set, defaults are returned.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or fails
            validation.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return ScanConfig()
        path = Path(env_path)

    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Configuration not found at {path}")

    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping")

    try:
        return ScanConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def resolve_algorithm(option: Optional[str], config: ScanConfig) -> str:
    """Pick the digest name: explicit option, then $DIRSUM_ALGORITHM, then config."""
    if option:
        return option
    return os.environ.get(ALGORITHM_ENV_VAR) or config.algorithm
