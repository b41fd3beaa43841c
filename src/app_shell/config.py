"""
Application configuration.

Settings come from a YAML file (default `config.yaml` in the working
directory, or the path in MARITIME_CONFIG) and are then overridden by
MARITIME_* environment variables. The result is validated with pydantic and
handed explicitly to the repositories and the token service.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"
DEV_SIGNING_KEY = "dev-only-signing-key-change-me-0123456789"

# env var -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "MARITIME_JWT_KEY": ("jwt", "key"),
    "MARITIME_JWT_ISSUER": ("jwt", "issuer"),
    "MARITIME_JWT_AUDIENCE": ("jwt", "audience"),
    "MARITIME_JWT_EXPIRES_MINUTES": ("jwt", "expires_in_minutes"),
    "MARITIME_DB_PATH": ("database", "path"),
    "MARITIME_MIGRATIONS_DIR": ("database", "migrations_dir"),
    "MARITIME_LOG_LEVEL": ("logging", "level"),
}


class JwtSettings(BaseModel):
    key: str = DEV_SIGNING_KEY
    issuer: str = "maritime-registry"
    audience: str = "maritime-registry-clients"
    expires_in_minutes: int = 60

    @field_validator("key")
    @classmethod
    def key_long_enough(cls, v: str) -> str:
        # HS256 wants at least 256 bits of key material
        if len(v.encode()) < 32:
            raise ValueError("JWT signing key must be at least 32 bytes")
        return v

    @field_validator("expires_in_minutes")
    @classmethod
    def positive_lifetime(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Token lifetime must be positive")
        return v


class DatabaseSettings(BaseModel):
    path: str = "./data/maritime.db"
    migrations_dir: str = "migrations"


class LoggingSettings(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseModel):
    jwt: JwtSettings = JwtSettings()
    database: DatabaseSettings = DatabaseSettings()
    logging: LoggingSettings = LoggingSettings()


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")
    return data


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """
    Build Settings from the config file and environment.

    A missing file is not an error: defaults apply. Raises ValueError when the
    file or the merged values are invalid.
    """
    env = os.environ if environ is None else environ
    config_path = path or Path(env.get("MARITIME_CONFIG", DEFAULT_CONFIG_PATH))

    data: dict[str, Any] = {}
    if config_path.exists():
        data = _read_yaml(config_path)
    else:
        logger.info("Config file %s not found, using defaults", config_path)

    for env_var, (section, key) in ENV_OVERRIDES.items():
        if env_var in env:
            data.setdefault(section, {})[key] = env[env_var]

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e

    if settings.jwt.key == DEV_SIGNING_KEY:
        logger.warning("Using the development JWT signing key; set MARITIME_JWT_KEY")

    return settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
