# ABOUTME: Configuration management for the Humanitec CLI wrapper
# ABOUTME: Loads the API token, organization and output defaults from YAML and the environment

"""Configuration management for humctl-wrapper."""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from humctl_wrapper.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.humanitec.io"
DEFAULT_OUTPUT_FORMAT = "table"

CONFIG_ENV_VAR = "HUMCTL_CONFIG"
CONFIG_SEARCH_PATHS = [
    Path("config.yaml"),
    Path.home() / ".humctl-wrapper.yaml",
]

# Environment variables that take precedence over file values
ENV_OVERRIDES = {
    "HUMANITEC_TOKEN": "token",
    "HUMANITEC_ORG": "organization",
    "HUMANITEC_API_URL": "api_url",
}


@dataclass(frozen=True)
class Config:
    """Settings for talking to the Humanitec API."""

    token: str = ""
    organization: str = ""
    default_output: str = DEFAULT_OUTPUT_FORMAT
    api_url: str = DEFAULT_API_URL

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create config from the on-disk dictionary layout."""
        return cls(
            token=str(data.get("humanitec_token") or ""),
            organization=str(data.get("humanitec_org") or ""),
            default_output=str(data.get("default_output") or DEFAULT_OUTPUT_FORMAT),
            api_url=str(data.get("api_url") or DEFAULT_API_URL),
        )

    @classmethod
    def load(cls, path: str | Path | None = None, environ: dict[str, str] | None = None) -> "Config":
        """Load configuration from file, then apply environment overrides.

        A missing file yields the defaults. Unreadable or malformed files raise
        ConfigurationError.
        """
        environ = os.environ if environ is None else environ
        config_file = cls.find_config_file(path, environ)

        if config_file is None:
            logger.debug("No configuration file found, using defaults")
            config = cls()
        else:
            logger.debug("Loading configuration from %s", config_file)
            config = cls.from_dict(cls._read_file(config_file))

        overrides = {field: environ[var] for var, field in ENV_OVERRIDES.items() if environ.get(var)}
        if overrides:
            config = replace(config, **overrides)

        return config

    @staticmethod
    def find_config_file(path: str | Path | None = None, environ: dict[str, str] | None = None) -> Path | None:
        """Return the configuration file to use, or None when there is none.

        An explicitly given path is returned even if it does not exist so that
        reading it reports the problem.
        """
        if path:
            return Path(path)

        environ = os.environ if environ is None else environ
        if environ.get(CONFIG_ENV_VAR):
            return Path(environ[CONFIG_ENV_VAR])

        for candidate in CONFIG_SEARCH_PATHS:
            if candidate.exists():
                return candidate
        return None

    @staticmethod
    def _read_file(config_file: Path) -> dict[str, Any]:
        try:
            with open(config_file) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"failed to load config: error reading config file: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"failed to load config: error parsing config file: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"failed to load config: error parsing config file: expected a mapping in {config_file}"
            )
        return data
