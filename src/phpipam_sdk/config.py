"""Configuration management for the phpIPAM SDK."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .constants import (
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    ENV_APP_ID,
    ENV_ENDPOINT,
    ENV_INSECURE,
    ENV_PASSWORD,
    ENV_TIMEOUT,
    ENV_USERNAME,
)


@dataclass
class PHPIPAMConfig:
    """phpIPAM connection configuration."""

    app_id: str
    username: str
    password: str
    endpoint: str = DEFAULT_ENDPOINT  # Base API URL, without the app ID
    timeout: int = DEFAULT_TIMEOUT
    verify_ssl: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "console"  # "console" or "json"
    file: Path | None = None


@dataclass
class SDKConfig:
    """
    Complete configuration for the SDK and the ``phpipam`` CLI.

    This combines all configuration sections.
    """

    phpipam: PHPIPAMConfig | None = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: Path) -> "SDKConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file

        Returns:
            SDKConfig instance
        """
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid configuration file structure in {config_path}: "
                f"expected dictionary, got {type(data).__name__}"
            )

        phpipam_data = data.get("phpipam")
        phpipam = PHPIPAMConfig(**phpipam_data) if phpipam_data else None

        logging_data = dict(data.get("logging") or {})
        if logging_data.get("file"):
            logging_data["file"] = Path(logging_data["file"])
        logging = LoggingConfig(**logging_data)

        return cls(phpipam=phpipam, logging=logging)

    def to_file(self, config_path: Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            config_path: Path to save config file
        """
        data = {
            "phpipam": self.phpipam.__dict__ if self.phpipam else None,
            "logging": {
                k: str(v) if isinstance(v, Path) else v
                for k, v in self.logging.__dict__.items()
                if v is not None
            },
        }

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_env(cls) -> "SDKConfig":
        """
        Create configuration from environment variables.

        Environment variables:
            PHPIPAM_APP_ID: API application ID
            PHPIPAM_ENDPOINT_ADDR: Base API URL (default: http://localhost/api)
            PHPIPAM_USER_NAME: phpIPAM username
            PHPIPAM_PASSWORD: phpIPAM password
            PHPIPAM_INSECURE: Disable TLS verification when truthy
            PHPIPAM_TIMEOUT: Request timeout in seconds (default: 30)
            LOG_LEVEL: Logging level (default: INFO)
            LOG_FORMAT: "console" or "json" (default: console)

        Returns:
            SDKConfig instance

        Raises:
            ValueError: If PHPIPAM_APP_ID is set but credentials are missing
        """
        phpipam_config = None
        app_id = os.environ.get(ENV_APP_ID)
        if app_id:
            username = os.environ.get(ENV_USERNAME, "")
            password = os.environ.get(ENV_PASSWORD, "")

            missing_creds = []
            if not username:
                missing_creds.append(ENV_USERNAME)
            if not password:
                missing_creds.append(ENV_PASSWORD)

            if missing_creds:
                raise ValueError(
                    f"{ENV_APP_ID} is set but required credentials are missing: "
                    f"{', '.join(missing_creds)}."
                )

            insecure = os.environ.get(ENV_INSECURE, "false").lower()

            phpipam_config = PHPIPAMConfig(
                app_id=app_id,
                username=username,
                password=password,
                endpoint=os.environ.get(ENV_ENDPOINT, DEFAULT_ENDPOINT),
                timeout=int(os.environ.get(ENV_TIMEOUT, str(DEFAULT_TIMEOUT))),
                verify_ssl=insecure not in ("true", "1", "yes", "on"),
            )

        logging_config = LoggingConfig(
            level=os.environ.get("LOG_LEVEL", "INFO"),
            format=os.environ.get("LOG_FORMAT", "console"),
        )

        return cls(phpipam=phpipam_config, logging=logging_config)


def load_config(config_file: Path | None = None) -> SDKConfig:
    """
    Load configuration from file or environment variables.

    Args:
        config_file: Optional path to YAML config file

    Returns:
        SDKConfig instance

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")
        return SDKConfig.from_file(config_file)
    return SDKConfig.from_env()
