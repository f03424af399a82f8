"""Config loader for YAML configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from wiseguy.config.models import WiseGuyConfig
from wiseguy.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAMES = ("wiseguy.yaml", "config.yaml")


class ConfigLoader:
    """Load WiseGuyConfig from YAML files."""

    @staticmethod
    def load(path: Path | str) -> WiseGuyConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to config directory or wiseguy.yaml file

        Returns:
            Parsed WiseGuyConfig instance

        Raises:
            FileNotFoundError: If no config file exists at path
            yaml.YAMLError: If a file is not valid YAML
            ConfigError: If the configuration is structurally invalid or has no jokes
        """
        config_path = Path(path)

        if config_path.is_dir():
            data = ConfigLoader._load_directory(config_path)
        else:
            if not config_path.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")
            data = ConfigLoader._read_yaml(config_path)

        return ConfigLoader.from_dict(data, source=str(config_path))

    @staticmethod
    def from_dict(data: dict[str, Any], source: str = "<dict>") -> WiseGuyConfig:
        """Validate a raw configuration mapping.

        Raises:
            ConfigError: If the configuration is invalid or has no jokes
        """
        if not data.get("jokes"):
            raise ConfigError(f"No jokes configured in {source}; the catalog cannot be empty")

        try:
            config = WiseGuyConfig.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid configuration in {source}: {e}") from e

        logger.info(f"Loaded config from {source} with {len(config.jokes)} joke(s)")
        return config

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Top level of {path} must be a mapping")
        return data

    @staticmethod
    def _load_directory(config_path: Path) -> dict[str, Any]:
        # An explicit master file wins
        for name in DEFAULT_CONFIG_NAMES:
            yaml_file = config_path / name
            if yaml_file.exists():
                return ConfigLoader._read_yaml(yaml_file)

        # Otherwise merge all .yaml files in directory
        files = sorted(config_path.glob("*.yaml"))
        if not files:
            raise FileNotFoundError(f"No config files found in {config_path}")

        data: dict[str, Any] = {"jokes": []}
        for fpath in files:
            chunk = ConfigLoader._read_yaml(fpath)

            # Jokes accumulate in file order
            jokes = chunk.get("jokes")
            if isinstance(jokes, list):
                data["jokes"].extend(jokes)

            for k, v in chunk.items():
                if k == "jokes":
                    continue
                if isinstance(v, dict) and isinstance(data.get(k), dict):
                    data[k].update(v)
                else:
                    data[k] = v

        return data
