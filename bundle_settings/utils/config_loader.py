import logging
import os
from collections import Counter
from pathlib import Path
from typing import Optional, Dict, Any, List
import yaml
from dotenv import load_dotenv
from ..models.settings import PackagingSettings
from ..utils.exceptions import ConfigurationLoadError

logger = logging.getLogger("bundle_settings.config_loader")

class ConfigLoader:
    """Configuration loader that handles YAML config files and environment variables."""

    CONFIG_ENV = "BUNDLE_SETTINGS_CONFIG"
    EXECUTABLES_ENV = "BUNDLE_SETTINGS_EXECUTABLES"
    EXTRA_IGNORE_ENV = "BUNDLE_SETTINGS_EXTRA_IGNORE"

    @classmethod
    def load_config(cls, config_path: Optional[Path] = None, env_file: Optional[Path] = None) -> Dict[str, Any]:
        """
        Load the packaging configuration as a mapping.

        The compiled-in declaration is the base. A YAML file, given directly
        or through ``BUNDLE_SETTINGS_CONFIG``, is merged over it; environment
        variables are applied last.

        Args:
            config_path: Path to a YAML file with a ``packaging`` section
            env_file: Path to .env file for environment variables

        Returns:
            Dict in the ``{"packaging": {"ignore": [...], "executables": [...]}}`` shape

        Raises:
            ConfigurationLoadError: If a source is missing or malformed
        """
        try:
            if env_file:
                if not env_file.exists():
                    raise ConfigurationLoadError(f"Environment file not found at {env_file}")
                load_dotenv(env_file)
            else:
                load_dotenv()

            config = PackagingSettings.load().to_dict()

            if config_path is None and os.getenv(cls.CONFIG_ENV):
                config_path = Path(os.environ[cls.CONFIG_ENV])

            if config_path:
                if not config_path.exists():
                    raise ConfigurationLoadError(f"Packaging config file not found at {config_path}")
                with open(config_path, encoding="utf-8") as f:
                    custom_config = yaml.safe_load(f)
                if custom_config is None:
                    logger.warning(f"Packaging config file {config_path} is empty, using defaults")
                elif not isinstance(custom_config, dict):
                    raise ConfigurationLoadError(f"Packaging config file {config_path} must contain a mapping")
                else:
                    cls._deep_merge(config, custom_config)
                    logger.debug(f"Merged packaging config from {config_path}")

            executables = os.getenv(cls.EXECUTABLES_ENV)
            if executables:
                config["packaging"]["executables"] = cls._split_env(executables)

            extra_ignore = os.getenv(cls.EXTRA_IGNORE_ENV)
            if extra_ignore:
                ignore = config["packaging"].get("ignore") or []
                config["packaging"]["ignore"] = list(ignore) + cls._split_env(extra_ignore)

            cls._validate_config(config)

            return config

        except ConfigurationLoadError:
            raise
        except yaml.YAMLError as e:
            raise ConfigurationLoadError(f"Error parsing YAML configuration: {str(e)}") from e
        except (OSError, TypeError, AttributeError) as e:
            raise ConfigurationLoadError(f"Error loading configuration: {str(e)}") from e

    @classmethod
    def load_settings(cls, config_path: Optional[Path] = None, env_file: Optional[Path] = None) -> PackagingSettings:
        """Load configuration and build an immutable PackagingSettings from it."""
        return PackagingSettings.from_dict(cls.load_config(config_path=config_path, env_file=env_file))

    @staticmethod
    def _deep_merge(base: Dict, update: Dict) -> None:
        """
        Deep merge two dictionaries, modifying the base dictionary.

        Mappings are merged key by key; any other value, lists included,
        replaces the base value.
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                ConfigLoader._deep_merge(base[key], value)
            else:
                base[key] = value

    @staticmethod
    def _split_env(value: str) -> List[str]:
        return [item.strip() for item in value.split(",") if item.strip()]

    @staticmethod
    def _validate_config(config: Dict) -> None:
        """
        Validate the configuration.

        Args:
            config: Configuration dictionary to validate

        Raises:
            ConfigurationLoadError: If configuration is invalid
        """
        settings = PackagingSettings.from_dict(config)

        # Duplicates are kept as given, only reported
        for label, values in (("ignore", settings.exclusions()), ("executables", settings.executables())):
            duplicates = sorted(value for value, count in Counter(values).items() if count > 1)
            if duplicates:
                logger.warning(f"Duplicate packaging.{label} entries: {', '.join(duplicates)}")
