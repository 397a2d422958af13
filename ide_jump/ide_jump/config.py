"""
Configuration management for ide_jump.
Handles loading, saving, and accessing configuration from a JSON file and environment variables.
"""
import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import (
    CONFIG_ENV_VAR,
    CONFIG_FILE,
    DEFAULT_IDE,
    DEFAULT_IDE_ENV_VAR,
    DEFAULT_IDES,
    DEFAULT_SEARCH_DIRS,
)
from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class IdeConfig:
    """IDE selection and executable lookup configuration."""
    default_ide: str = DEFAULT_IDE
    ides: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_IDES))
    executable_overrides: Dict[str, str] = field(default_factory=dict)
    search_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_SEARCH_DIRS))
    fallback_to_cwd: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    ide: IdeConfig = field(default_factory=IdeConfig)


def parse_config(data: Any) -> AppConfig:
    """
    Build an AppConfig from decoded JSON.

    Args:
        data: Decoded JSON document

    Returns:
        AppConfig

    Raises:
        ConfigError: If the document has the wrong shape
    """
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a JSON object")

    config = AppConfig()
    if 'ide' in data:
        section = data['ide']
        if not isinstance(section, dict):
            raise ConfigError("'ide' section must be a JSON object")
        try:
            config.ide = IdeConfig(**section)
        except TypeError as e:
            raise ConfigError(f"Invalid 'ide' section: {e}") from e

    ide = config.ide
    if not isinstance(ide.default_ide, str) or not ide.default_ide.strip():
        raise ConfigError("'default_ide' must be a non-empty string")
    for name in ('ides', 'executable_overrides'):
        table = getattr(ide, name)
        if not isinstance(table, dict):
            raise ConfigError(f"'{name}' must be a JSON object")
        if not all(isinstance(v, str) and v for v in table.values()):
            raise ConfigError(f"'{name}' values must be non-empty strings")
    if not isinstance(ide.search_dirs, list) or not all(isinstance(d, str) for d in ide.search_dirs):
        raise ConfigError("'search_dirs' must be a JSON array of strings")
    if not isinstance(ide.fallback_to_cwd, bool):
        raise ConfigError("'fallback_to_cwd' must be true or false")
    return config


class ConfigManager:
    """
    Manages application configuration backed by a JSON file.

    The file location is, in order: the path passed in, the IDE_JUMP_CONFIG
    environment variable, then ~/.ide_jump/config.json. IDE_JUMP_DEFAULT_IDE
    overrides the default IDE for the current process without being saved.
    """

    _instance: Optional['ConfigManager'] = None

    def __new__(cls, config_file: Optional[Path] = None) -> 'ConfigManager':
        # Only the default location is shared process-wide
        if config_file is not None:
            instance = super().__new__(cls)
            instance._initialized = False
            return instance
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_file: Optional[Path] = None) -> None:
        if self._initialized:
            return
        self._initialized = True
        self._config_file: Path = self._locate(config_file)
        self._config: AppConfig = AppConfig()
        self._env_default_ide: Optional[str] = None
        self._load_config()
        self._load_env_vars()

    @staticmethod
    def _locate(config_file: Optional[Path]) -> Path:
        if config_file is not None:
            return Path(config_file).expanduser()
        env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if env_path:
            return Path(env_path).expanduser()
        return CONFIG_FILE

    def _ensure_config_dir(self) -> None:
        """Create configuration directory if it doesn't exist."""
        self._config_file.parent.mkdir(parents=True, exist_ok=True)

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        if not self._config_file.exists():
            try:
                self._save_config()
            except OSError as e:
                logger.warning("Could not create config file %s: %s", self._config_file, e)
            return

        try:
            with open(self._config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self._config = parse_config(data)
        except (json.JSONDecodeError, ConfigError) as e:
            logger.warning("Failed to load config file %s: %s", self._config_file, e)
            self._config = AppConfig()
        except OSError as e:
            logger.warning("Could not read config file %s: %s", self._config_file, e)
            self._config = AppConfig()

    def _load_env_vars(self) -> None:
        """Load process-level overrides from environment variables."""
        value = os.environ.get(DEFAULT_IDE_ENV_VAR, "").strip()
        self._env_default_ide = value or None

    def _save_config(self) -> None:
        """Save current configuration to JSON file."""
        self._ensure_config_dir()
        data = {'ide': asdict(self._config.ide)}
        with open(self._config_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    @property
    def path(self) -> Path:
        """Get the configuration file path."""
        return self._config_file

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        return self._config

    @property
    def ide(self) -> IdeConfig:
        """Get IDE configuration."""
        return self._config.ide

    @property
    def default_ide(self) -> str:
        """Get the default IDE, honoring the environment override."""
        return self._env_default_ide or self._config.ide.default_ide

    def set_default_ide(self, name: str) -> None:
        """
        Set and persist the default IDE.

        Args:
            name: Display name or command identifier
        """
        self._config.ide.default_ide = name
        self._env_default_ide = None
        self._save_config()

    def add_ide(self, display_name: str, command_id: str) -> None:
        """Add or replace an entry in the display-name table."""
        self._config.ide.ides[display_name] = command_id
        self._save_config()

    def set_override(self, command_id: str, path: str) -> None:
        """
        Pin a command identifier to an executable path.

        Args:
            command_id: IDE command identifier
            path: Absolute executable path
        """
        self._config.ide.executable_overrides[command_id] = path
        self._save_config()

    def remove_override(self, command_id: str) -> bool:
        """
        Remove an executable override.

        Returns:
            True if an override was removed
        """
        if command_id in self._config.ide.executable_overrides:
            del self._config.ide.executable_overrides[command_id]
            self._save_config()
            return True
        return False

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        self._load_env_vars()


def get_config(config_file: Optional[Path] = None) -> ConfigManager:
    """Get the configuration manager, shared for the default location."""
    return ConfigManager(config_file)
