import json
import logging
from pathlib import Path
from pydantic import ValidationError
from dotenv import dotenv_values

from .schemas import AppConfig
from .display import Display

log = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".finch"
DEFAULT_ENV_FILE = DEFAULT_CONFIG_DIR / ".env"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "finch-vm.json"


def _apply_env_overrides(app_config: AppConfig, env_path: Path) -> AppConfig:
    """Overrides config values with the ones found in the .env file, if any."""
    if not env_path.exists():
        return app_config

    env_vars = dotenv_values(env_path)
    if env_vars.get("FINCH_INSTANCE_NAME"):
        app_config.instance_name = env_vars.get("FINCH_INSTANCE_NAME")
    if env_vars.get("LIMA_HOME"):
        app_config.lima_home = env_vars.get("LIMA_HOME")
    return app_config


def load_config(
    display: Display,
    config_path: Path = DEFAULT_CONFIG_FILE,
    env_path: Path = DEFAULT_ENV_FILE,
) -> tuple[AppConfig, bool]:
    """
    Loads the application configuration from JSON and .env files.
    Missing files mean the defaults are used.

    Returns:
        tuple: (AppConfig, fell_back_to_defaults)
    """
    if not config_path.exists():
        log.debug(f"No configuration file at {config_path}, using defaults")
        return _apply_env_overrides(AppConfig(), env_path), False

    try:
        with open(config_path, "r") as f:
            data = json.load(f)
        app_config = AppConfig(**data)
    except (json.JSONDecodeError, ValidationError, TypeError) as e:
        log.debug(f"Config fallback: {type(e).__name__}")
        return _apply_env_overrides(AppConfig(), env_path), True

    return _apply_env_overrides(app_config, env_path), False


class Config:
    """A configuration manager that handles loading and accessing app configuration."""

    def __init__(self, display: Display, config_path: Path = DEFAULT_CONFIG_FILE, env_path: Path = DEFAULT_ENV_FILE):
        self._display = display
        self._config_path = config_path
        self._env_path = env_path
        self._app_config, self._fell_back_to_defaults = load_config(display, config_path, env_path)

    @property
    def app_config(self) -> AppConfig:
        """Returns the loaded AppConfig object."""
        return self._app_config

    @property
    def fell_back_to_defaults(self) -> bool:
        """Returns True if the config fell back to defaults due to loading errors."""
        return self._fell_back_to_defaults
