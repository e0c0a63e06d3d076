"""Config loading and saving for selrange"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from selrange.models.config import SelrangeConfig


# Config lives in .selrange/config.yaml in current working directory
CONFIG_DIR = Path(".selrange")
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class ConfigNotFoundError(Exception):
    """Raised when config file doesn't exist"""

    pass


class ConfigInvalidError(Exception):
    """Raised when config file is invalid"""

    pass


def get_config_path() -> Path:
    """Get the config file path (relative to cwd)"""
    return CONFIG_FILE


def config_exists() -> bool:
    """Check if config file exists"""
    return CONFIG_FILE.exists()


def load_config() -> SelrangeConfig:
    """Load config from .selrange/config.yaml

    Raises:
        ConfigNotFoundError: If config file doesn't exist
        ConfigInvalidError: If config file is invalid
    """
    if not CONFIG_FILE.exists():
        raise ConfigNotFoundError(
            f"Config file not found at {CONFIG_FILE}\n"
            f"Run 'selrange init' to create one."
        )

    try:
        with open(CONFIG_FILE, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            raise ConfigInvalidError(f"Config file is empty: {CONFIG_FILE}")

        return SelrangeConfig.model_validate(data)

    except yaml.YAMLError as e:
        raise ConfigInvalidError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ConfigInvalidError(f"Invalid config: {e}")


def load_config_or_default() -> SelrangeConfig:
    """Load config, falling back to defaults when no config file exists"""
    if not config_exists():
        return SelrangeConfig()
    return load_config()


def save_config(config: SelrangeConfig) -> Path:
    """Save config to .selrange/config.yaml"""
    CONFIG_DIR.mkdir(exist_ok=True)

    data = config.model_dump()

    with open(CONFIG_FILE, "w") as f:
        yaml.dump(data, f, default_flow_style=False)

    return CONFIG_FILE


def create_config(log_level: str = "WARNING") -> SelrangeConfig:
    """Create and save a new config"""
    config = SelrangeConfig(log_level=log_level)
    save_config(config)
    return config
