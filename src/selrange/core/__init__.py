"""Core functionality for selrange"""

from selrange.core.config import load_config, save_config, create_config, config_exists
from selrange.core.snapshot import load_snapshot, save_snapshot

__all__ = [
    "load_config",
    "save_config",
    "create_config",
    "config_exists",
    "load_snapshot",
    "save_snapshot",
]
