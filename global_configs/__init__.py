"""Top-level package for global_configs.

A dot-path addressed configuration store seeded from bundled defaults and a
persisted override file, written back on every change. Applications should
depend on the names re-exported here rather than on internal modules.
"""

from .config.manager import ConfigManager
from .core.context import AppContext, bootstrap
from .core.exceptions import ConfigDecodeError, ConfigError, ConfigIOError, ConfigPathError

__all__: list[str] = [
    "AppContext",
    "ConfigManager",
    "ConfigError",
    "ConfigDecodeError",
    "ConfigIOError",
    "ConfigPathError",
    "bootstrap",
]
