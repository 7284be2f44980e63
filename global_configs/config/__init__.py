"""Configuration manager and the files packaged with it.

``default_config.json`` holds the bundled defaults and ``logging.yml`` the
logging setup applied by :func:`global_configs.logging_config.setup_logging`.
"""

from .manager import ConfigManager

__all__ = [
    "ConfigManager",
]
