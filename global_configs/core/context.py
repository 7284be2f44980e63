from __future__ import annotations

"""Application context carrying the process-wide configuration manager.

The host application builds one :class:`AppContext` at start-up with
:func:`bootstrap` and passes it to the components that need configuration,
instead of reaching for a global instance.
"""

import logging
from typing import Optional, TYPE_CHECKING

from global_configs.config.manager import ConfigManager

if TYPE_CHECKING:
    from .storage import PackageAssetSource, SupportFileSystem

logger = logging.getLogger(__name__)

__all__ = ["AppContext", "bootstrap", "DEFAULT_ASSET"]

DEFAULT_ASSET = "default_config.json"


class AppContext:
    """Gateway to the services shared across the application."""

    def __init__(self, config: ConfigManager) -> None:
        self._config = config

    @property
    def config(self) -> ConfigManager:
        """Get the loaded configuration manager."""
        return self._config


async def bootstrap(
    asset_name: str = DEFAULT_ASSET,
    *,
    assets: Optional[PackageAssetSource] = None,
    filesystem: Optional[SupportFileSystem] = None,
    path: Optional[str] = None,
) -> AppContext:
    """Create the configuration manager, run the load sequence and wrap it.

    Load failures are logged and re-raised so the caller can abort start-up
    rather than continue with a partial configuration.
    """
    manager = ConfigManager(assets=assets, filesystem=filesystem)
    try:
        await manager.load_from_asset_then_override(asset_name, path=path)
    except Exception as exc:
        logger.error("Configuration load failed, aborting start-up: %s", exc)
        raise
    return AppContext(manager)
