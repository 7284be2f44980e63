from __future__ import annotations

"""Configuration loading, access and write-through persistence.

The manager owns a single configuration tree for the lifetime of the process.
It is seeded from a JSON asset packaged with the application (the defaults)
and then from ``config.json`` in the per-user support directory (the
overrides), which wins over the defaults key by key at the top level.

Every persisting mutation rewrites the whole override file, which makes that
file the source of truth from the next start onward.

Instances are created once at start-up and handed to the code that needs
them (see :mod:`global_configs.core.context`).
"""

import copy
import json
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

from global_configs.core import path_store
from global_configs.core.exceptions import ConfigDecodeError, ConfigPathError
from global_configs.core.path_store import ConfigTree
from global_configs.core.storage import PackageAssetSource, SupportFileSystem

logger = logging.getLogger(__name__)

__all__ = ["ConfigManager", "CONFIG_FILENAME", "SYNC_FREQUENCY_DAYS"]

CONFIG_FILENAME = "config.json"
SYNC_FREQUENCY_DAYS = 7


def _decode_mapping(content: str, source: str) -> Dict[str, Any]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigDecodeError(f"Invalid JSON: {exc}", path=source, cause=exc) from exc
    if not isinstance(data, dict):
        raise ConfigDecodeError(
            f"Expected a JSON object at top level, got {type(data).__name__}", path=source
        )
    return data


class ConfigManager:
    """Holds the configuration tree and keeps the override file in sync."""

    def __init__(
        self,
        assets: Optional[PackageAssetSource] = None,
        filesystem: Optional[SupportFileSystem] = None,
    ) -> None:
        self._assets = assets or PackageAssetSource()
        self._filesystem = filesystem or SupportFileSystem()
        self._data: ConfigTree = {}
        self._loaded = False

    @property
    def loaded(self) -> bool:
        """True once the asset/override load sequence has completed."""
        return self._loaded

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load_from_map(self, mapping: Mapping[str, Any], path: Optional[str] = None) -> "ConfigManager":
        """Merge *mapping* into the tree.

        Without *path*, top-level keys of *mapping* replace the existing ones
        and other keys are left alone. With *path*, *mapping* is stored at that
        location, creating it if necessary. The tree keeps its own copy of
        *mapping*.
        """
        if path:
            self._data = path_store.set(self._data, path, copy.deepcopy(dict(mapping)))
        else:
            self._data.update(copy.deepcopy(dict(mapping)))
        return self

    async def load_from_asset_then_override(
        self, asset_name: str, path: Optional[str] = None
    ) -> "ConfigManager":
        """Load defaults from a bundled asset, then the persisted overrides.

        The merged result is written back to the override file. Asset, decode
        and directory errors propagate; on failure the tree may already hold
        the defaults.
        """
        # 1. packaged defaults
        content = await self._assets.read_asset(asset_name)
        defaults = _decode_mapping(content, asset_name)
        self.load_from_map(defaults, path=path)
        self._stamp_sync_defaults()
        status = "defaults"

        # 2. user overrides from the support directory
        config_file = await self.config_file_path()
        if await self._filesystem.exists(config_file):
            overrides = _decode_mapping(await self._filesystem.read_text(config_file), str(config_file))
            self._data.update(overrides)
            status = "defaults+overrides"
        else:
            logger.info("No override file at %s, using defaults only", config_file)

        await self.save()
        self._loaded = True
        logger.info("Config startup: %s (%s) | %d top-level keys", asset_name, status, len(self._data))
        return self

    def _stamp_sync_defaults(self) -> None:
        now = datetime.now()
        self._data = path_store.set(
            self._data, "syncWithDrive.due", str(now + timedelta(days=SYNC_FREQUENCY_DAYS))
        )
        self._data = path_store.set(self._data, "syncWithDrive.frequency", SYNC_FREQUENCY_DAYS)
        self._data = path_store.set(self._data, "syncWithDrive.lastSync", str(now))

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def get(self, path: Optional[str] = None, converter: Optional[Callable[[Any], Any]] = None) -> Any:
        """Read a value by dotted *path*; ``None`` when absent.

        Without *path* the whole tree is returned. *converter* is applied to
        the found value.
        """
        if not path:
            return converter(self._data) if converter is not None else self._data
        return path_store.get(self._data, path, converter=converter)

    async def set(self, path: str, value: Any) -> None:
        """Store *value* at *path* and rewrite the override file.

        The in-memory tree is updated before the write is attempted, so a
        failed write leaves memory ahead of disk.
        """
        if not path:
            raise ConfigPathError("Cannot set a value at an empty path")
        self._data = path_store.set(self._data, path, value)
        await self.save()

    async def unset(self, path: str) -> None:
        """Remove the value at *path* and rewrite the override file."""
        if not path:
            raise ConfigPathError("Cannot unset an empty path")
        self._data = path_store.unset(self._data, path)
        await self.save()

    def clear(self) -> None:
        """Empty the in-memory tree. The override file is left untouched."""
        self._data = {}

    def to_dict(self) -> ConfigTree:
        """Return a deep copy of the current tree."""
        return copy.deepcopy(self._data)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    async def config_file_path(self) -> Path:
        support_dir = await self._filesystem.resolve_support_directory()
        return support_dir / CONFIG_FILENAME

    async def save(self) -> None:
        """Write the entire tree to the override file."""
        config_file = await self.config_file_path()
        try:
            await self._filesystem.write_text(config_file, json.dumps(self._data, ensure_ascii=False))
        except Exception as exc:
            logger.error("Could not persist config to %s: %s", config_file, exc)
            raise
        logger.debug("Persisted config to %s: %s", config_file, self._data)
