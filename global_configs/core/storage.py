from __future__ import annotations

"""Storage collaborators used by the configuration manager.

Two narrow services are exposed to the manager:

- :class:`PackageAssetSource` reads read-only assets bundled with a package.
- :class:`SupportFileSystem` locates the per-user support directory and reads
  and writes text files inside it.

Blocking work runs in the event loop's default executor so every call is
awaitable from the single application loop.

On Windows the support directory is ``%LOCALAPPDATA%\\<AppName>\\config``;
on Unix it is ``~/.<appname>``. ``GLOBAL_CONFIGS_HOME`` overrides both.
"""

import asyncio
import importlib.resources as pkg_resources
import logging
import os
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

from .exceptions import ConfigDecodeError, ConfigIOError

logger = logging.getLogger(__name__)

__all__ = ["PackageAssetSource", "SupportFileSystem", "get_support_dir"]

T = TypeVar("T")

DEFAULT_APP_NAME = "GlobalConfigs"
HOME_ENV_VAR = "GLOBAL_CONFIGS_HOME"


async def _run_blocking(func: Callable[..., T], *args) -> T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, lambda: func(*args))


def get_support_dir(app_name: str = DEFAULT_APP_NAME) -> Path:
    """Return the writable per-user support directory (not created)."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()

    if os.name == 'nt':  # Windows
        local_appdata = os.environ.get('LOCALAPPDATA')
        if local_appdata:
            return Path(local_appdata) / app_name / "config"
        else:
            # Fallback for Windows
            return Path.home() / "AppData" / "Local" / app_name / "config"
    else:  # Unix-like systems
        return Path.home() / f".{app_name.lower()}"


class PackageAssetSource:
    """Read text assets shipped inside a Python package."""

    def __init__(self, package: str = "global_configs.config") -> None:
        self._package = package

    def _read(self, name: str) -> str:
        resource = pkg_resources.files(self._package).joinpath(name)
        return resource.read_text(encoding="utf-8")

    async def read_asset(self, name: str) -> str:
        """Return the text content of the bundled asset *name*."""
        try:
            content = await _run_blocking(self._read, name)
        except UnicodeDecodeError as exc:
            raise ConfigDecodeError("Asset is not valid UTF-8", path=name, cause=exc) from exc
        except (OSError, ModuleNotFoundError) as exc:
            raise ConfigIOError(
                f"Could not read bundled asset from package '{self._package}'",
                path=name,
                cause=exc,
            ) from exc
        logger.debug("Read asset %s (%d chars)", name, len(content))
        return content


class SupportFileSystem:
    """Text file access rooted at the per-user support directory.

    Args:
        app_name: Directory name used when resolving the platform location.
        base_dir: Explicit support directory; bypasses environment and
            platform lookup.
        atomic: When true, writes go to a sibling ``.tmp`` file that is then
            moved over the destination.
    """

    def __init__(
        self,
        app_name: str = DEFAULT_APP_NAME,
        base_dir: Optional[Union[str, Path]] = None,
        atomic: bool = True,
    ) -> None:
        self.app_name = app_name
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.atomic = atomic

    def _ensure_support_dir(self) -> Path:
        support_dir = self.base_dir if self.base_dir is not None else get_support_dir(self.app_name)
        support_dir.mkdir(parents=True, exist_ok=True)
        return support_dir

    async def resolve_support_directory(self) -> Path:
        """Return the support directory, creating it if needed."""
        try:
            return await _run_blocking(self._ensure_support_dir)
        except OSError as exc:
            raise ConfigIOError("Could not create support directory", cause=exc) from exc

    async def exists(self, path: Union[str, Path]) -> bool:
        return await _run_blocking(Path(path).is_file)

    async def read_text(self, path: Union[str, Path]) -> str:
        try:
            return await _run_blocking(Path(path).read_text, "utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigDecodeError("File is not valid UTF-8", path=str(path), cause=exc) from exc
        except OSError as exc:
            raise ConfigIOError("Could not read file", path=str(path), cause=exc) from exc

    def _write(self, path: Path, text: str) -> None:
        if not self.atomic:
            path.write_text(text, encoding="utf-8")
            return

        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

    async def write_text(self, path: Union[str, Path], text: str) -> None:
        """Replace the whole content of *path* with *text*."""
        try:
            await _run_blocking(self._write, Path(path), text)
        except OSError as exc:
            raise ConfigIOError("Could not write file", path=str(path), cause=exc) from exc
