"""Path store, storage collaborators, errors and the application context."""

from .exceptions import ConfigDecodeError, ConfigError, ConfigIOError, ConfigPathError
from .storage import PackageAssetSource, SupportFileSystem

__all__ = [
    "ConfigError",
    "ConfigDecodeError",
    "ConfigIOError",
    "ConfigPathError",
    "PackageAssetSource",
    "SupportFileSystem",
]
