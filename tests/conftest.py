"""Shared fixtures for the global_configs test suite.

Managers under test never touch the real user directory: the support
directory is rooted in ``tmp_path`` and bundled assets can be replaced by an
in-memory source.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Dict

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from global_configs.config.manager import ConfigManager
from global_configs.core.exceptions import ConfigIOError
from global_configs.core.storage import SupportFileSystem

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


class FakeAssetSource:
    """In-memory stand-in for PackageAssetSource."""

    def __init__(self, assets: Dict[str, str]) -> None:
        self.assets = dict(assets)
        self.reads: list[str] = []

    async def read_asset(self, name: str) -> str:
        self.reads.append(name)
        if name not in self.assets:
            raise ConfigIOError("Asset not found", path=name)
        return self.assets[name]


@pytest.fixture
def support_dir(tmp_path: Path) -> Path:
    """Support directory used by the filesystem fixture (created lazily)."""
    return tmp_path / "support"


@pytest.fixture
def filesystem(support_dir: Path) -> SupportFileSystem:
    return SupportFileSystem(base_dir=support_dir)


@pytest.fixture
def config_file(support_dir: Path) -> Path:
    return support_dir / "config.json"


@pytest.fixture
def theme_assets() -> FakeAssetSource:
    return FakeAssetSource({"config.json": json.dumps({"theme": "dark"})})


@pytest.fixture
def manager(theme_assets: FakeAssetSource, filesystem: SupportFileSystem) -> ConfigManager:
    return ConfigManager(assets=theme_assets, filesystem=filesystem)


@pytest.fixture
def read_config_file(config_file: Path):
    """Return a callable decoding the persisted override file."""
    def _read() -> dict:
        return json.loads(config_file.read_text(encoding="utf-8"))
    return _read


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep any default SupportFileSystem away from the real home directory."""
    monkeypatch.setenv("GLOBAL_CONFIGS_HOME", str(tmp_path / "home"))


@pytest.fixture
def asset_factory():
    """Build an in-memory asset source from a name -> content mapping."""
    return FakeAssetSource
