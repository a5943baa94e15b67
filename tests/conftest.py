from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from lanshare.adapters.fs.uploads import UploadsDirectoryStore
from lanshare.api.deps import Settings, get_address_source, get_settings
from lanshare.api.main import app


class FakeAddressSource:
    """AddressSourcePort returning a fixed list."""

    def __init__(self, addresses: list[str] | None = None) -> None:
        self.addresses = addresses if addresses is not None else ["192.168.1.5"]
        self.calls = 0

    def list_lan_addresses(self) -> list[str]:
        self.calls += 1
        return list(self.addresses)


@pytest.fixture
def uploads_dir(tmp_path: Path) -> Path:
    # Not created up front: the store creates it on first upload
    return tmp_path / "uploads"


@pytest.fixture
def store(uploads_dir: Path) -> UploadsDirectoryStore:
    return UploadsDirectoryStore(uploads_dir)


@pytest.fixture
def address_source() -> FakeAddressSource:
    return FakeAddressSource()


@pytest.fixture
def test_settings(tmp_path: Path, uploads_dir: Path) -> Settings:
    s = Settings()
    s.uploads_dir = uploads_dir
    s.rules_path = tmp_path / "rules.yaml"  # absent -> defaults
    return s


@pytest.fixture
def client(test_settings: Settings, address_source: FakeAddressSource) -> Iterator[TestClient]:
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_address_source] = lambda: address_source
    yield TestClient(app)
    app.dependency_overrides.clear()
