from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from buildmart.core.config import Settings
from buildmart.core.storage import LocalStorage
from buildmart.main import create_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        storage_path=str(tmp_path / "storage.json"),
        payment_delay_seconds=0,
    )


@pytest.fixture
def storage(tmp_path: Path) -> LocalStorage:
    return LocalStorage(tmp_path / "storage.json")


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as test_client:
        yield test_client
