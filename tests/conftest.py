import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure `import blobvault...` works without installing the package.
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


DOMAIN = "https://cdn.example.test/assets"


@pytest.fixture
def cfg(tmp_path: Path):
    from blobvault.config import AppConfig

    return AppConfig(storage_root=tmp_path / "data", access_domain=DOMAIN)


@pytest.fixture
def client(cfg):
    from fastapi.testclient import TestClient

    from blobvault.main import create_app

    with TestClient(create_app(cfg)) as c:
        yield c
