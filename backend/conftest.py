import os
import tempfile

# Keep the import-time store out of the working directory.
os.environ.setdefault("STOCKROOM_DATA_DIR", tempfile.mkdtemp(prefix="stockroom-"))

import pytest

import store
from config import get_settings


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("STOCKROOM_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOCKROOM_SEED", "true")
    store.reset(get_settings())
    return tmp_path


@pytest.fixture
def client(data_dir):
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as c:
        yield c
