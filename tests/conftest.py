from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from hashpage.main import create_app
from hashpage.server import Listener


ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def listener():
    return Listener()


@pytest.fixture
def client(listener):
    app = create_app(
        listener,
        templates_dir=str(ROOT / "templates"),
        static_dir=str(ROOT / "www-data"),
    )
    return TestClient(app)
