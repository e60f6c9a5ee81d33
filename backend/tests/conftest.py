import sys
from pathlib import Path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import pytest
from fastapi.testclient import TestClient

from main import create_app
from utils.settings import Settings

SAMPLE_CSV = BACKEND_DIR / "sample" / "japanese_properties.csv"


@pytest.fixture
def sample_bytes() -> bytes:
    return SAMPLE_CSV.read_bytes()


@pytest.fixture
def client():
    return TestClient(create_app(Settings()))


@pytest.fixture
def marked_client():
    return TestClient(create_app(Settings(address_format="marked")))


@pytest.fixture
def strict_client():
    return TestClient(create_app(Settings(row_failure_policy="strict")))
