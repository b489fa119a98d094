import pytest
from fastapi.testclient import TestClient

from backend.main import create_app


@pytest.fixture(name="client")
def client_fixture():
    # Not used as a context manager: lifespan (logging setup) is not run in tests.
    return TestClient(create_app())
