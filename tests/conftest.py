import pytest
from fastapi.testclient import TestClient

from doodleboard import state
from doodleboard.main import app


@pytest.fixture(autouse=True)
def clean_state():
    state.reset()
    yield
    state.reset()


@pytest.fixture
def client():
    return TestClient(app)
