import pytest

from src.common import database


@pytest.fixture(autouse=True)
def reset_published_connection():
    """Never leak a published handle from one test into the next."""
    database._connection = None
    yield
    database._connection = None


def pytest_configure(config):
    config.addinivalue_line("markers", "mysql: test needs a live MySQL server")
