import pytest

from app import create_app


@pytest.fixture
def app():
    return create_app({"TESTING": True, "MAX_DIMENSION": 64, "MAX_CONTENT_LENGTH": 64 * 64 * 4})


@pytest.fixture
def client(app):
    return app.test_client()
