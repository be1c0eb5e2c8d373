import pytest

from imageref.routes import app as flask_app

DIGEST = "sha256:" + "0123456789abcdef" * 4


@pytest.fixture
def digest():
    return DIGEST


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as client:
        yield client
