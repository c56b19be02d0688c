import io

import pytest

from httpecho.config import load_config
from httpecho.server import create_app
from httpecho.utils import setup_logging


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def make_client(log_stream):
    # build an app the way app.py does, from a fake environment
    def _make_client(**environ):
        config = load_config(environ)
        setup_logging(config, stream=log_stream)
        return create_app(config).test_client()

    return _make_client


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def terse_client(make_client):
    return make_client(TERSE_RESPONSE="true")
