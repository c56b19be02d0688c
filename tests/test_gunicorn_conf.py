import importlib.util
import socket
from pathlib import Path

import pytest

from httpecho.config import load_config
from httpecho.utils import setup_logging

CONF_PATH = Path(__file__).resolve().parents[1] / "gunicorn.conf.py"


def _load_conf():
    spec = importlib.util.spec_from_file_location("gunicorn_conf", CONF_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class FakeArbiter:

    def __init__(self, listeners):
        self.LISTENERS = listeners


@pytest.fixture
def listener():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    yield sock
    sock.close()


def test_bind_follows_port_env(monkeypatch):
    monkeypatch.setenv("PORT", "abc")
    conf = _load_conf()
    assert conf.bind == "0.0.0.0:9080"
    assert conf.worker_class == "gthread"

    monkeypatch.setenv("PORT", "8123")
    assert _load_conf().bind == "0.0.0.0:8123"


def test_when_ready_logs_listening_line(listener, log_stream):
    setup_logging(load_config({}), stream=log_stream)
    conf = _load_conf()
    port = listener.getsockname()[1]

    conf.when_ready(FakeArbiter([listener]))

    assert f"Listening on http://127.0.0.1:{port}/" in log_stream.getvalue()
