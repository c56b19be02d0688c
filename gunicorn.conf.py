# gunicorn -c gunicorn.conf.py app:app
from httpecho.config import load_config
from httpecho.utils import logger, setup_logging

_config = load_config()

bind = f"{_config.host}:{_config.port}"
worker_class = "gthread"
workers = 1
threads = 8
# the app logs its own access line
accesslog = None


def when_ready(server):
    if not logger().handlers:
        setup_logging(_config)
    for host, port in (sock.getsockname()[:2] for sock in server.LISTENERS):
        logger().info(f"Listening on http://{host}:{port}/",
                      extra={"port": port})
