import logging

from httpecho.config import load_config
from httpecho.server import create_app, serve
from httpecho.utils import setup_logging

CONFIG = load_config()
setup_logging(CONFIG)
app = create_app(CONFIG)

if __name__ == "__main__":
    serve(app, CONFIG)
else:
    # flask's own error log goes through gunicorn when served by it
    gunicorn_logger = logging.getLogger("gunicorn.error")
    if gunicorn_logger.handlers:
        app.logger.handlers = gunicorn_logger.handlers
        app.logger.setLevel(gunicorn_logger.level)
