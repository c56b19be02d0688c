import time

from flask import Flask, Response, request
from werkzeug.serving import make_server

from .config import EchoConfig
from .negotiation import negotiate
from .render import render
from .snapshot import build_snapshot
from .utils import logger


def create_app(config: EchoConfig) -> Flask:
    app = Flask(__name__, static_folder=None)
    app.config["ECHO"] = config

    # runs ahead of URL matching, so every method and path lands here
    @app.before_request
    def echo():
        start = time.perf_counter()
        snapshot = build_snapshot(request)
        logger().debug("Echoing request",
                       extra={"request": snapshot.model_dump()})

        content_type = negotiate(request.headers.get("Accept"))
        body = render(snapshot, content_type, config.terse)
        resp = Response(body, status=200, mimetype=content_type)

        ms = round((time.perf_counter() - start) * 1000)
        logger().info(
            f"{snapshot.method} {snapshot.url} {resp.status_code} - - {ms} ms")
        return resp

    return app


def serve(app: Flask, config: EchoConfig, ready=None) -> None:
    """
    Bind ``config.host:config.port`` and serve one thread per request until
    interrupted. ``ready`` is called with the bound server once listening.
    """
    server = make_server(config.host, config.port, app, threaded=True)
    host, port = server.server_address[:2]
    logger().info(f"Listening on http://{host}:{port}/", extra={"port": port})
    if ready is not None:
        ready(server)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger().info("Shutting down")
    finally:
        server.server_close()
