from typing import List, Tuple
from urllib.parse import quote, urlsplit

from pydantic import BaseModel, ConfigDict
from werkzeug.wrappers import Request


class RequestSnapshot(BaseModel):
    """What the server saw for one request."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: List[Tuple[str, str]]
    body: str = ""


def _strip_origin(target: str) -> str:
    # absolute-form targets (proxy style) carry scheme and host
    if target.startswith("/"):
        return target
    parts = urlsplit(target)
    path = parts.path or "/"
    if parts.query:
        return f"{path}?{parts.query}"
    return path


def request_target(environ: dict) -> str:
    """
    Path and query of the request, without scheme or host.

    The raw request URI is used when the WSGI server exposes it, so the path
    is reported as it went over the wire. Otherwise it is rebuilt from
    ``SCRIPT_NAME``, ``PATH_INFO`` and ``QUERY_STRING``.
    """
    raw = environ.get("RAW_URI") or environ.get("REQUEST_URI")
    if raw:
        return _strip_origin(raw)
    path = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")
    # PATH_INFO is latin-1 decoded per PEP 3333
    path = quote(path.encode("latin-1"), safe="/:@!$&'()*+,;=-._~") or "/"
    query = environ.get("QUERY_STRING", "")
    if query:
        return f"{path}?{query}"
    return path


def build_snapshot(request: Request) -> RequestSnapshot:
    body = request.get_data(cache=True).decode("utf-8", errors="replace")
    return RequestSnapshot(
        method=request.method,
        url=request_target(request.environ),
        headers=[(name, value) for name, value in request.headers.items()],
        body=body,
    )
