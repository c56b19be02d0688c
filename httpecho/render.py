import json

from jinja2 import Environment, PackageLoader, select_autoescape

from .constant import JSON_MEDIA_TYPE
from .snapshot import RequestSnapshot

TERSE_FIELDS = {"method", "url"}

_templates = Environment(
    loader=PackageLoader("httpecho", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def echo_payload(snapshot: RequestSnapshot, terse: bool) -> dict:
    if terse:
        return {"request": snapshot.model_dump(include=TERSE_FIELDS)}
    return {"request": snapshot.model_dump()}


def render_json(snapshot: RequestSnapshot, terse: bool = False) -> str:
    return json.dumps(echo_payload(snapshot, terse),
                      ensure_ascii=False,
                      separators=(",", ":"))


def render_html(snapshot: RequestSnapshot, terse: bool = False) -> str:
    template = _templates.get_template("echo.html")
    return template.render(request=snapshot, terse=terse)


def render(snapshot: RequestSnapshot, content_type: str,
           terse: bool = False) -> str:
    if content_type == JSON_MEDIA_TYPE:
        return render_json(snapshot, terse)
    return render_html(snapshot, terse)
