from enum import Enum


class LogFormat(str, Enum):
    DEFAULT = "default"
    JSON = "json"


JSON_MEDIA_TYPE = "application/json"
HTML_MEDIA_TYPE = "text/html"
# priority order, earlier wins on a tie
MEDIA_TYPES = (JSON_MEDIA_TYPE, HTML_MEDIA_TYPE)

DEFAULT_PORT = 9080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "DEBUG"
