import json
import logging
import sys
from datetime import datetime, timezone

from .config import EchoConfig
from .constant import LogFormat

LOGGER_NAME = "httpecho"

# attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {
        "message",
        "asctime",
        "taskName",
    }


def logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _iso_time(record: logging.LogRecord) -> str:
    dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _extra_fields(record: logging.LogRecord) -> dict:
    return {
        k: v
        for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS
    }


class HumanFormatter(logging.Formatter):
    """
    ``[2024-01-01T00:00:00.000Z] INFO: message``

    DEBUG records also show their ``extra=`` fields as ``key=<json>``.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = f"[{_iso_time(record)}] {record.levelname}: {record.getMessage()}"
        if record.levelno <= logging.DEBUG:
            fields = " ".join(
                f"{k}={json.dumps(v, ensure_ascii=False, default=str)}"
                for k, v in _extra_fields(record).items())
            if fields:
                line = f"{line} {fields}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line. Fields passed with ``extra=`` are merged into
    the object next to ``time``, ``level`` and ``msg``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": _iso_time(record),
            "level": record.levelname,
            "msg": record.getMessage(),
        }
        payload.update(_extra_fields(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def make_formatter(log_format: LogFormat) -> logging.Formatter:
    if log_format == LogFormat.JSON:
        return JsonFormatter()
    return HumanFormatter()


def setup_logging(config: EchoConfig, stream=None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger, formatted
    according to ``config.log_format``. Calling it again replaces the
    handler instead of stacking a second one.
    """
    log = logger()
    for handler in list(log.handlers):
        log.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(make_formatter(config.log_format))
    log.addHandler(handler)
    log.setLevel(config.log_level)
    log.propagate = False
    # the echo handler writes its own access line
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    log.info(f"Logging at level {config.log_level}")
    return log
