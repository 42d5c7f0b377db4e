import json
import logging
import sys
from datetime import UTC, datetime


class JsonFormatter(logging.Formatter):
    """Format each record as a single line of JSON.

    Log calls may pass a dictionary as their only argument, for instance
    `logit.info("server startup complete", {"port": 5001})`. That dictionary
    ends up in the `data` field of the JSON line.
    """

    def format(self, record: logging.LogRecord) -> str:
        has_data = isinstance(record.args, dict)
        out = dict(
            timestamp=datetime.fromtimestamp(record.created, UTC).isoformat(),
            level=record.levelname,
            name=record.name,
            message=str(record.msg) if has_data else record.getMessage(),
        )
        if has_data:
            out["data"] = record.args
        if record.exc_info:
            out["exception"] = self.formatException(record.exc_info)
        return json.dumps(out, default=str)


def setup(level: str):
    """Send all `app` logs as JSON lines to stderr."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level <{level}>")

    logger = logging.getLogger("app")
    logger.setLevel(numeric)

    # Replace any handlers from previous calls.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
