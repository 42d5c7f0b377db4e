import json
import logging

import pytest

import graphiql_mw.logstreams
from graphiql_mw.logstreams import JsonFormatter


class TestLogstreams:
    def teardown_method(self):
        # Restore the setup from `pytest_configure`.
        graphiql_mw.logstreams.setup("DEBUG")

    def test_setup(self):
        logger = logging.getLogger("app")

        graphiql_mw.logstreams.setup("info")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

        # Repeated calls must not install more handlers.
        graphiql_mw.logstreams.setup("ERROR")
        assert logger.level == logging.ERROR
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_setup_invalid_level(self):
        with pytest.raises(ValueError):
            graphiql_mw.logstreams.setup("foo")

    def test_format(self):
        fmt = JsonFormatter()

        # Dictionary arguments end up in the `data` field.
        args = ({"port": 5001},)
        record = logging.LogRecord("app", logging.INFO, "", 1, "startup", args, None)
        out = json.loads(fmt.format(record))
        assert out["level"] == "INFO"
        assert out["name"] == "app"
        assert out["message"] == "startup"
        assert out["data"] == {"port": 5001}
        assert "timestamp" in out

        # Conventional format strings still work.
        record = logging.LogRecord("app", logging.INFO, "", 1, "x=%d", (1,), None)
        out = json.loads(fmt.format(record))
        assert out["message"] == "x=1"
        assert "data" not in out
