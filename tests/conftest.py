from typing import List
from unittest import mock

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

import graphiql_mw.api
import graphiql_mw.logstreams
from graphiql_mw.middleware import GraphiQLMiddleware
from graphiql_mw.models import GraphiQLOptions


def pytest_configure(*args, **kwargs):
    """Pytest calls this hook on startup."""
    # Set log level to DEBUG for all unit tests.
    graphiql_mw.logstreams.setup("DEBUG")


class Downstream:
    """ASGI app that records every call it receives."""

    def __init__(self):
        self.calls: List[tuple] = []

    async def __call__(self, scope, receive, send):
        self.calls.append((scope, receive, send))


def make_downstream_app(options: GraphiQLOptions) -> FastAPI:
    """Return an app that echoes all requests that reach it."""
    app = FastAPI()
    app.extra["hits"] = []

    @app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "DELETE"])
    def catch_all(request: Request) -> PlainTextResponse:
        app.extra["hits"].append((request.method, request.url.path))
        return PlainTextResponse(f"downstream {request.method} {request.url.path}")

    app.add_middleware(GraphiQLMiddleware, options=options)
    return app


@pytest.fixture
def downstream():
    return Downstream()


@pytest.fixture
def echo_app():
    return make_downstream_app(GraphiQLOptions())


@pytest.fixture
def echo_client(echo_app):
    with TestClient(echo_app) as tc:
        yield tc


@pytest.fixture
def client():
    with mock.patch.dict("os.environ", values={}, clear=True):
        app = graphiql_mw.api.make_app()
    with TestClient(app) as tc:
        yield tc
