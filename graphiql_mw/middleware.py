import logging

from starlette import status
from starlette.applications import Starlette
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

import graphiql_mw.template
from graphiql_mw.models import GraphiQLOptions, resolve_paths

# Convenience.
logit = logging.getLogger("app")


class GraphiQLMiddleware:
    """Serve the GraphiQL page and pass all other requests on to `app`.

    Only `GET` requests for the exact GraphiQL path are intercepted. The
    path comparison is literal, ie `/graphiql/` does not match `/graphiql`.
    """

    def __init__(self, app: ASGIApp, options: GraphiQLOptions) -> None:
        if app is None:
            raise ValueError("app must not be None")
        if options is None:
            raise ValueError("options must not be None")

        self.app = app
        self.graphiql_path, self.graphql_path = resolve_paths(options)

        # The page never changes so we render it once.
        page = graphiql_mw.template.render(self.graphql_path)
        self.body = page.encode("utf8")

        logit.debug(
            "graphiql middleware installed",
            {"graphiql": self.graphiql_path, "graphql": self.graphql_path},
        )

    def should_respond(self, method: str, path: str) -> bool:
        return method.upper() == "GET" and path == self.graphiql_path

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope is None:
            raise ValueError("scope must not be None")

        # Websockets and lifespan events are none of our business.
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if not self.should_respond(scope["method"], scope["path"]):
            await self.app(scope, receive, send)
            return

        response = Response(
            content=self.body,
            status_code=status.HTTP_200_OK,
            headers={"content-type": "text/html"},
        )
        await response(scope, receive, send)


def install(
    app: Starlette, graphiql_path: str | None = None, graphql_path: str | None = None
) -> GraphiQLOptions:
    """Add the GraphiQL middleware to `app` and return its options."""
    options = GraphiQLOptions(graphiql_path=graphiql_path, graphql_path=graphql_path)
    app.add_middleware(GraphiQLMiddleware, options=options)
    return options
