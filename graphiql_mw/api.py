import logging
import os
from contextlib import asynccontextmanager
from typing import Tuple

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp

import graphiql_mw.routers.basic as basic
import graphiql_mw.routers.graphql as graphql
from graphiql_mw.middleware import GraphiQLMiddleware
from graphiql_mw.models import GraphiQLOptions, ServerConfig, resolve_paths

# Convenience.
logit = logging.getLogger("app")


# ----------------------------------------------------------------------
# Setup Server.
# ----------------------------------------------------------------------
def compile_server_config() -> Tuple[ServerConfig, bool]:
    try:
        cfg = ServerConfig(
            loglevel=os.getenv("GRAPHIQL_LOGLEVEL", "info"),
            host=os.getenv("GRAPHIQL_HOST", "0.0.0.0"),
            port=int(os.getenv("GRAPHIQL_PORT", "5001")),
            graphiql=GraphiQLOptions(
                graphiql_path=os.getenv("GRAPHIQL_PAGE_PATH", ""),
                graphql_path=os.getenv("GRAPHIQL_API_PATH", ""),
            ),
        )
        return cfg, False
    except ValueError as e:
        logit.error("invalid environment variables", {"reason": tuple(e.args)})
        return ServerConfig(loglevel="", host="", port=-1), True


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg: ServerConfig = app.extra["config"]
    graphiql, graphql = resolve_paths(cfg.graphiql)

    logit.info("server startup complete", {"graphiql": graphiql, "graphql": graphql})
    yield
    logit.info("server shutdown complete")


async def validation_error_handler(
    _: Request, exc: RequestValidationError
) -> JSONResponse:
    logit.info("invalid request", {"errors": exc.errors()})
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder({"detail": exc.errors(), "body": exc.body}),
    )


def make_app() -> ASGIApp:
    """Return a fully configured FastAPI instance."""
    cfg, err = compile_server_config()
    if err:
        raise RuntimeError("could not meet preconditions to start server")

    app = FastAPI(
        title="GraphiQL",
        summary="",
        description="",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.extra["config"] = cfg

    # Serve the GraphiQL page. Every other request passes straight through to
    # the routes below.
    app.add_middleware(GraphiQLMiddleware, options=cfg.graphiql)

    # Install the web server routes.
    _, graphql_path = resolve_paths(cfg.graphiql)
    app.include_router(basic.router, prefix="", tags=["Basic"])
    app.add_api_route(
        graphql_path, graphql.post_query, methods=["POST"], tags=["GraphQL"]
    )

    # Install the exception handlers.
    app.add_exception_handler(RequestValidationError, handler=validation_error_handler)  # type: ignore

    return app
