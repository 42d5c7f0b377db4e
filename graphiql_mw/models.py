import json
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict

DEFAULT_GRAPHIQL_PATH = "/graphiql"
DEFAULT_GRAPHQL_PATH = "/graphql"


# ----------------------------------------------------------------------
# GraphiQL
# ----------------------------------------------------------------------
class GraphiQLOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # URL path that serves the GraphiQL page.
    graphiql_path: str | None = None

    # URL path the GraphiQL page will send its queries to.
    graphql_path: str | None = None


def resolve_paths(options: GraphiQLOptions | None) -> Tuple[str, str]:
    """Return the effective (GraphiQL, GraphQL) paths.

    Absent or empty fields fall back to the defaults. Everything else is used
    verbatim, ie there is no attempt to validate or normalise the paths.
    """
    if options is None:
        raise ValueError("options must not be None")

    graphiql = options.graphiql_path or DEFAULT_GRAPHIQL_PATH
    graphql = options.graphql_path or DEFAULT_GRAPHQL_PATH
    return graphiql, graphql


class GraphQLRequest(BaseModel):
    operationName: str | None = None
    query: str | None = None

    # JSON encoded dictionary.
    variables: str | None = None

    def parsed_variables(self) -> Tuple[Dict[str, Any], bool]:
        """Return the decoded `variables` dictionary."""
        if not self.variables:
            return {}, False

        try:
            out = json.loads(self.variables)
        except ValueError:
            return {}, True

        if not isinstance(out, dict):
            return {}, True
        return out, False


# ----------------------------------------------------------------------
# Server
# ----------------------------------------------------------------------
class ServerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    loglevel: str
    host: str
    port: int

    graphiql: GraphiQLOptions = GraphiQLOptions()
