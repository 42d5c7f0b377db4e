"""Placeholder for the endpoint the GraphiQL page sends its queries to.

This server does not execute queries. The endpoint only validates the payload
so that clients learn about malformed requests before they learn that
nothing will run them.
"""

import logging

from fastapi import HTTPException, status

from graphiql_mw.models import GraphQLRequest

# Convenience.
logit = logging.getLogger("app")


def post_query(data: GraphQLRequest):
    _, err = data.parsed_variables()
    if err:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="variables must be a JSON encoded object",
        )

    logit.info("graphql query received", {"operationName": data.operationName})
    raise HTTPException(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        detail="this server does not execute GraphQL queries",
    )
