import asyncio
import sys

from hypercorn.asyncio import serve
from hypercorn.config import Config

import graphiql_mw.api
import graphiql_mw.logstreams

if __name__ == "__main__":  # codecov-skip
    cfg, err = graphiql_mw.api.compile_server_config()
    assert not err

    try:
        graphiql_mw.logstreams.setup(cfg.loglevel)
        hypercorn_cfg = Config()
        hypercorn_cfg.bind = [f"{cfg.host}:{cfg.port}"]
        asyncio.run(serve(graphiql_mw.api.make_app(), hypercorn_cfg))  # type: ignore
    except KeyboardInterrupt:
        print("User abort")
        sys.exit(1)
