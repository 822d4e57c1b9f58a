"""Starting the service: logging, storage and the HTTP server."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

import uvicorn

from flashsale.config import Config
from flashsale.database import connect
from flashsale.http import AppState, http_router
from flashsale.repositories import SqlProductRepo, SqlUserRepo

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging() -> None:
    """Log everything at debug level, database driver chatter at info."""
    logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT, force=True)
    logging.getLogger("aiosqlite").setLevel(logging.INFO)


async def run(config: Optional[Config] = None) -> None:
    """Open storage and serve HTTP until the server stops."""
    if config is None:
        config = Config.from_env()
    logger.debug("Configuration loaded: %r", config)

    connection = await connect(config)
    try:
        user_repo = SqlUserRepo(connection)
        logger.debug("User repository initialized")
        product_repo = SqlProductRepo(connection)
        logger.debug("Product repository initialized")

        app = http_router(AppState(user_repo=user_repo, product_repo=product_repo))
        logger.debug("HTTP router configured")

        server = uvicorn.Server(
            uvicorn.Config(
                app, host=config.http_host, port=config.http_port, log_config=None
            )
        )
        logger.info("Server listening on %s", config.http_addr)
        await server.serve()
    finally:
        await connection.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server; return the process exit status."""
    parser = argparse.ArgumentParser(prog="flashsale", description="Flash-sale HTTP server.")
    parser.parse_args(argv)

    configure_logging()
    try:
        asyncio.run(run())
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())