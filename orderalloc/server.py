"""Command that starts the order API server."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from pymongo.errors import PyMongoError

from . import logger
from .config import get_port, init_mongo, load_env
from .web import create_app

LISTEN_HOST = "0.0.0.0"

log = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Configure logging and settings, connect to MongoDB and serve the API."""
    parser = argparse.ArgumentParser(
        prog="orderalloc",
        description="Serve the order allocation API. Settings come from the environment.",
    )
    parser.parse_args(argv)

    logger.init()
    load_env()

    try:
        database = init_mongo()
    except PyMongoError as exc:
        log.error("MongoDB connection error: %s", exc)
        return 1

    app = create_app(database)
    try:
        app.run(host=LISTEN_HOST, port=int(get_port()))
    except (OSError, ValueError) as exc:
        log.error("failed to start server: %s", exc)
        return 1
    return 0