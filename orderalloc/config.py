"""Environment-driven settings and the MongoDB connection."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

DEFAULT_PORT = "8080"
DEFAULT_DISTRIBUTION_CENTER_URL = "http://localhost:8001/distribuitioncenters"
DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_DB_NAME = "orderdb"
CONNECT_TIMEOUT_MS = 10_000

log = logging.getLogger(__name__)


def load_env() -> bool:
    """Load a ``.env`` file from the working directory, if there is one.

    Variables already present in the environment are left untouched.
    Returns whether a file was loaded.
    """
    env_file = Path.cwd() / ".env"
    if not env_file.is_file():
        log.info("No .env file found, relying on environment variables")
        return False
    load_dotenv(env_file)
    return True


def get_port() -> str:
    """Port the HTTP server listens on."""
    return os.getenv("PORT") or DEFAULT_PORT


def get_distribution_center_url() -> str:
    """Endpoint of the distribution-center lookup service."""
    return os.getenv("DISTRIBUTION_CENTER_URL") or DEFAULT_DISTRIBUTION_CENTER_URL


def init_mongo() -> Database:
    """Connect to MongoDB, check the server answers, and return the database."""
    uri = os.getenv("MONGO_URI") or DEFAULT_MONGO_URI
    client = MongoClient(
        uri,
        serverSelectionTimeoutMS=CONNECT_TIMEOUT_MS,
        connectTimeoutMS=CONNECT_TIMEOUT_MS,
    )
    try:
        client.admin.command("ping")
    except PyMongoError:
        log.exception("MongoDB ping error")
        client.close()
        raise
    return client.get_database(os.getenv("MONGO_DB_NAME") or DEFAULT_DB_NAME)