"""Shared MongoDB client for the API process.

One ``MongoClient`` is created lazily and reused. A cached client that stops
answering pings is replaced; a missing or unusable ``MONGO_URL`` is
remembered so requests fail fast with 503 instead of waiting on server
selection every time.
"""

import os
import logging
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Driver-level logs are noisy at INFO
logging.getLogger('pymongo').setLevel(logging.WARNING)

MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'lrblog')
USERS_COLLECTION_NAME = 'users'

CLIENT_OPTIONS = {
    'serverSelectionTimeoutMS': 5000,
    'connectTimeoutMS': 5000,
    'socketTimeoutMS': 30000,
    'maxPoolSize': 10,
    'retryWrites': True,
    'retryReads': True,
}

_client: MongoClient | None = None
_connected_once = False
_unusable = False


def reset_client():
    """Forget the cached client and any earlier failure."""
    global _client, _connected_once, _unusable
    _client = None
    _connected_once = False
    _unusable = False


def _is_alive(client: MongoClient) -> bool:
    try:
        client.admin.command('ping')
        return True
    except PyMongoError:
        return False


def get_mongodb_client() -> MongoClient | None:
    """Return a live client, or None when MongoDB is unavailable.

    A failure on the very first connection is treated as configuration
    and not retried; later failures are retried on the next call.
    """
    global _client, _connected_once, _unusable

    if _client is not None:
        if _is_alive(_client):
            return _client
        logger.debug("[MONGODB] Cached client failed ping, reconnecting")
        _client = None

    if _unusable:
        return None

    if not MONGO_URL:
        logger.error("[MONGODB] MONGO_URL not configured.")
        _unusable = True
        return None

    try:
        client = MongoClient(MONGO_URL, **CLIENT_OPTIONS)
        client.admin.command('ping')
    except PyMongoError as e:
        if not _connected_once:
            logger.error("[MONGODB] Initial connection failed", extra={"error": str(e)[:200]})
            _unusable = True
        return None

    if not _connected_once:
        logger.info("[MONGODB] Connected", extra={"database": DATABASE_NAME})
    _connected_once = True
    _client = client
    return client
