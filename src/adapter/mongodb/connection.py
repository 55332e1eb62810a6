"""Cached MongoDB client.

The client is created lazily on first use and re-pinged on every checkout.
A missing MONGO_URL or a failed first connection latches the adapter off
until ``reset_client()``; a client that dies later is rebuilt on demand.
"""

import os
import logging
from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)

# Keep driver-level chatter out of the structured application logs
logging.getLogger('pymongo').setLevel(logging.WARNING)

MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'repospector')

CLIENT_OPTIONS = {
    'tz_aware': True,  # reset token expiry and dashboard cutoffs compare aware datetimes
    'serverSelectionTimeoutMS': 5000,
    'connectTimeoutMS': 5000,
    'socketTimeoutMS': 30000,
    'maxPoolSize': 10,
    'minPoolSize': 0,
    'maxIdleTimeMS': 30000,
    'waitQueueTimeoutMS': 10000,
    'retryWrites': True,
    'retryReads': True,
}

_client_cache: MongoClient | None = None
_ever_connected = False
_disabled = False


def reset_client():
    """Forget the cached client and any earlier failure."""
    global _client_cache, _ever_connected, _disabled
    _client_cache = None
    _ever_connected = False
    _disabled = False


def _is_alive(client: MongoClient) -> bool:
    try:
        client.admin.command('ping')
        return True
    except PyMongoError:
        return False


def get_mongodb_client() -> MongoClient | None:
    """Return a live client, or None when MongoDB is unreachable or unconfigured."""
    global _client_cache, _ever_connected, _disabled

    if _client_cache is not None:
        if _is_alive(_client_cache):
            return _client_cache
        logger.debug("[MONGODB] Cached client lost, reconnecting")
        _client_cache = None

    if _disabled:
        return None

    if not MONGO_URL:
        logger.error("[MONGODB] MONGO_URL not configured")
        _disabled = True
        return None

    try:
        client = MongoClient(MONGO_URL, **CLIENT_OPTIONS)
        client.admin.command('ping')
    except (ConnectionFailure, PyMongoError) as e:
        if not _ever_connected:
            logger.error(f"[MONGODB] Initial connection failed: {str(e)[:200]}")
            _disabled = True
        return None

    if not _ever_connected:
        logger.info(f"[MONGODB] Connected to {DATABASE_NAME}")
    _ever_connected = True
    _client_cache = client
    return client
