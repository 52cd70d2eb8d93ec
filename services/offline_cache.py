"""Offline cache of API responses.

Entries are stored as {"data": ..., "timestamp": epoch_seconds} under one JSON
file and expire after OFFLINE_CACHE_TTL_SECONDS. Expired entries are dropped
the first time they are read. Writes hold `persistence.lock`, since every
browser session shares the file.
"""
import logging
import time
from typing import Any, Optional

from domain.constants import OFFLINE_CACHE_TTL_SECONDS
from services import persistence

logger = logging.getLogger(__name__)

MATCHES = 'matches'
STANDINGS = 'standings'
TEAMS = 'teams'
PLAYERS = 'players'
LEAGUES = 'leagues'
SPORTS = 'sports'
USER_TEAMS = 'user_teams'


def _key(name: str, user_id: Optional[str] = None) -> str:
    return f"{name}_{user_id}" if user_id else name


def _is_valid(timestamp: float, now: Optional[float] = None) -> bool:
    now = time.time() if now is None else now
    return now - timestamp < OFFLINE_CACHE_TTL_SECONDS


def put(name: str, data: Any, user_id: Optional[str] = None):
    try:
        with persistence.lock('offline_cache'):
            entries = persistence.load('offline_cache', {})
            entries[_key(name, user_id)] = {'data': data, 'timestamp': time.time()}
            persistence.atomic_write('offline_cache', entries)
    except OSError as e:
        logger.warning("Failed to cache %s: %s", name, e)


def get(name: str, user_id: Optional[str] = None, default: Any = None) -> Any:
    key = _key(name, user_id)
    entry = persistence.load('offline_cache', {}).get(key)
    if not isinstance(entry, dict):
        return default
    if not _is_valid(float(entry.get('timestamp', 0))):
        with persistence.lock('offline_cache'):
            entries = persistence.load('offline_cache', {})
            entries.pop(key, None)
            persistence.atomic_write('offline_cache', entries)
        return default
    data = entry.get('data')
    return default if data is None else data


def clear_all():
    with persistence.lock('offline_cache'):
        persistence.remove('offline_cache')
