"""Thin TTL cache wrapper the fetchers share."""

import logging
import sqlite3
from typing import Any

from fishcast.storage import cache_repo

logger = logging.getLogger(__name__)


class ResponseCache:
    """Reads and writes JSON payloads; a None connection disables caching."""

    def __init__(self, conn: sqlite3.Connection | None, enabled: bool = True):
        self.conn = conn
        self.enabled = enabled and conn is not None

    def get(self, key: str) -> Any | None:
        if not self.enabled:
            return None
        value = cache_repo.cache_get(self.conn, key)
        if value is not None:
            logger.debug("Cache hit: %s", key)
        return value

    def set(self, key: str, value: Any, ttl_minutes: int) -> None:
        if not self.enabled or ttl_minutes <= 0:
            return
        cache_repo.cache_set(self.conn, key, value, ttl_minutes * 60)
