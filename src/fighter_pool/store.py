"""Key/value store - JSON files with optional expiry, one file per key."""

import json
import logging
import re
import time
from pathlib import Path
from typing import Any, List, Optional

from src.fighter_pool.config import FIGHTERS_KEY, STORE_DIR, STORE_PREFIX

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class JsonStore:
    """Small JSON key/value store with TTL support.

    Each entry is written as ``{"v": value, "t": written_at, "e": expires_at}``
    where times are epoch seconds and ``e`` is ``None`` for entries that
    never expire.
    """

    def __init__(self, storage_dir: Optional[Path] = None, clock=time.time):
        self.storage_dir = Path(storage_dir or STORE_DIR)
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        self._clock = clock

    def _path(self, key: str) -> Path:
        safe_key = _UNSAFE_KEY_CHARS.sub("_", key)
        return self.storage_dir / f"{STORE_PREFIX}{safe_key}.json"

    def set_json(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> Any:
        """Store *value* under *key*, optionally expiring after *ttl_seconds*.

        Returns:
            The stored value, so calls can be chained.
        """
        now = self._clock()
        entry = {
            "v": value,
            "t": now,
            "e": now + ttl_seconds if isinstance(ttl_seconds, (int, float)) else None,
        }
        filepath = self._path(key)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(entry, f, indent=2)

        logger.debug("Stored key %r at %s", key, filepath)
        return value

    def get_json(self, key: str) -> Optional[Any]:
        """Read the value stored under *key*.

        Returns:
            The value, or None when the key is missing, expired, or corrupt.
            Expired entries are removed.
        """
        filepath = self._path(key)
        if not filepath.exists():
            return None

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                entry = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Corrupt store entry %s: %s", filepath, e)
            return None

        if not isinstance(entry, dict):
            return None

        expires_at = entry.get("e")
        if expires_at and self._clock() > expires_at:
            logger.info("Store key %r expired; removing", key)
            self.remove(key)
            return None

        return entry.get("v")

    def remove(self, key: str) -> bool:
        """Delete *key*. Returns True if something was removed."""
        filepath = self._path(key)
        if not filepath.exists():
            return False
        filepath.unlink()
        return True


def load_fighters(store: JsonStore, key: str = FIGHTERS_KEY) -> List:
    """Read the raw fighter collection; anything but a list yields []."""
    data = store.get_json(key)
    if isinstance(data, list):
        return list(data)
    if data is not None:
        logger.warning("Store key %r does not hold a list; ignoring", key)
    return []
