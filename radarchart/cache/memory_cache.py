"""In-memory TTL cache for rendered chart images

Entries expire a fixed time after insertion. Reads never extend an entry's
life. A daemon thread sweeps expired entries on a separate, longer interval;
until then an expired entry still reads as a miss.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from radarchart.cache.base import ImageCacheBase
from radarchart.logger import ConsoleLogger, Logger
import logging

DEFAULT_TTL_SECONDS = 300
DEFAULT_SWEEP_INTERVAL_SECONDS = 600


@dataclass(frozen=True)
class CacheEntry:
    value: bytes
    expires_at: float


class MemoryImageCache(ImageCacheBase):
    """Thread-safe, time-bounded image cache with no size limit"""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        sweep_interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the cache

        Args:
            ttl_seconds: Lifetime of an entry from insertion
            sweep_interval_seconds: Period of the background purge
            clock: Monotonic time source (overridable for tests)
            logger: Logger instance (defaults to a ConsoleLogger)
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if sweep_interval_seconds <= 0:
            raise ValueError("sweep_interval_seconds must be positive")

        self.ttl_seconds = ttl_seconds
        self.sweep_interval_seconds = sweep_interval_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._sweeper: Optional[threading.Thread] = None
        self.logger = logger or ConsoleLogger(name="image_cache", level=logging.INFO)
        self.logger.debug(
            "Image cache initialized",
            ttl_seconds=ttl_seconds,
            sweep_interval_seconds=sweep_interval_seconds,
        )

    def get(self, key: str) -> Optional[bytes]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if now >= entry.expires_at:
            return None
        return entry.value

    def set(self, key: str, value: bytes) -> None:
        entry = CacheEntry(value=bytes(value), expires_at=self._clock() + self.ttl_seconds)
        with self._lock:
            self._entries[key] = entry

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [key for key, entry in self._entries.items() if now >= entry.expires_at]
            for key in expired:
                del self._entries[key]
            remaining = len(self._entries)
        if expired:
            self.logger.debug("Purged expired cache entries", purged=len(expired), remaining=remaining)
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def is_running(self) -> bool:
        return self._sweeper is not None and self._sweeper.is_alive()

    def start(self) -> None:
        """Start the background sweeper thread (idempotent)"""
        if self.is_running:
            return
        self._stop_event.clear()
        self._sweeper = threading.Thread(
            target=self._sweep_loop, name="image-cache-sweeper", daemon=True
        )
        self._sweeper.start()
        self.logger.info("Cache sweeper started", interval_seconds=self.sweep_interval_seconds)

    def stop(self) -> None:
        """Stop the background sweeper and wait for it to exit"""
        if self._sweeper is None:
            return
        self._stop_event.set()
        self._sweeper.join(timeout=5)
        self._sweeper = None
        self.logger.info("Cache sweeper stopped")

    def _sweep_loop(self) -> None:
        while not self._stop_event.wait(self.sweep_interval_seconds):
            try:
                self.purge_expired()
            except Exception as e:
                self.logger.error("Cache sweep failed", error=str(e), error_type=type(e).__name__)
