"""A small thread-safe cache of raw response bodies with time-based expiry."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Union

Interval = Union[float, int, timedelta]


@dataclass(frozen=True)
class _Entry:
    created_at: datetime
    stamp: float
    val: bytes


def _seconds(interval: Interval) -> float:
    if isinstance(interval, timedelta):
        seconds = interval.total_seconds()
    else:
        seconds = float(interval)
    if seconds <= 0:
        raise ValueError("cache interval must be positive")
    return seconds


class Cache:
    """Key/value store whose entries are dropped once older than ``interval``.

    A background thread wakes every ``interval`` and removes stale entries;
    a lookup also ignores (and drops) an entry that has already gone stale.
    """

    def __init__(self, interval: Interval) -> None:
        self.interval = _seconds(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.RLock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="pokecache-reaper", daemon=True
        )
        self._reaper.start()

    def __enter__(self) -> "Cache":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier entry."""
        with self._lock:
            self._entries[key] = _Entry(datetime.now(), time.monotonic(), bytes(val))

    def get(self, key: str) -> Optional[bytes]:
        """Return the value stored under ``key``, or None if absent or stale."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._expired(entry, time.monotonic()):
                del self._entries[key]
                return None
            return entry.val

    def list_cache(self) -> None:
        """Print every cached key with the time it was stored."""
        with self._lock:
            entries = list(self._entries.items())
        for key, entry in entries:
            print(f"cache entry: {key} ")
            print(f"created at: {entry.created_at} ")

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        if self._reaper.is_alive() and self._reaper is not threading.current_thread():
            self._reaper.join()

    def _expired(self, entry: _Entry, now: float) -> bool:
        return now - entry.stamp > self.interval

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.interval):
            self._reap()

    def _reap(self) -> None:
        now = time.monotonic()
        with self._lock:
            print(f">> cache size: {len(self._entries)} ")
            for key, entry in list(self._entries.items()):
                elapsed = timedelta(seconds=now - entry.stamp)
                print(f"cache entry: {key} ")
                print(f"created at: {entry.created_at} ")
                print(f"Elapsed time: {elapsed} ")
                if self._expired(entry, now):
                    print("removing entry")
                    del self._entries[key]