"""Shared buffer of secure random bytes, refilled in batches."""

import os
import threading

from core.errors import EntropyError
from internal.logging import get_logger

POOL_SIZE_MULTIPLIER = 64

_pool = None
_pool_lock = threading.Lock()


class EntropyPool:
    """Lock-protected byte buffer amortizing calls to the random source.

    The buffer is allocated at `size * multiplier` bytes the first time (or
    whenever a request outgrows it) and refilled in place once fewer than
    `size` unread bytes remain. Unread bytes are discarded on refill, so no
    byte is ever handed out twice.
    """

    def __init__(self, multiplier=POOL_SIZE_MULTIPLIER, source=os.urandom):
        if multiplier < 1:
            raise ValueError(f"pool multiplier must be >= 1, got {multiplier}")
        self.multiplier = multiplier
        self._source = source
        self._lock = threading.Lock()
        self._buffer = bytearray()
        self._cursor = 0
        self._log = get_logger()
        self.allocations = 0
        self.refills = 0
        self.bytes_served = 0

    def _draw(self, size):
        try:
            data = self._source(size)
        except (OSError, NotImplementedError) as exc:
            self._buffer = bytearray()
            self._cursor = 0
            self._log.error("entropy source failed", error=exc, requested=size)
            raise EntropyError(f"secure random source failed: {exc}", requested=size, cause=exc) from exc
        if len(data) != size:
            self._buffer = bytearray()
            self._cursor = 0
            raise EntropyError(f"secure random source returned {len(data)} of {size} bytes", requested=size)
        return data

    def take(self, size):
        """Return `size` bytes no other caller has seen."""
        if size <= 0:
            return b""
        with self._lock:
            if len(self._buffer) < size:
                capacity = size * self.multiplier
                self._buffer = bytearray(self._draw(capacity))
                self._cursor = 0
                self.allocations += 1
                self._log.debug("entropy pool allocated", size=capacity)
            elif self._cursor + size > len(self._buffer):
                self._buffer[:] = self._draw(len(self._buffer))
                self._cursor = 0
                self.refills += 1
                self._log.debug("entropy pool refilled", size=len(self._buffer))

            start = self._cursor
            self._cursor += size
            self.bytes_served += size
            return bytes(self._buffer[start:self._cursor])

    def get_stats(self):
        with self._lock:
            return {
                "size": len(self._buffer),
                "cursor": self._cursor,
                "allocations": self.allocations,
                "refills": self.refills,
                "bytes_served": self.bytes_served,
            }

    @classmethod
    def configure(cls, multiplier=POOL_SIZE_MULTIPLIER, source=os.urandom):
        """Replace the process-wide pool."""
        global _pool
        with _pool_lock:
            _pool = cls(multiplier, source)
        return _pool


def get_pool():
    global _pool
    if _pool is None:
        with _pool_lock:
            if _pool is None:
                _pool = EntropyPool()
    return _pool
