"""Memoized descriptor compilation.

Descriptors are usually literals reused across many encode/decode calls,
so compiled schemas are kept per descriptor text.

INVARIANT: at most one Schema instance exists per distinct descriptor text
within a cache. Failed compilations are never cached.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from fragstrings.domain.descriptor import parse_descriptor
from fragstrings.domain.errors import DescriptorError
from fragstrings.domain.types import Schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheInfo:
    """Snapshot of cache counters."""

    hits: int
    misses: int
    size: int


class SchemaCache:
    """Thread-safe descriptor -> Schema memo.

    A hit reads the dict unlocked and only takes the lock to bump the hit
    counter, so :meth:`info` stays exact under concurrency.  Compilation
    happens under the lock and re-checks first.
    """

    def __init__(self) -> None:
        self._schemas: dict[str, Schema] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, descriptor: str) -> Schema:
        """Return the compiled schema for *descriptor*, compiling on first use.

        Raises:
            DescriptorError: If *descriptor* is malformed.
        """
        schema = self._schemas.get(descriptor)
        if schema is not None:
            with self._lock:
                self._hits += 1
            return schema
        with self._lock:
            schema = self._schemas.get(descriptor)
            if schema is not None:
                self._hits += 1
                return schema
            self._misses += 1
            try:
                schema = parse_descriptor(descriptor)
            except DescriptorError as exc:
                logger.debug("Rejected descriptor %r: %s", descriptor, exc.kind)
                raise
            self._schemas[descriptor] = schema
            logger.debug("Compiled descriptor %r", descriptor)
            return schema

    def clear(self) -> None:
        with self._lock:
            self._schemas.clear()
            self._hits = 0
            self._misses = 0

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(hits=self._hits, misses=self._misses, size=len(self._schemas))

    def __contains__(self, descriptor: object) -> bool:
        return descriptor in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)


_default_cache = SchemaCache()


def compile_descriptor(text: str) -> Schema:
    """Compile *text* through the process-wide cache.

    Raises:
        DescriptorError: If *text* violates the descriptor grammar.
    """
    return _default_cache.get(text)


def clear_cache() -> None:
    """Drop every schema from the process-wide cache."""
    _default_cache.clear()


def cache_info() -> CacheInfo:
    return _default_cache.info()
