"""Backend query cache built on ``st.cache_data``.

Query keys are tuples such as ``("clients",)`` or ``("clients", "42")``.
Cached answers are scoped to the logged-in user and expire after the
configured TTL. Every key prefix carries a generation number that is part of
the cached call; a mutation bumps the generations of the prefixes it touches
so that the next read of any key under them refetches.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Tuple

import streamlit as st

LOGGER = logging.getLogger(__name__)

QueryKey = Tuple[Hashable, ...]

MAX_ENTRIES = 512

# Shared by every browser session of the server process
_generations: Dict[QueryKey, int] = {}
_scope_generations: Dict[str, int] = {}
_lock = threading.Lock()
_runners: Dict[float, Callable[..., Any]] = {}


def _run_query(scope: str, key: QueryKey, versions: Tuple[int, ...], _loader: Callable[[], Any]) -> Any:
    LOGGER.debug("Loading %s", key)
    return _loader()


def _runner(ttl_seconds: float) -> Callable[..., Any]:
    runner = _runners.get(ttl_seconds)
    if runner is None:
        runner = st.cache_data(ttl=ttl_seconds, max_entries=MAX_ENTRIES, show_spinner=False)(_run_query)
        _runners[ttl_seconds] = runner
    return runner


def _versions(scope: str, key: QueryKey) -> Tuple[int, ...]:
    prefixes = tuple(_generations.get(key[:n], 0) for n in range(1, len(key) + 1))
    return (_scope_generations.get(scope, 0),) + prefixes


def _matches(key: QueryKey, prefixes: Tuple[QueryKey, ...]) -> bool:
    return any(key[: len(p)] == tuple(p) for p in prefixes)


@dataclass
class QueryCache:
    ttl_seconds: float = 30.0
    scope: str = "anonymous"
    _fetched: Dict[QueryKey, Tuple[int, ...]] = field(default_factory=dict)

    def fetch(self, key: QueryKey, loader: Callable[[], Any]) -> Any:
        """Cached answer for ``key``; ``loader`` runs on a miss. Failures are not cached."""
        key = tuple(key)
        versions = _versions(self.scope, key)
        value = _runner(self.ttl_seconds)(self.scope, key, versions, loader)
        self._fetched[key] = versions
        return value

    def invalidate(self, *prefixes: QueryKey) -> int:
        """Make every key under one of the prefixes refetch; returns how many this session held."""
        dropped = sum(1 for key in self._fetched if key in self and _matches(key, prefixes))
        with _lock:
            for prefix in prefixes:
                prefix = tuple(prefix)
                _generations[prefix] = _generations.get(prefix, 0) + 1
        if dropped:
            LOGGER.debug("Invalidated %d cached queries for %s", dropped, prefixes)
        return dropped

    def clear(self) -> None:
        """Drop everything cached for this scope."""
        with _lock:
            _scope_generations[self.scope] = _scope_generations.get(self.scope, 0) + 1
        self._fetched.clear()

    def __contains__(self, key: QueryKey) -> bool:
        key = tuple(key)
        return self._fetched.get(key) == _versions(self.scope, key)

    def __len__(self) -> int:
        return sum(1 for key in self._fetched if key in self)
