"""Thread-safe header store.

Headers may be updated from a background config reload while the REPL reads
them for an outgoing call, so every access goes through one lock.
"""

from __future__ import annotations

import logging
import threading

from protonav.entity import Header

logger = logging.getLogger(__name__)


class HeaderStore:
    """Mapping of header key to :class:`Header`, safe for concurrent use."""

    def __init__(self) -> None:
        self._headers: dict[str, Header] = {}
        self._lock = threading.Lock()

    def add(self, header: Header) -> None:
        """Insert *header*, replacing any existing value for its key."""
        with self._lock:
            self._headers[header.key] = Header(key=header.key, value=header.value)
        logger.debug("Set header %r", header.key)

    def remove(self, key: str) -> None:
        """Delete *key*. Removing an absent key does nothing."""
        with self._lock:
            removed = self._headers.pop(key, None)
        if removed is not None:
            logger.debug("Removed header %r", key)

    def list(self) -> list[Header]:
        """Snapshot of all headers as fresh copies, sorted by key."""
        with self._lock:
            snapshot = [Header(key=h.key, value=h.value) for h in self._headers.values()]
        snapshot.sort(key=lambda h: h.key)
        return snapshot

    def __len__(self) -> int:
        with self._lock:
            return len(self._headers)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._headers
