"""Handle for a live Firestore watch."""

from __future__ import annotations

import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class Subscription:
    """Wraps a Firestore ``Watch`` so it can be released exactly once."""

    def __init__(self, watch: Any, name: str) -> None:
        self._watch = watch
        self._lock = threading.Lock()
        self.name = name

    @property
    def active(self) -> bool:
        return self._watch is not None

    def unsubscribe(self) -> None:
        """Release the underlying watch. Calling this twice is a no-op."""
        with self._lock:
            watch, self._watch = self._watch, None
        if watch is None:
            return
        try:
            watch.unsubscribe()
        except Exception as e:
            logger.error(f"Error releasing subscription {self.name}: {e}")
        else:
            logger.info(f"Subscription {self.name} released.")
