from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Callable


class TranslationCache:
    """Thread-safe LRU of raw statement text to translated statement text."""

    def __init__(self, *, enabled: bool, max_entries: int) -> None:
        self._enabled = bool(enabled)
        self._max_entries = max(1, int(max_entries))
        self._lock = threading.Lock()
        self._entries: OrderedDict[str, str] = OrderedDict()
        self._hits = 0
        self._misses = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def get(self, statement: str) -> str | None:
        if not self._enabled:
            return None
        with self._lock:
            translated = self._entries.get(statement)
            if translated is None:
                self._misses += 1
                return None
            self._hits += 1
            self._entries.move_to_end(statement, last=True)
            return translated

    def set(self, statement: str, translated: str) -> None:
        if not self._enabled:
            return
        with self._lock:
            self._entries[statement] = translated
            self._entries.move_to_end(statement, last=True)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def get_or_translate(self, statement: str, loader: Callable[[str], str]) -> str:
        cached = self.get(statement)
        if cached is not None:
            return cached
        # Loader runs outside the lock; translation is pure.
        translated = loader(statement)
        self.set(statement, translated)
        return translated

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "entries": len(self._entries),
            }
