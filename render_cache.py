import asyncio
import hashlib
import json
from typing import Any

class RenderCache:
    def __init__(self, max_entries: int = 128):
        self._cache: dict[str, Any] = {}
        self._max_entries = max_entries
        self._lock = asyncio.Lock()

    @staticmethod
    def make_key(**params) -> str:
        payload = json.dumps(params, sort_keys=True, default=str)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    async def add(self, key: str, value: Any) -> None:
        async with self._lock:
            self._cache.pop(key, None)
            self._cache[key] = value
            # Oldest insertions go first
            while len(self._cache) > self._max_entries:
                self._cache.pop(next(iter(self._cache)))

    async def get(self, key: str) -> Any | None:
        return self._cache.get(key)

    async def remove(self, key: str) -> None:
        async with self._lock:
            self._cache.pop(key, None)

    async def contains(self, key: str) -> bool:
        return key in self._cache

    async def clear(self) -> None:
        async with self._lock:
            self._cache = {}

    def __len__(self):
        return len(self._cache)
