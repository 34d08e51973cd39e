"""
Key-value store capability handed to the forecasting service, with a Redis-backed implementation that degrades to an in-memory fallback if Redis is unavailable.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from config import REDIS_URL, settings
from store.exceptions import StoreUnavailable

log = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool: ...

    async def delete(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, max_items: int | None = None) -> None:
        if max_items is None:
            max_items = settings.store_fallback_max_items
        self._max_items = int(max_items)
        self._data: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        if key not in self._data and len(self._data) >= self._max_items:
            log.debug("Memory store full (%d items), dropping %s", self._max_items, key)
            return False
        self._data[key] = value
        return True

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


class RedisStore:
    def __init__(self, url: str | None = None, fallback: Optional[MemoryStore] = None) -> None:
        self.url = url or REDIS_URL
        self.fallback = fallback if fallback is not None else MemoryStore()
        self._client: Any = None
        self._using_fallback = False
        self._retry_after_monotonic = 0.0
        self._init_lock = asyncio.Lock()

    @property
    def using_fallback(self) -> bool:
        return self._using_fallback

    async def connect(self, strict: bool = False) -> Any:
        if self._client is not None:
            return self._client
        if time.monotonic() < self._retry_after_monotonic and not strict:
            self._using_fallback = True
            return None

        async with self._init_lock:
            if self._client is not None:
                return self._client
            try:
                import redis.asyncio as aioredis

                timeout = settings.store_redis_op_timeout_seconds
                client = aioredis.from_url(
                    self.url,
                    decode_responses=True,
                    socket_connect_timeout=timeout,
                    socket_timeout=timeout,
                )
                await asyncio.wait_for(client.ping(), timeout=timeout)
                self._client = client
                self._retry_after_monotonic = 0.0
                self._using_fallback = False
                log.info("Redis connected: %s", self.url)
                return self._client
            except Exception as exc:
                self._retry_after_monotonic = time.monotonic() + max(
                    0.0, settings.store_redis_retry_cooldown_seconds
                )
                if strict:
                    raise StoreUnavailable(f"Redis unavailable at {self.url}: {exc}") from exc
                if not self._using_fallback:
                    log.warning("Redis unavailable (%s), using in-memory fallback", exc)
                    self._using_fallback = True
                return None

    async def get(self, key: str) -> Optional[str]:
        client = await self.connect()
        if client is None:
            return await self.fallback.get(key)
        try:
            return await asyncio.wait_for(
                client.get(key), timeout=settings.store_redis_op_timeout_seconds
            )
        except Exception as exc:
            log.debug("Redis GET error %s: %s", key, exc)
            return await self.fallback.get(key)

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        client = await self.connect()
        if client is None:
            return await self.fallback.set(key, value, ttl)
        timeout = settings.store_redis_op_timeout_seconds
        try:
            if ttl:
                await asyncio.wait_for(client.setex(key, ttl, value), timeout=timeout)
            else:
                await asyncio.wait_for(client.set(key, value), timeout=timeout)
            return True
        except Exception as exc:
            log.debug("Redis SET error %s: %s", key, exc)
            return await self.fallback.set(key, value, ttl)

    async def delete(self, key: str) -> None:
        client = await self.connect()
        await self.fallback.delete(key)
        if client is None:
            return
        try:
            await asyncio.wait_for(
                client.delete(key), timeout=settings.store_redis_op_timeout_seconds
            )
        except Exception as exc:
            log.debug("Redis DEL error %s: %s", key, exc)

    async def aclose(self) -> None:
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()
