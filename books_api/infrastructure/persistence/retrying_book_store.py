"""Retrying BookStore: wraps another BookStore with bounded exponential backoff.

Invariants:
    - Only StoreError with retryable=True is retried
    - At most policy.max_retries retries (max_retries + 1 attempts in total)
    - The last error is re-raised unchanged once retries are exhausted
"""

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import structlog

from ...application.ports.outbound import AttributeMap, BookStore
from ...domain.exceptions import StoreError

logger = structlog.get_logger()

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Exponential backoff with ±25% jitter, capped at max_delay_ms."""

    max_retries: int = 5
    base_delay_ms: int = 100
    max_delay_ms: int = 10_000

    def delay_seconds(self, attempt: int) -> float:
        delay = (2**attempt) * self.base_delay_ms * random.uniform(0.75, 1.25)  # nosec B311
        return min(self.max_delay_ms, delay) / 1000


class RetryingBookStore(BookStore):
    """BookStore decorator adding retries; callers see the same contract."""

    def __init__(self, inner: BookStore, policy: RetryPolicy | None = None) -> None:
        self._inner = inner
        self._policy = policy or RetryPolicy()

    @property
    def inner(self) -> BookStore:
        return self._inner

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    async def connect(self) -> None:
        await self._inner.connect()

    async def close(self) -> None:
        await self._inner.close()

    async def get_item(self, table_name: str, key: AttributeMap) -> AttributeMap | None:
        return await self._with_retries("get_item", lambda: self._inner.get_item(table_name, key))

    async def put_item(self, table_name: str, item: AttributeMap) -> None:
        await self._with_retries("put_item", lambda: self._inner.put_item(table_name, item))

    async def delete_item(self, table_name: str, key: AttributeMap) -> None:
        await self._with_retries("delete_item", lambda: self._inner.delete_item(table_name, key))

    async def _with_retries(self, operation: str, call: Callable[[], Awaitable[T]]) -> T:
        attempt = 0
        while True:
            try:
                return await call()
            except StoreError as e:
                if not e.retryable or attempt >= self._policy.max_retries:
                    raise
                delay = self._policy.delay_seconds(attempt)
                logger.warning(
                    "Transient store error, retrying",
                    operation=operation,
                    error_code=e.code,
                    attempt=attempt + 1,
                    delay_ms=round(delay * 1000),
                )
                await asyncio.sleep(delay)
                attempt += 1
