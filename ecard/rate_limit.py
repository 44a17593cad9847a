"""Fixed-window rate limiting for the public RSVP endpoint.

Redis keys:
- ecard:ratelimit:{key} - request counter for the current window, expires with the window
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as aioredis
from fastapi import Depends, Request

from ecard.config.settings import settings
from ecard.errors import RateLimitedError

logger = logging.getLogger(__name__)

KEY_PREFIX = "ecard:ratelimit"


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int
    reset_at: float

    @property
    def retry_after(self) -> int:
        return max(1, int(self.reset_at - time.time() + 0.999))


class RateLimiter(ABC):
    @abstractmethod
    async def consume(self, key: str, max_requests: int, window_seconds: int) -> RateLimitResult:
        """Count one request against ``key`` and report whether it fits in the window."""
        raise NotImplementedError


class UnlimitedRateLimiter(RateLimiter):
    """Used when no Redis is configured."""

    async def consume(self, key: str, max_requests: int, window_seconds: int) -> RateLimitResult:
        return RateLimitResult(
            allowed=True, remaining=max_requests, reset_at=time.time() + window_seconds
        )


class RedisRateLimiter(RateLimiter):
    def __init__(self, client: aioredis.Redis) -> None:
        self._redis = client

    async def consume(self, key: str, max_requests: int, window_seconds: int) -> RateLimitResult:
        redis_key = f"{KEY_PREFIX}:{key}"
        async with self._redis.pipeline(transaction=True) as pipe:
            pipe.incr(redis_key)
            # only the first hit of a window starts the clock
            pipe.expire(redis_key, window_seconds, nx=True)
            pipe.ttl(redis_key)
            count, _, ttl = await pipe.execute()

        if ttl is None or ttl < 0:
            ttl = window_seconds
        return RateLimitResult(
            allowed=count <= max_requests,
            remaining=max(0, max_requests - count),
            reset_at=time.time() + ttl,
        )


@lru_cache
def get_redis_client() -> aioredis.Redis:
    return aioredis.from_url(settings.redis_url, decode_responses=True)


def get_rate_limiter() -> RateLimiter:
    """Dependency to get the rate limiter."""
    if not settings.redis_url:
        return UnlimitedRateLimiter()
    return RedisRateLimiter(get_redis_client())


def client_ip(request: Request) -> str:
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop
    real_ip = request.headers.get("x-real-ip", "").strip()
    if real_ip:
        return real_ip
    if request.client:
        return request.client.host
    return "unknown"


async def enforce_rsvp_rate_limit(
    request: Request,
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> None:
    key = f"rsvp:{client_ip(request)}"
    result = await limiter.consume(
        key, settings.rsvp_rate_limit_max, settings.rsvp_rate_limit_window_seconds
    )
    if not result.allowed:
        logger.warning(f"Rate limit exceeded for {key}")
        raise RateLimitedError(retry_after=result.retry_after)
