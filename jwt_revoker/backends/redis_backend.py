"""Redis-backed membership store.

Each revoked key is stored as ``revoked:<key>``. Membership is exact, so the
false-positive rate is zero. ``redis.asyncio.Redis`` draws a connection from
its pool per command and is safe to share between request handlers.
"""

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from jwt_revoker.core.exceptions import BackendError, BackendReason
from jwt_revoker.utils.logging import get_logger

logger = get_logger(__name__)

_REVOKED_PREFIX = b"revoked:"


def _translate_redis_error(operation: str, exc: RedisError) -> BackendError:
    if isinstance(exc, RedisConnectionError | RedisTimeoutError):
        return BackendError(BackendReason.CONNECTION_FAILED, f"{operation}: {exc}")
    return BackendError(BackendReason.REQUEST_FAILED, f"{operation}: {exc}")


class RedisMembershipBackend:
    """Membership backend stored in Redis."""

    def __init__(self, redis: Redis):
        self.redis = redis

    @classmethod
    def from_url(cls, url: str, timeout: float) -> "RedisMembershipBackend":
        """Create the backend with socket timeouts bounding every command."""
        return cls(
            Redis.from_url(url, socket_timeout=timeout, socket_connect_timeout=timeout)
        )

    def _make_key(self, key: bytes) -> bytes:
        return _REVOKED_PREFIX + key

    async def verify(self) -> None:
        try:
            await self.redis.ping()  # type: ignore[misc]  # redis.asyncio typing quirk
        except RedisError as exc:
            raise _translate_redis_error("PING", exc) from exc

    async def add(self, key: bytes) -> None:
        try:
            await self.redis.set(self._make_key(key), b"1")
        except RedisError as exc:
            raise _translate_redis_error("SET", exc) from exc

    async def check(self, key: bytes) -> bool:
        try:
            return await self.redis.exists(self._make_key(key)) > 0
        except RedisError as exc:
            raise _translate_redis_error("EXISTS", exc) from exc

    async def close(self) -> None:
        await self.redis.aclose()
        logger.info("backend.closed", backend="redis")
