# edumate/services/verification_store.py
"""
Storage backends for pending verification codes.

Both backends keep at most one code per email (a new code overwrites the
old one) and an optional "verified" marker per email. A TTL of None means
the entry never expires.
"""
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from redis import Redis
from redis.exceptions import WatchError


class MemoryCodeStore:
    """
    Process-local store. Not shared between workers and lost on restart;
    expired entries are dropped lazily on read.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._codes: Dict[str, Tuple[str, Optional[float]]] = {}
        self._verified: Dict[str, Optional[float]] = {}
        self._lock = threading.Lock()

    def _deadline(self, ttl_seconds: Optional[int]) -> Optional[float]:
        if ttl_seconds is None:
            return None
        return self._clock() + ttl_seconds

    def _expired(self, deadline: Optional[float]) -> bool:
        return deadline is not None and self._clock() >= deadline

    def set_code(self, email: str, code: str, ttl_seconds: Optional[int] = None) -> None:
        with self._lock:
            self._codes[email] = (code, self._deadline(ttl_seconds))

    def get_code(self, email: str) -> Optional[str]:
        with self._lock:
            entry = self._codes.get(email)
            if entry is None:
                return None
            code, deadline = entry
            if self._expired(deadline):
                del self._codes[email]
                return None
            return code

    def delete_code(self, email: str) -> None:
        with self._lock:
            self._codes.pop(email, None)

    def consume_code(self, email: str, code: str) -> bool:
        """Remove the code and return True only if it matches; one lock section."""
        with self._lock:
            entry = self._codes.get(email)
            if entry is None:
                return False
            stored, deadline = entry
            if self._expired(deadline):
                del self._codes[email]
                return False
            if stored != code:
                return False
            del self._codes[email]
            return True

    def mark_verified(self, email: str, ttl_seconds: Optional[int] = None) -> None:
        with self._lock:
            self._verified[email] = self._deadline(ttl_seconds)

    def is_verified(self, email: str) -> bool:
        with self._lock:
            if email not in self._verified:
                return False
            if self._expired(self._verified[email]):
                del self._verified[email]
                return False
            return True

    def clear_verified(self, email: str) -> None:
        with self._lock:
            self._verified.pop(email, None)


class RedisCodeStore:
    """Shared store; expiry is delegated to Redis (SET ... EX)."""

    def __init__(self, client: Redis, prefix: str = "edumate:verification") -> None:
        self._client = client
        self._prefix = prefix

    def _code_key(self, email: str) -> str:
        return f"{self._prefix}:code:{email}"

    def _verified_key(self, email: str) -> str:
        return f"{self._prefix}:verified:{email}"

    def set_code(self, email: str, code: str, ttl_seconds: Optional[int] = None) -> None:
        self._client.set(self._code_key(email), code, ex=ttl_seconds)

    def get_code(self, email: str) -> Optional[str]:
        value = self._client.get(self._code_key(email))
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def delete_code(self, email: str) -> None:
        self._client.delete(self._code_key(email))

    def consume_code(self, email: str, code: str) -> bool:
        """
        Compare-and-delete under WATCH/MULTI. A concurrent write to the key
        aborts the transaction and the comparison is redone.
        """
        key = self._code_key(email)
        with self._client.pipeline() as pipe:
            while True:
                try:
                    pipe.watch(key)
                    stored = pipe.get(key)
                    if isinstance(stored, bytes):
                        stored = stored.decode("utf-8")
                    if stored is None or stored != code:
                        pipe.unwatch()
                        return False
                    pipe.multi()
                    pipe.delete(key)
                    pipe.execute()
                    return True
                except WatchError:
                    continue

    def mark_verified(self, email: str, ttl_seconds: Optional[int] = None) -> None:
        self._client.set(self._verified_key(email), "1", ex=ttl_seconds)

    def is_verified(self, email: str) -> bool:
        return bool(self._client.exists(self._verified_key(email)))

    def clear_verified(self, email: str) -> None:
        self._client.delete(self._verified_key(email))


_redis_conn: Redis | None = None


def get_redis_connection(redis_url: str) -> Redis:
    global _redis_conn
    if _redis_conn is None:
        _redis_conn = Redis.from_url(redis_url, decode_responses=True)
    return _redis_conn
