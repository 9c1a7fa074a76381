"""Session registry: opaque session tokens mapped to user emails."""

from __future__ import annotations

import json
import logging
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


@dataclass
class SessionRecord:
    """A live session as held by a session store."""

    email: str
    created_at: float
    last_seen: float


class SessionStore(Protocol):
    """Storage backend for the session registry."""

    def put(self, token: str, record: SessionRecord, ttl: int) -> None: ...

    def get(self, token: str) -> SessionRecord | None: ...

    def delete(self, token: str) -> None: ...


class InMemorySessionStore:
    """Process-local session store.

    Sessions vanish on restart and are not shared between processes.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._sessions: dict[str, tuple[SessionRecord, float]] = {}
        self._lock = threading.Lock()

    def put(self, token: str, record: SessionRecord, ttl: int) -> None:
        with self._lock:
            self._sessions[token] = (record, self._clock() + ttl)

    def get(self, token: str) -> SessionRecord | None:
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                return None
            record, expires_at = entry
            if self._clock() >= expires_at:
                del self._sessions[token]
                return None
            return record

    def delete(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        """Drop expired sessions.

        Returns:
            Number of sessions removed
        """
        now = self._clock()
        with self._lock:
            expired = [token for token, (_, expires_at) in self._sessions.items() if now >= expires_at]
            for token in expired:
                del self._sessions[token]
        if expired:
            logger.info(f"Purged {len(expired)} expired sessions")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


class RedisSessionStore:
    """Session store shared between processes through Redis.

    Expiry of the key itself is left to Redis (``SETEX``).
    """

    def __init__(self, client, key_prefix: str = "session:"):
        """Initialize the store.

        Args:
            client: redis client created with ``decode_responses=True``
            key_prefix: Prefix for session keys
        """
        if client is None:
            raise ValueError("Redis client is required")
        self.client = client
        self.key_prefix = key_prefix

    @classmethod
    def from_url(cls, redis_url: str, key_prefix: str = "session:") -> RedisSessionStore:
        import redis

        return cls(redis.from_url(redis_url, decode_responses=True), key_prefix=key_prefix)

    def _key(self, token: str) -> str:
        return f"{self.key_prefix}{token}"

    def put(self, token: str, record: SessionRecord, ttl: int) -> None:
        payload = json.dumps(
            {"email": record.email, "created_at": record.created_at, "last_seen": record.last_seen}
        )
        self.client.setex(self._key(token), max(int(ttl), 1), payload)

    def get(self, token: str) -> SessionRecord | None:
        raw = self.client.get(self._key(token))
        if not raw:
            return None
        try:
            data = json.loads(raw)
            return SessionRecord(
                email=data["email"],
                created_at=float(data["created_at"]),
                last_seen=float(data["last_seen"]),
            )
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Discarding unreadable session record: {e}")
            self.delete(token)
            return None

    def delete(self, token: str) -> None:
        self.client.delete(self._key(token))


class SessionRegistry:
    """Create, resolve and destroy login sessions.

    Sessions end after ``max_age`` seconds from login, or after
    ``idle_timeout`` seconds without a ``resolve`` (0 disables the idle
    limit).
    """

    def __init__(
        self,
        store: SessionStore,
        max_age: int = 86400,
        idle_timeout: int = 0,
        clock: Callable[[], float] = time.time,
    ):
        if store is None:
            raise ValueError("SessionStore is required")
        if max_age <= 0:
            raise ValueError("max_age must be positive")
        self.store = store
        self.max_age = max_age
        self.idle_timeout = idle_timeout
        self._clock = clock

    def create(self, email: str) -> str:
        """Start a session for ``email`` and return its token."""
        if not email:
            raise ValueError("Email is required")
        token = secrets.token_urlsafe(TOKEN_BYTES)
        now = self._clock()
        self.store.put(token, SessionRecord(email=email, created_at=now, last_seen=now), self._ttl(now, now))
        return token

    def resolve(self, token: str | None) -> str | None:
        """Return the email for a live session, or None."""
        if not token:
            return None
        record = self.store.get(token)
        if record is None:
            return None

        now = self._clock()
        if now - record.created_at >= self.max_age or (
            self.idle_timeout and now - record.last_seen >= self.idle_timeout
        ):
            self.store.delete(token)
            return None

        if self.idle_timeout:
            record.last_seen = now
            self.store.put(token, record, self._ttl(record.created_at, now))
        return record.email

    def destroy(self, token: str | None) -> None:
        """End a session. Unknown or empty tokens are ignored."""
        if token:
            self.store.delete(token)

    def _ttl(self, created_at: float, now: float) -> int:
        remaining = created_at + self.max_age - now
        if self.idle_timeout:
            remaining = min(remaining, self.idle_timeout)
        return max(int(remaining), 1)
