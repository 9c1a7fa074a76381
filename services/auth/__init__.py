"""Authentication: password hashing, user records and login sessions."""

from .auth_service import AuthService
from .password_hasher import PasswordHasher
from .session_registry import (
    InMemorySessionStore,
    RedisSessionStore,
    SessionRecord,
    SessionRegistry,
    SessionStore,
)
from .user_service import UserService

__all__ = [
    "AuthService",
    "InMemorySessionStore",
    "PasswordHasher",
    "RedisSessionStore",
    "SessionRecord",
    "SessionRegistry",
    "SessionStore",
    "UserService",
]
