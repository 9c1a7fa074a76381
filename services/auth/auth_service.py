"""Authentication service for register/login/logout operations."""

import logging
import secrets
from typing import Any

from services.shared.exceptions import InvalidCredentialsError, ValidationError

from .password_hasher import PasswordHasher
from .session_registry import SessionRegistry
from .user_service import UserService

logger = logging.getLogger(__name__)


def _check_credentials(email, password) -> None:
    if not email or not password:
        raise ValidationError("Email and password are required.")
    if not isinstance(email, str) or not isinstance(password, str):
        raise ValidationError("Email and password must be strings.")


class AuthService:
    """Service for authentication operations."""

    def __init__(
        self,
        user_service: UserService,
        session_registry: SessionRegistry,
        password_hasher: PasswordHasher | None = None,
    ):
        """Initialize the auth service.

        Args:
            user_service: UserService instance for user records
            session_registry: SessionRegistry holding live sessions
            password_hasher: PasswordHasher, defaults to scrypt with standard cost
        """
        if not user_service:
            raise ValueError("UserService is required")
        if not session_registry:
            raise ValueError("SessionRegistry is required")
        self.user_service = user_service
        self.session_registry = session_registry
        self.password_hasher = password_hasher or PasswordHasher()
        self._dummy_hash = self.password_hasher.hash(secrets.token_hex(16))

    def register_user(self, email: str, password: str) -> dict[str, Any]:
        """Register a new user.

        Args:
            email: Email address, stored as given
            password: Plain text password (will be hashed)

        Returns:
            Created user without the password hash

        Raises:
            ValidationError: If email or password is empty or not a string
            DuplicateUserError: If the email is already registered
        """
        _check_credentials(email, password)

        user = self.user_service.create_user(email, self.password_hasher.hash(password))
        return {k: v for k, v in user.items() if k != "password_hash"}

    def login_user(self, email: str, password: str) -> tuple[str, dict[str, Any]]:
        """Authenticate a user and open a session.

        Args:
            email: Email address
            password: Plain text password

        Returns:
            Tuple of (session token, user without password hash)

        Raises:
            ValidationError: If email or password is empty or not a string
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        _check_credentials(email, password)

        user = self.user_service.get_user_by_email(email)
        if not user:
            # Unknown emails pay the same scrypt cost as a wrong password
            self.password_hasher.verify(password, self._dummy_hash)
            logger.warning(f"Authentication failed: user not found: {email}")
            raise InvalidCredentialsError()

        if not self.password_hasher.verify(password, user["password_hash"]):
            logger.warning(f"Authentication failed: invalid password for user: {email}")
            raise InvalidCredentialsError()

        token = self.session_registry.create(user["email"])
        logger.info(f"User authenticated: {user['email']} (ID: {user['id']})")
        return token, {k: v for k, v in user.items() if k != "password_hash"}

    def current_user(self, token: str | None) -> str | None:
        """Return the email bound to a session token, or None."""
        return self.session_registry.resolve(token)

    def logout_user(self, token: str | None) -> None:
        """End the session for ``token``. Missing or stale tokens are ignored."""
        email = self.session_registry.resolve(token)
        self.session_registry.destroy(token)
        if email:
            logger.info(f"User logged out: {email}")
